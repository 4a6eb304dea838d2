"""Component registry infrastructure."""

from propbind.services.lifecycle import ComponentDefinition, ComponentRole
from propbind.services.protocols import CallableFactory, ComponentFactory
from propbind.services.registry import ComponentRegistry

__all__ = [
    "CallableFactory",
    "ComponentDefinition",
    "ComponentFactory",
    "ComponentRegistry",
    "ComponentRole",
]
