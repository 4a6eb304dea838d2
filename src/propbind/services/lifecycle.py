"""Component definitions and their lifecycle settings."""

from dataclasses import dataclass
from enum import StrEnum

from propbind.services.protocols import ComponentFactory


class ComponentRole(StrEnum):
    """Role of a component inside the registry.

    Infrastructure components support the framework itself and are not meant
    to be looked up by application code.
    """

    APPLICATION = "application"
    INFRASTRUCTURE = "infrastructure"


@dataclass(frozen=True)
class ComponentDefinition[T]:
    """Definition of a component registered under a name.

    Attributes:
        component_type: The type of component the factory produces
        factory: Factory that creates component instances
        role: Application or infrastructure component
        lifetime: Component lifetime ("singleton" or "transient")

    """

    component_type: type[T]
    factory: ComponentFactory[T]
    role: ComponentRole = ComponentRole.APPLICATION
    lifetime: str = "singleton"
