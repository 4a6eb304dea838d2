"""Registration of one configuration type as a bindable component."""

from __future__ import annotations

import logging
from typing import Protocol

from propbind.binding.infrastructure import (
    BINDING_POST_PROCESSOR_NAME,
    BindingPostProcessor,
)
from propbind.binding.properties import get_prefix, is_configuration_properties
from propbind.errors import RegistrationDelegationError
from propbind.services import (
    CallableFactory,
    ComponentDefinition,
    ComponentRegistry,
    ComponentRole,
)

logger = logging.getLogger(__name__)


class TypeRegistrar(Protocol):
    """Protocol for registrars that register one configuration type at a time."""

    def register(self, config_type: type) -> None:
        """Create the registry entries needed to bind ``config_type``."""
        ...


def component_name(config_type: type) -> str:
    """Return the registry name of a configuration type.

    The name is ``"{prefix}-{module}.{qualname}"``, or the qualified type name
    alone when the prefix is empty.
    """
    qualified = f"{config_type.__module__}.{config_type.__qualname__}"
    prefix = get_prefix(config_type)
    return f"{prefix}-{qualified}" if prefix else qualified


class ConfigurationPropertiesTypeRegistrar:
    """Registers configuration types as singleton components bound on first use."""

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry

    def register(self, config_type: type) -> None:
        """Register ``config_type`` unless a component of that name exists.

        Raises:
            RegistrationDelegationError: If the type lacks the binding marker

        """
        if not is_configuration_properties(config_type):
            msg = (
                f"No @configuration_properties marker found on "
                f"'{getattr(config_type, '__qualname__', config_type)}'"
            )
            raise RegistrationDelegationError(msg)

        name = component_name(config_type)
        if self._registry.contains(name):
            logger.debug("Configuration type %s already registered", name)
            return

        registry = self._registry

        def create() -> object:
            processor: BindingPostProcessor = registry.get_component(
                BINDING_POST_PROCESSOR_NAME
            )
            return processor.post_process(name, processor.bind(config_type))

        registry.register(
            name,
            ComponentDefinition(
                config_type, CallableFactory(create), role=ComponentRole.APPLICATION
            ),
        )
        logger.debug("Registered configuration type %s", name)
