"""Component registry shared by the bootstrap participants."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Self

from propbind.errors import (
    ComponentCreationError,
    ComponentNotFoundError,
    DuplicateComponentError,
    RegistryClosedError,
)
from propbind.services.lifecycle import ComponentDefinition, ComponentRole
from propbind.sources.property_sources import PropertySources

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Named registry of component definitions and their singleton instances.

    The registry is the explicit context of one bootstrap: create it at the
    start, hand it to every participant, and close it when the owning scope
    ends. It also carries the ordered property sources that configuration
    types are bound from.

    Registering a name twice is an error. Participants that must be
    idempotent check ``contains()`` first.

    Example:
        >>> with ComponentRegistry(property_sources) as registry:
        ...     ConfigurationRegistrar().register_all(metadata, registry)
        ...     server = registry.get_component_of_type(ServerProperties)

    """

    def __init__(self, property_sources: Iterable[Any] | None = None) -> None:
        """Initialise the registry.

        Args:
            property_sources: Property sources, highest precedence first

        """
        # Definitions keep registration order
        self._definitions: dict[str, ComponentDefinition[Any]] = {}
        self._singletons: dict[str, Any] = {}
        self.property_sources = (
            property_sources
            if isinstance(property_sources, PropertySources)
            else PropertySources(property_sources or ())
        )
        self._closed = False
        logger.debug("ComponentRegistry initialized")

    def contains(self, name: str) -> bool:
        """Check whether a component is registered under ``name``."""
        return name in self._definitions

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def register[T](self, name: str, definition: ComponentDefinition[T]) -> None:
        """Register a component definition.

        Args:
            name: Unique component name
            definition: Definition containing type, factory, role and lifetime

        Raises:
            DuplicateComponentError: If the name is already registered
            RegistryClosedError: If the registry has been closed

        """
        self._ensure_open()
        if name in self._definitions:
            msg = f"Component '{name}' is already registered"
            raise DuplicateComponentError(msg)
        self._definitions[name] = definition
        logger.debug(
            "Registered component: %s (%s, %s, %s)",
            name,
            definition.component_type.__name__,
            definition.role,
            definition.lifetime,
        )

    def get_definition(self, name: str) -> ComponentDefinition[Any]:
        """Return the definition registered under ``name``.

        Raises:
            ComponentNotFoundError: If nothing is registered under the name

        """
        try:
            return self._definitions[name]
        except KeyError:
            msg = f"No component registered under '{name}'"
            raise ComponentNotFoundError(msg) from None

    def names(self) -> list[str]:
        """Return registered component names in registration order."""
        return list(self._definitions)

    def definitions_of_role(
        self, role: ComponentRole
    ) -> dict[str, ComponentDefinition[Any]]:
        """Return the definitions registered with the given role."""
        return {
            name: definition
            for name, definition in self._definitions.items()
            if definition.role == role
        }

    def get_component(self, name: str) -> Any:  # noqa: ANN401
        """Get a component instance from the registry.

        Args:
            name: The name the component was registered under

        Returns:
            Component instance

        Raises:
            ComponentNotFoundError: If nothing is registered under the name
            ComponentCreationError: If the factory returns None

        """
        self._ensure_open()
        definition = self.get_definition(name)

        if definition.lifetime == "singleton":
            if name not in self._singletons:
                logger.debug("Creating singleton component: %s", name)
                self._singletons[name] = self._create(name, definition)
            return self._singletons[name]

        logger.debug("Creating transient component: %s", name)
        return self._create(name, definition)

    def get_component_of_type[T](self, component_type: type[T]) -> T:
        """Get the single component whose definition declares ``component_type``.

        Raises:
            ComponentNotFoundError: If no definition, or more than one, matches

        """
        matches = [
            name
            for name, definition in self._definitions.items()
            if issubclass(definition.component_type, component_type)
        ]
        if len(matches) != 1:
            msg = (
                f"Expected exactly one component of type {component_type.__name__}, "
                f"found {len(matches)}: {matches}"
            )
            raise ComponentNotFoundError(msg)
        return self.get_component(matches[0])

    def close(self) -> None:
        """Tear down the registry, dropping definitions and cached singletons."""
        if self._closed:
            return
        logger.debug(
            "Closing ComponentRegistry with %d component(s)", len(self._definitions)
        )
        self._singletons.clear()
        self._definitions.clear()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def _create(self, name: str, definition: ComponentDefinition[Any]) -> Any:  # noqa: ANN401
        instance = definition.factory.create()
        if instance is None:
            logger.error("Factory for %s returned None - component unavailable", name)
            msg = f"Factory for {name} returned None - component unavailable"
            raise ComponentCreationError(msg)
        return instance

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistryClosedError("ComponentRegistry is closed")
