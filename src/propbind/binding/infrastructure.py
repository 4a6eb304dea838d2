"""Infrastructure components that support configuration binding.

Each component occupies a well-known slot in the registry. Registration is
idempotent: when the slot is already occupied, nothing is written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from propbind.binding.properties import get_prefix, is_configuration_properties
from propbind.errors import BindError
from propbind.services import (
    CallableFactory,
    ComponentDefinition,
    ComponentRegistry,
    ComponentRole,
)

logger = logging.getLogger(__name__)

BINDING_POST_PROCESSOR_NAME = "propbind.binding.infrastructure.BindingPostProcessor"
BOUND_PROPERTIES_NAME = "propbind.binding.infrastructure.BoundConfigurationProperties"


class BoundConfigurationProperties:
    """Tracks configuration objects that have been bound, by component name."""

    def __init__(self) -> None:
        self._bound: dict[str, Any] = {}

    def add(self, name: str, instance: Any) -> None:  # noqa: ANN401
        self._bound[name] = instance

    def get(self, name: str) -> Any | None:  # noqa: ANN401
        return self._bound.get(name)

    def all(self) -> Mapping[str, Any]:
        return MappingProxyType(self._bound)

    @staticmethod
    def register(registry: ComponentRegistry) -> None:
        """Register the tracker unless its slot is already occupied."""
        if registry.contains(BOUND_PROPERTIES_NAME):
            return
        registry.register(
            BOUND_PROPERTIES_NAME,
            ComponentDefinition(
                BoundConfigurationProperties,
                CallableFactory(BoundConfigurationProperties),
                role=ComponentRole.INFRASTRUCTURE,
            ),
        )


class BindingPostProcessor:
    """Binds property values from the registry onto configuration types.

    Values are read from ``registry.property_sources`` under the prefix the
    type declares. Coercion and validation are done by pydantic: models are
    validated with ``model_validate`` and any other marked type (dataclasses,
    TypedDicts) through a ``TypeAdapter``.
    """

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry

    def bind[T](self, config_type: type[T]) -> T:
        """Create an instance of ``config_type`` from the bound property values.

        Raises:
            BindError: If the property values do not validate against the type,
                or pydantic cannot build a validator for it

        """
        prefix = get_prefix(config_type)
        values = self._registry.property_sources.subset(prefix)
        logger.debug(
            "Binding %d value(s) under '%s' onto %s",
            len(values),
            prefix,
            config_type.__name__,
        )
        try:
            if issubclass(config_type, BaseModel):
                return config_type.model_validate(values)
            return TypeAdapter(config_type).validate_python(values)
        except ValidationError as e:
            msg = f"Failed to bind properties under '{prefix}' onto {config_type.__name__}: {e}"
            raise BindError(msg, e) from e
        except PydanticUserError as e:
            msg = f"{config_type.__name__} cannot be bound by pydantic: {e}"
            raise BindError(msg, e) from e

    def post_process(self, name: str, component: Any) -> Any:  # noqa: ANN401
        """Record a bound configuration object in the tracker.

        Components that are not configuration objects are returned unchanged.
        """
        if is_configuration_properties(type(component)) and self._registry.contains(
            BOUND_PROPERTIES_NAME
        ):
            tracker: BoundConfigurationProperties = self._registry.get_component(
                BOUND_PROPERTIES_NAME
            )
            tracker.add(name, component)
        return component

    @staticmethod
    def register(registry: ComponentRegistry) -> None:
        """Register the post-processor unless its slot is already occupied."""
        if registry.contains(BINDING_POST_PROCESSOR_NAME):
            return
        registry.register(
            BINDING_POST_PROCESSOR_NAME,
            ComponentDefinition(
                BindingPostProcessor,
                CallableFactory(lambda: BindingPostProcessor(registry)),
                role=ComponentRole.INFRASTRUCTURE,
            ),
        )


class MethodValidationExcludeFilter:
    """Decides which component types are excluded from method-level validation."""

    def __init__(self, predicate: Callable[[type], bool]) -> None:
        self._predicate = predicate

    @classmethod
    def by_marker(cls, marker: Callable[[type], bool]) -> MethodValidationExcludeFilter:
        """Exclude every type for which ``marker`` returns True."""
        return cls(marker)

    def is_excluded(self, component_type: type) -> bool:
        return self._predicate(component_type)


def register_infrastructure(registry: ComponentRegistry) -> None:
    """Ensure the binding post-processor and bound-properties tracker exist."""
    BindingPostProcessor.register(registry)
    BoundConfigurationProperties.register(registry)
