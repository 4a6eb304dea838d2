"""Registrar for configuration types declared by EnableConfigurationProperties.

The registrar makes sure the binding infrastructure exists in the registry,
then hands every declared configuration type to a type registrar:

1. Binding post-processor and bound-properties tracker, if absent
2. Method validation exclude filter, if absent
3. Declared types, deduplicated, without ``NO_TYPE``
4. One ``register(type)`` call per distinct type

Declared types are read and checked before the registry is touched, so bad
metadata aborts the bootstrap with the registry unchanged. Failures from the
type registrar are not caught; the first one stops the remaining registrations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from propbind.binding.infrastructure import (
    MethodValidationExcludeFilter,
    register_infrastructure,
)
from propbind.binding.metadata import NO_TYPE, AnnotationView, EnableConfigurationProperties
from propbind.binding.properties import is_configuration_properties
from propbind.binding.type_registrar import (
    ConfigurationPropertiesTypeRegistrar,
    TypeRegistrar,
)
from propbind.errors import MetadataExtractionError
from propbind.services import (
    CallableFactory,
    ComponentDefinition,
    ComponentRegistry,
    ComponentRole,
)

logger = logging.getLogger(__name__)

METHOD_VALIDATION_EXCLUDE_FILTER_NAME = (
    "propbind.binding.registrar.ConfigurationRegistrar.methodValidationExcludeFilter"
)
"""Registry name of the exclude filter: registrar namespace plus attribute name."""


def get_types(metadata: AnnotationView) -> list[type]:
    """Extract the distinct configuration types declared in ``metadata``.

    Types are returned in first-declaration order; repeats and ``NO_TYPE``
    are dropped.

    Raises:
        MetadataExtractionError: If a declared value list cannot be read or
            holds something that is not a class

    """
    types: dict[type, None] = {}
    try:
        for declaration in metadata.declarations_of(EnableConfigurationProperties):
            for declared in _declared_values(declaration, metadata):
                if declared is None or declared is NO_TYPE:
                    continue
                if not isinstance(declared, type):
                    msg = (
                        f"EnableConfigurationProperties in {metadata.source or 'metadata'} "
                        f"declares {declared!r}, which is not a class"
                    )
                    raise MetadataExtractionError(msg)
                types.setdefault(declared, None)
    except MetadataExtractionError:
        raise
    except Exception as e:
        msg = f"Failed to read declared configuration types: {e}"
        raise MetadataExtractionError(msg) from e
    return list(types)


def _declared_values(
    declaration: EnableConfigurationProperties, metadata: AnnotationView
) -> Iterable[object]:
    value = declaration.value
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        msg = (
            f"EnableConfigurationProperties in {metadata.source or 'metadata'} "
            f"has a malformed value list: {value!r}"
        )
        raise MetadataExtractionError(msg)
    return value


class ConfigurationRegistrar:
    """Registers the binding infrastructure and the declared configuration types.

    Safe to call once per bootstrap entry point against a shared registry:
    infrastructure slots are only written when empty, and types that already
    have a component are skipped by the type registrar.

    Example:
        >>> metadata = AnnotationView.of(
        ...     EnableConfigurationProperties(ServerProperties, CacheProperties)
        ... )
        >>> with ComponentRegistry(sources) as registry:
        ...     ConfigurationRegistrar().register_all(metadata, registry)

    """

    def __init__(
        self,
        type_registrar_factory: Callable[
            [ComponentRegistry], TypeRegistrar
        ] = ConfigurationPropertiesTypeRegistrar,
    ) -> None:
        """Initialise registrar.

        Args:
            type_registrar_factory: Builds the type registrar for a registry

        """
        self._type_registrar_factory = type_registrar_factory

    def register_all(
        self, metadata: AnnotationView, registry: ComponentRegistry
    ) -> None:
        """Register infrastructure and every declared configuration type.

        Raises:
            MetadataExtractionError: If the declared types cannot be read; the
                registry is left untouched
            RegistrationDelegationError: Propagated from the type registrar

        """
        types = get_types(metadata)
        logger.debug(
            "Registering %d configuration type(s) from %s",
            len(types),
            metadata.source or "metadata",
        )

        register_infrastructure(registry)
        register_method_validation_exclude_filter(registry)

        type_registrar = self._type_registrar_factory(registry)
        for config_type in types:
            type_registrar.register(config_type)


def register_method_validation_exclude_filter(registry: ComponentRegistry) -> None:
    """Register the exclude filter for configuration types, if absent."""
    if registry.contains(METHOD_VALIDATION_EXCLUDE_FILTER_NAME):
        return
    registry.register(
        METHOD_VALIDATION_EXCLUDE_FILTER_NAME,
        ComponentDefinition(
            MethodValidationExcludeFilter,
            CallableFactory(
                lambda: MethodValidationExcludeFilter.by_marker(
                    is_configuration_properties
                )
            ),
            role=ComponentRole.INFRASTRUCTURE,
        ),
    )
