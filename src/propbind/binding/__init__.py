"""Configuration binding registration."""

from propbind.binding.infrastructure import (
    BINDING_POST_PROCESSOR_NAME,
    BOUND_PROPERTIES_NAME,
    BindingPostProcessor,
    BoundConfigurationProperties,
    MethodValidationExcludeFilter,
    register_infrastructure,
)
from propbind.binding.metadata import (
    NO_TYPE,
    AnnotationView,
    EnableConfigurationProperties,
)
from propbind.binding.properties import (
    ConfigurationProperties,
    configuration_properties,
    get_prefix,
    is_configuration_properties,
)
from propbind.binding.registrar import (
    METHOD_VALIDATION_EXCLUDE_FILTER_NAME,
    ConfigurationRegistrar,
    get_types,
    register_method_validation_exclude_filter,
)
from propbind.binding.type_registrar import (
    ConfigurationPropertiesTypeRegistrar,
    TypeRegistrar,
    component_name,
)

__all__ = [
    "BINDING_POST_PROCESSOR_NAME",
    "BOUND_PROPERTIES_NAME",
    "METHOD_VALIDATION_EXCLUDE_FILTER_NAME",
    "NO_TYPE",
    "AnnotationView",
    "BindingPostProcessor",
    "BoundConfigurationProperties",
    "ConfigurationProperties",
    "ConfigurationPropertiesTypeRegistrar",
    "ConfigurationRegistrar",
    "EnableConfigurationProperties",
    "MethodValidationExcludeFilter",
    "TypeRegistrar",
    "component_name",
    "configuration_properties",
    "get_prefix",
    "get_types",
    "is_configuration_properties",
    "register_infrastructure",
    "register_method_validation_exclude_filter",
]
