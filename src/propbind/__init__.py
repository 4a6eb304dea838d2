"""propbind - property source loading and configuration binding registration.

This package provides:
- Property source loaders that turn YAML and JSON resources into ordered,
  named property sources
- A registrar that installs the binding infrastructure into a component
  registry and registers each declared configuration type exactly once
"""

__version__ = "0.1.0"

from propbind.binding import (
    AnnotationView,
    ConfigurationProperties,
    ConfigurationRegistrar,
    EnableConfigurationProperties,
    NO_TYPE,
    configuration_properties,
)
from propbind.errors import (
    BindError,
    ComponentCreationError,
    ComponentNotFoundError,
    DuplicateComponentError,
    LoadError,
    MetadataExtractionError,
    PropbindError,
    RegistrationDelegationError,
    RegistryClosedError,
    RegistryError,
    UnsupportedResourceError,
)
from propbind.services import ComponentDefinition, ComponentRegistry, ComponentRole
from propbind.sources import (
    FileResource,
    InMemoryResource,
    LoaderDirectory,
    PropertySource,
    PropertySourceLoader,
    PropertySources,
)

__all__ = [
    # Version
    "__version__",
    # Property sources
    "FileResource",
    "InMemoryResource",
    "LoaderDirectory",
    "PropertySource",
    "PropertySourceLoader",
    "PropertySources",
    # Registry
    "ComponentDefinition",
    "ComponentRegistry",
    "ComponentRole",
    # Binding
    "AnnotationView",
    "ConfigurationProperties",
    "ConfigurationRegistrar",
    "EnableConfigurationProperties",
    "NO_TYPE",
    "configuration_properties",
    # Errors
    "BindError",
    "ComponentCreationError",
    "ComponentNotFoundError",
    "DuplicateComponentError",
    "LoadError",
    "MetadataExtractionError",
    "PropbindError",
    "RegistrationDelegationError",
    "RegistryClosedError",
    "RegistryError",
    "UnsupportedResourceError",
]
