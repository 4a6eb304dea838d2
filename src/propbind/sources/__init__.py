"""Property source loading."""

from propbind.sources.directory import LoaderDirectory
from propbind.sources.json_loader import JsonPropertySourceLoader
from propbind.sources.loader import (
    DocumentPropertySourceLoader,
    PropertySourceLoader,
    document_source_name,
    flatten_document,
)
from propbind.sources.property_source import PropertySource
from propbind.sources.property_sources import PropertySources
from propbind.sources.resource import (
    FileResource,
    InMemoryResource,
    Resource,
    resource_extension,
)
from propbind.sources.yaml_loader import YamlPropertySourceLoader

__all__ = [
    "DocumentPropertySourceLoader",
    "FileResource",
    "InMemoryResource",
    "JsonPropertySourceLoader",
    "LoaderDirectory",
    "PropertySource",
    "PropertySourceLoader",
    "PropertySources",
    "Resource",
    "YamlPropertySourceLoader",
    "document_source_name",
    "flatten_document",
    "resource_extension",
]
