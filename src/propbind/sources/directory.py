"""Loader directory mapping file extensions to property source loaders."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from propbind.errors import UnsupportedResourceError
from propbind.sources.json_loader import JsonPropertySourceLoader
from propbind.sources.loader import PropertySourceLoader
from propbind.sources.property_source import PropertySource
from propbind.sources.resource import Resource, resource_extension
from propbind.sources.yaml_loader import YamlPropertySourceLoader

logger = logging.getLogger(__name__)


class LoaderDirectory:
    """Selects a property source loader by resource extension.

    Extensions are matched case-insensitively: both the loader's declared
    extensions and the resource extension are lower-cased. When two loaders
    declare the same extension, the one registered first is kept.

    Example:
        >>> directory = LoaderDirectory.default()
        >>> sources = directory.load(FileResource("config/application.yml"))

    """

    def __init__(self, loaders: Iterable[PropertySourceLoader] = ()) -> None:
        self._loaders: dict[str, PropertySourceLoader] = {}
        for loader in loaders:
            self.register(loader)

    @classmethod
    def default(cls) -> LoaderDirectory:
        """Create a directory with the bundled YAML and JSON loaders."""
        return cls([YamlPropertySourceLoader(), JsonPropertySourceLoader()])

    def register(self, loader: PropertySourceLoader) -> None:
        """Register a loader for each extension it declares.

        Extensions already claimed by an earlier loader are left untouched.
        """
        for extension in sorted(loader.supported_extensions()):
            key = extension.lower()
            existing = self._loaders.get(key)
            if existing is not None:
                logger.debug(
                    "Extension '%s' already handled by %s, ignoring %s",
                    key,
                    type(existing).__name__,
                    type(loader).__name__,
                )
                continue
            self._loaders[key] = loader
            logger.debug("Registered %s for '%s'", type(loader).__name__, key)

    @property
    def loaders(self) -> Mapping[str, PropertySourceLoader]:
        """Return the extension to loader mapping."""
        return MappingProxyType(self._loaders)

    def supported_extensions(self) -> frozenset[str]:
        """Return every extension handled by this directory."""
        return frozenset(self._loaders)

    def loader_for(self, resource: Resource) -> PropertySourceLoader:
        """Select the loader for a resource.

        Raises:
            UnsupportedResourceError: If no loader handles the resource extension

        """
        extension = resource_extension(resource).lower()
        loader = self._loaders.get(extension)
        if loader is None:
            raise UnsupportedResourceError(
                f"No property source loader for {resource.description} "
                f"(extension '{extension}'). "
                f"Supported extensions: {sorted(self._loaders)}"
            )
        return loader

    def load(self, resource: Resource, name: str | None = None) -> list[PropertySource]:
        """Load a resource with the loader matching its extension.

        Args:
            resource: Resource to load
            name: Root name for the sources, defaults to the resource description

        Returns:
            Property sources in document order

        Raises:
            UnsupportedResourceError: If no loader handles the resource extension
            LoadError: If the selected loader fails

        """
        loader = self.loader_for(resource)
        logger.debug("Loading %s with %s", resource.description, type(loader).__name__)
        return loader.load(name or resource.description, resource)
