"""Property source loader abstraction.

A loader turns one resource into one or more property sources. Single-document
formats produce exactly one source named after the requested name. Multi-document
formats produce one source per document, in document order, named with
``document_source_name``:

    application.yml              (document 0)
    application.yml (document #1)
    application.yml (document #2)

Every multi-document loader uses this convention so that source order can be
recovered from the names alone.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, override

from propbind.errors import LoadError
from propbind.sources.property_source import PropertySource
from propbind.sources.resource import Resource

logger = logging.getLogger(__name__)


def document_source_name(name: str, index: int) -> str:
    """Return the source name for the document at ``index`` of a resource.

    Args:
        name: Root name requested by the caller
        index: Zero-based document position

    Returns:
        ``name`` for the first document, ``"{name} (document #{index})"`` otherwise

    """
    if index < 0:
        raise ValueError(f"Document index must not be negative, got {index}")
    if index == 0:
        return name
    return f"{name} (document #{index})"


def flatten_document(document: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a parsed document into dotted property names.

    Nested mappings become ``parent.child`` keys and sequences become
    ``parent[0]``, ``parent[1]`` keys. Scalars are kept as parsed; ``None``
    becomes an empty string. Empty nested collections are dropped.

    Raises:
        ValueError: If two entries flatten to the same property name, such as
            a top-level ``"a.b"`` key next to a nested ``a: {b: ...}``

    """
    entries: dict[str, Any] = {}
    _flatten_into(entries, "", document)
    return entries


def _flatten_into(entries: dict[str, Any], path: str, value: Any) -> None:  # noqa: ANN401
    if isinstance(value, Mapping):
        for key, child in value.items():
            key = str(key)
            # Nested keys containing dots are bracketed: "map[a.b]"
            if path and "." in key:
                child_path = f"{path}[{key}]"
            else:
                child_path = f"{path}.{key}" if path else key
            _flatten_into(entries, child_path, child)
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for index, child in enumerate(value):
            _flatten_into(entries, f"{path}[{index}]", child)
    else:
        if path in entries:
            raise ValueError(f"Property '{path}' is defined more than once")
        entries[path] = "" if value is None else value


class PropertySourceLoader(ABC):
    """Strategy contract for loading a resource into property sources.

    Callers are responsible for only passing resources whose extension is in
    ``supported_extensions()``; loaders do not re-check it.
    """

    @abstractmethod
    def supported_extensions(self) -> frozenset[str]:
        """Return the file extensions this loader accepts, without the dot."""
        ...

    @abstractmethod
    def load(self, name: str, resource: Resource) -> list[PropertySource]:
        """Load the resource into one or more property sources.

        Args:
            name: Root name of the property sources
            resource: Resource to read

        Returns:
            Property sources in document order, never empty

        Raises:
            LoadError: If the resource cannot be read or parsed

        """
        ...


class DocumentPropertySourceLoader(PropertySourceLoader):
    """Base class for loaders that parse text into a list of documents.

    Subclasses implement ``parse_documents``; this class reads the resource,
    wraps failures in LoadError, flattens each document and names the sources.
    """

    @override
    def load(self, name: str, resource: Resource) -> list[PropertySource]:
        try:
            text = resource.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Failed to read {resource.description}: {e}", e) from e

        try:
            documents = self.parse_documents(text)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(
                f"Failed to parse {resource.description} "
                f"with {type(self).__name__}: {e}",
                e,
            ) from e

        if not documents:
            logger.debug("No documents found in %s", resource.description)
            return [PropertySource(name, {})]

        sources: list[PropertySource] = []
        for index, document in enumerate(documents):
            if document is None:
                document = {}
            if not isinstance(document, Mapping):
                raise LoadError(
                    f"Document {index} of {resource.description} must be a mapping, "
                    f"got {type(document).__name__}"
                )
            try:
                entries = flatten_document(document)
            except ValueError as e:
                raise LoadError(
                    f"Document {index} of {resource.description}: {e}", e
                ) from e
            sources.append(PropertySource(document_source_name(name, index), entries))

        logger.debug(
            "Loaded %d property source(s) from %s", len(sources), resource.description
        )
        return sources

    @abstractmethod
    def parse_documents(self, text: str) -> list[Any]:
        """Parse resource text into documents, in order.

        Raises:
            Exception: Any parser error; it is wrapped in LoadError by ``load``

        """
        ...
