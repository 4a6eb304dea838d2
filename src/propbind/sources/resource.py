"""Resource handles that loaders read from."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Protocol, override, runtime_checkable


@runtime_checkable
class Resource(Protocol):
    """Protocol for a readable, named piece of externally stored configuration."""

    @property
    def filename(self) -> str:
        """Return the file name used for extension matching."""
        ...

    @property
    def description(self) -> str:
        """Return a human-readable description, used as default source name."""
        ...

    def read_text(self) -> str:
        """Read the full resource content.

        Raises:
            OSError: If the resource cannot be read

        """
        ...


def resource_extension(resource: Resource) -> str:
    """Return the extension of a resource without the leading dot.

    The extension is returned as written; case folding is left to the caller.
    """
    return PurePath(resource.filename).suffix.removeprefix(".")


class FileResource:
    """Resource backed by a file on the local filesystem."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def filename(self) -> str:
        return self._path.name

    @property
    def description(self) -> str:
        return f"file [{self._path}]"

    def read_text(self) -> str:
        with open(self._path, encoding=self._encoding) as f:
            return f.read()

    @override
    def __repr__(self) -> str:
        return f"FileResource(path='{self._path}')"


class InMemoryResource:
    """Resource holding its content in memory, mainly for tests and embedding."""

    def __init__(self, content: str, filename: str) -> None:
        self._content = content
        self._filename = filename

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def description(self) -> str:
        return f"in-memory [{self._filename}]"

    def read_text(self) -> str:
        return self._content

    @override
    def __repr__(self) -> str:
        return f"InMemoryResource(filename='{self._filename}')"
