"""Property source value object."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, override


class PropertySource(Mapping[str, Any]):
    """An ordered, named, immutable key/value mapping.

    Entries are copied on construction, so later changes to the mapping the
    source was built from are not visible. Key order follows the order in
    which the loader produced the entries.
    """

    __slots__ = ("_name", "_entries")

    def __init__(self, name: str, entries: Mapping[str, Any] | None = None) -> None:
        """Initialise property source.

        Args:
            name: Source name, unique within one load call
            entries: Property names mapped to raw values

        Raises:
            ValueError: If name is empty

        """
        if not name:
            raise ValueError("Property source name must not be empty")
        self._name = name
        self._entries: Mapping[str, Any] = MappingProxyType(dict(entries or {}))

    @property
    def name(self) -> str:
        """Return the name of this source."""
        return self._name

    @property
    def entries(self) -> Mapping[str, Any]:
        """Return a read-only view of the entries."""
        return self._entries

    @property
    def property_names(self) -> tuple[str, ...]:
        """Return property names in source order."""
        return tuple(self._entries)

    @override
    def __getitem__(self, key: str) -> Any:  # noqa: ANN401
        return self._entries[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @override
    def __len__(self) -> int:
        return len(self._entries)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertySource):
            return NotImplemented
        return self._name == other._name and dict(self._entries) == dict(
            other._entries
        )

    @override
    def __hash__(self) -> int:
        return hash(self._name)

    @override
    def __repr__(self) -> str:
        return f"PropertySource(name='{self._name}', entries={len(self._entries)})"
