"""Ordered collection of property sources with first-wins lookup."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload, override

from propbind.sources.property_source import PropertySource


class PropertySources(Sequence[PropertySource]):
    """Ordered property sources, highest precedence first.

    Lookups return the value from the first source that contains the key.
    Combining sources any further is left to the caller.
    """

    def __init__(self, sources: Iterable[PropertySource] = ()) -> None:
        self._sources: list[PropertySource] = list(sources)

    def add_first(self, source: PropertySource) -> None:
        """Add a source with the highest precedence."""
        self._sources.insert(0, source)

    def add_last(self, source: PropertySource) -> None:
        """Add a source with the lowest precedence."""
        self._sources.append(source)

    def extend(self, sources: Iterable[PropertySource]) -> None:
        """Add sources after the existing ones, keeping their order."""
        self._sources.extend(sources)

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        """Return the value of ``key`` from the first source containing it."""
        for source in self._sources:
            if key in source:
                return source[key]
        return default

    def subset(self, prefix: str) -> dict[str, Any]:
        """Return the properties under ``prefix`` as a nested dictionary.

        ``server.port`` under prefix ``server`` becomes ``{"port": ...}`` and
        ``server.ssl.enabled`` becomes ``{"ssl": {"enabled": ...}}``. An empty
        prefix selects every property. Indexed names such as ``hosts[0]`` are
        rebuilt into lists.

        Args:
            prefix: Dotted prefix without a trailing dot

        Returns:
            Nested dictionary, first source winning per property name

        """
        flat: dict[str, Any] = {}
        lead = f"{prefix}." if prefix else ""
        for source in self._sources:
            for key, value in source.items():
                if not key.startswith(lead) or key in flat:
                    continue
                flat[key] = value

        nested: dict[str, Any] = {}
        for key, value in flat.items():
            _assign(nested, _split_path(key[len(lead) :]), value)
        return _lists_from_indexes(nested)

    @overload
    def __getitem__(self, index: int) -> PropertySource: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[PropertySource]: ...

    @override
    def __getitem__(
        self, index: int | slice
    ) -> PropertySource | Sequence[PropertySource]:
        return self._sources[index]

    @override
    def __iter__(self) -> Iterator[PropertySource]:
        return iter(self._sources)

    @override
    def __len__(self) -> int:
        return len(self._sources)

    @override
    def __repr__(self) -> str:
        names = [source.name for source in self._sources]
        return f"PropertySources({names})"


_PATH_TOKEN = re.compile(r"\[([^\]]*)\]|([^.\[\]]+)")


def _split_path(key: str) -> list[str | int]:
    """Split ``a.b[0].c`` into ``["a", "b", 0, "c"]``; ``m[x.y]`` keeps ``x.y``."""
    parts: list[str | int] = []
    for bracketed, name in _PATH_TOKEN.findall(key):
        if name:
            parts.append(name)
        else:
            parts.append(int(bracketed) if bracketed.isdigit() else bracketed)
    return parts


def _assign(target: dict[Any, Any], path: list[str | int], value: Any) -> None:  # noqa: ANN401
    node = target
    for part in path[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    if path:
        node.setdefault(path[-1], value)


def _lists_from_indexes(node: Any) -> Any:  # noqa: ANN401
    if not isinstance(node, dict):
        return node
    converted = {key: _lists_from_indexes(child) for key, child in node.items()}
    if converted and all(isinstance(key, int) for key in converted):
        return [converted[key] for key in sorted(converted)]
    return converted
