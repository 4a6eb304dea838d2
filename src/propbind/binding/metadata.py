"""Bootstrap metadata declaring which configuration types to register.

The metadata view is a plain data structure built ahead of time by the
caller. Nothing is discovered by scanning modules.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

NO_TYPE: type = type(None)
"""Explicit "no type" value; it is accepted in declarations and then discarded."""


@dataclass(frozen=True, init=False)
class EnableConfigurationProperties:
    """Declares configuration types to register for binding.

    Example:
        >>> EnableConfigurationProperties(ServerProperties, CacheProperties)

    """

    value: tuple[Any, ...] = ()

    def __init__(self, *types: Any) -> None:  # noqa: ANN401
        object.__setattr__(self, "value", tuple(types))


@dataclass(frozen=True)
class AnnotationView:
    """Read-only view of the declarations attached to one bootstrap entry point.

    Attributes:
        declarations: Declarations in the order they were attached
        source: Description of where the declarations come from, for messages

    """

    declarations: tuple[Any, ...] = ()
    source: str = field(default="")

    @classmethod
    def of(cls, *declarations: Any, source: str = "") -> AnnotationView:  # noqa: ANN401
        return cls(tuple(declarations), source)

    def declarations_of[D](self, kind: type[D]) -> Iterator[D]:
        """Yield the declarations of the given kind, in order."""
        for declaration in self.declarations:
            if isinstance(declaration, kind):
                yield declaration

    def with_declarations(self, declarations: Iterable[Any]) -> AnnotationView:
        """Return a copy with extra declarations appended."""
        return AnnotationView(self.declarations + tuple(declarations), self.source)
