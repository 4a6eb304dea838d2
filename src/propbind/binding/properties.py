"""Configuration-binding marker and base class for typed configuration.

A configuration type is any class decorated with ``configuration_properties``.
Its instances are built by binding the property values found under the
declared prefix, rather than by direct construction.

The marker is not inherited: a subclass of a configuration type must declare
its own prefix to be bound.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from pydantic import BaseModel, ConfigDict

_PREFIX_ATTRIBUTE = "__configuration_properties_prefix__"


def _check_prefix(prefix: str) -> None:
    if prefix.endswith(".") or prefix.startswith("."):
        raise ValueError(f"Prefix must not start or end with '.', got '{prefix}'")


def configuration_properties[C: type](prefix: str = "") -> Callable[[C], C]:
    """Mark a class as a target for property binding.

    Args:
        prefix: Dotted property prefix the class binds from, e.g. ``"server.ssl"``

    Example:
        ```python
        @configuration_properties("server")
        class ServerProperties(ConfigurationProperties):
            host: str = "localhost"
            port: int = 8080
        ```

    """
    _check_prefix(prefix)

    def decorate(cls: C) -> C:
        setattr(cls, _PREFIX_ATTRIBUTE, prefix)
        return cls

    return decorate


def is_configuration_properties(cls: type) -> bool:
    """Check whether a class itself carries the configuration-binding marker."""
    return isinstance(cls, type) and _PREFIX_ATTRIBUTE in vars(cls)


def get_prefix(cls: type) -> str:
    """Return the binding prefix declared on a configuration type.

    Raises:
        TypeError: If the class is not marked with ``configuration_properties``

    """
    if not is_configuration_properties(cls):
        raise TypeError(f"{cls!r} is not marked with @configuration_properties")
    return vars(cls)[_PREFIX_ATTRIBUTE]


class ConfigurationProperties(BaseModel):
    """Base class for typed configuration objects populated by binding.

    Features:
        - Pydantic validation and coercion of raw property values
        - Immutable (frozen) once bound
        - Strict validation (unknown properties under the prefix are rejected)

    Subclasses may declare their prefix as a class keyword instead of using
    the decorator:

        ```python
        class DatabaseProperties(ConfigurationProperties, prefix="db"):
            url: str
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after binding
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    def __init_subclass__(cls, prefix: str | None = None, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init_subclass__(**kwargs)
        if prefix is not None:
            _check_prefix(prefix)
            setattr(cls, _PREFIX_ATTRIBUTE, prefix)

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary with validation.

        Raises:
            ValidationError: If properties are invalid or missing required fields

        """
        return cls.model_validate(properties)
