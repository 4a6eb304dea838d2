"""Error classes for propbind.

This module provides:
- PropbindError: Base exception class for all propbind errors
- LoadError, UnsupportedResourceError: Property source loading exceptions
- MetadataExtractionError: Malformed bootstrap metadata
- RegistrationDelegationError: Type registration failures
- RegistryError, DuplicateComponentError, ComponentNotFoundError,
  ComponentCreationError, RegistryClosedError: Component registry exceptions
- BindError: Binding property values onto a configuration type failed
"""

from __future__ import annotations


class PropbindError(Exception):
    """Base exception for all propbind errors."""

    pass


class LoadError(PropbindError):
    """Raised when a resource cannot be read or parsed into property sources.

    The underlying exception is kept on ``cause`` and is also chained as
    ``__cause__`` when raised with ``raise ... from``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """Initialise load error.

        Args:
            message: Human-readable description of the failure
            cause: The exception raised while reading or parsing the resource

        """
        super().__init__(message)
        self.cause = cause


class UnsupportedResourceError(LoadError):
    """Raised when no loader claims the extension of a resource."""

    pass


class MetadataExtractionError(PropbindError):
    """Raised when the declared configuration types cannot be read."""

    pass


class RegistrationDelegationError(PropbindError):
    """Raised by a type registrar that cannot register a configuration type."""

    pass


class RegistryError(PropbindError):
    """Base exception for component registry errors."""

    pass


class DuplicateComponentError(RegistryError):
    """Raised when a component name is already taken in the registry."""

    pass


class ComponentNotFoundError(RegistryError, KeyError):
    """Raised when no component is registered under the requested name."""

    pass


class ComponentCreationError(RegistryError):
    """Raised when a component factory cannot produce an instance."""

    pass


class RegistryClosedError(RegistryError, RuntimeError):
    """Raised when a closed registry is used."""

    pass


class BindError(PropbindError):
    """Raised when property values cannot be bound onto a configuration type."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """Initialise bind error.

        Args:
            message: Human-readable description of the failure
            cause: The validation error raised by the binder

        """
        super().__init__(message)
        self.cause = cause
