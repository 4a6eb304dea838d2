"""Component protocols for the registry."""

from collections.abc import Callable
from typing import Protocol


class ComponentFactory[T](Protocol):
    """Protocol for factories that create registry components.

    The factory holds whatever it needs to build the component; ``create``
    takes no parameters.

    Example:
        ```python
        class TrackerFactory:
            def create(self) -> BoundConfigurationProperties:
                return BoundConfigurationProperties()
        ```

    """

    def create(self) -> T | None:
        """Create a component instance.

        Returns:
            Component instance, or None if the component is unavailable.

        """
        ...


class CallableFactory[T]:
    """Adapts a zero-argument callable to the ComponentFactory protocol."""

    def __init__(self, supplier: Callable[[], T | None]) -> None:
        self._supplier = supplier

    def create(self) -> T | None:
        return self._supplier()
