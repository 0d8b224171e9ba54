"""Key-based registry for output format classes.

Renderer classes register themselves with a decorator so that the set of
available report formats can grow without touching the lookup code::

    renderer_registry = Registry("renderer")

    @renderer_registry.register("markdown")
    class MarkdownRenderer(TargetLanguage):
        ...

    markdown = renderer_registry.create("markdown")
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple, Type, TypeVar

T = TypeVar("T")


class Registry:
    """Map string keys to registered classes."""

    def __init__(self, name: str = "registry") -> None:
        """Initialize the registry.

        Args:
            name: Human-readable name used in error messages.
        """
        self._name = name
        self._items: Dict[str, Type[Any]] = {}

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Decorator registering a class under ``key``.

        Raises:
            ValueError: If the key is already taken.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            taken = self._items.get(key)
            if taken is not None:
                raise ValueError(
                    f"{self._name}: cannot register {cls.__name__} as '{key}', "
                    f"already registered to {taken.__name__}"
                )
            self._items[key] = cls
            return cls
        return decorator

    def get(self, key: str) -> Type[Any]:
        """Return the class registered under ``key``.

        Raises:
            KeyError: If the key is not registered.  The message lists
                the available keys.
        """
        if key not in self._items:
            raise KeyError(self.unknown_key_message(key))
        return self._items[key]

    def create(self, key: str) -> Any:
        """Instantiate the class registered under ``key``."""
        return self.get(key)()

    def unknown_key_message(self, key: str) -> str:
        available = ", ".join(sorted(self._items))
        return f"{self._name}: unknown key '{key}'. Available: {available}"

    def keys(self) -> List[str]:
        """Return the registered keys in registration order."""
        return list(self._items)

    def items(self) -> List[Tuple[str, Type[Any]]]:
        return list(self._items.items())

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
