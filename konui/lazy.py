"""A value built once, on first use, from an argument supplied at that time."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET: Any = object()


class Lazy(Generic[T]):
    """Holds a builder until the value is first requested, then the built value."""

    def __init__(self, builder: Callable[[Any], Any]) -> None:
        self._builder: Optional[Callable[[Any], Any]] = builder
        self._value: Any = _UNSET

    @property
    def is_initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> Optional[T]:
        """The value if it was built, otherwise ``None``."""
        return None if self._value is _UNSET else self._value

    def get_or_init(self, arg: Any) -> T:
        """The value, building it from ``builder(arg)`` if needed."""
        return self.get_or_init_map(arg, lambda value: value)

    def get_or_init_map(self, arg: Any, map: Callable[[Any], T]) -> T:
        """The value, building it from ``map(builder(arg))`` if needed."""
        if self._value is _UNSET:
            builder, self._builder = self._builder, None
            assert builder is not None
            self._value = map(builder(arg))
        return self._value