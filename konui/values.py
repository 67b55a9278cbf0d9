"""Sources of values for elements: constants, shared values and cached derivations."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

_EMPTY: Any = object()


@runtime_checkable
class ValueSource(Protocol):
    """Anything that yields a value and can drop caches tied to changed addresses."""

    def value(self) -> Any: ...

    def invalidate_caches(self, addrs) -> bool: ...


class Cache(Generic[T]):
    """A slot that holds a computed value until it is reset."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Any = _EMPTY

    def reset(self) -> None:
        with self._lock:
            self._value = _EMPTY

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """The cached value, computing it with ``f`` if the slot is empty."""
        with self._lock:
            if self._value is _EMPTY:
                self._value = f()
            return self._value


class Constant(Generic[T]):
    """A value that never changes."""

    # A constant depends on no shared value, so no address can invalidate it.
    _DEPENDENCIES: frozenset = frozenset()

    def __init__(self, value: T) -> None:
        self._value = value

    def value(self) -> T:
        return self._value

    def invalidate_caches(self, addrs) -> bool:
        """Whether any of ``addrs`` is one this constant depends on."""
        return not self._DEPENDENCIES.isdisjoint(addrs)

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


def as_source(value: Any) -> ValueSource:
    """``value`` itself if it is already a source, otherwise a ``Constant`` of it."""
    if isinstance(value, ValueSource):
        return value
    return Constant(value)


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Concat:
    """The text of several string sources joined together, cached."""

    def __init__(self, sources) -> None:
        self._sources = tuple(as_source(s) for s in sources)
        self._cache: Cache[str] = Cache()

    def value(self) -> str:
        return self._cache.get_or_insert_with(
            lambda: "".join(source.value() for source in self._sources)
        )

    def invalidate_caches(self, addrs) -> bool:
        # Stops at the first source that reports a change.
        if any(source.invalidate_caches(addrs) for source in self._sources):
            self._cache.reset()
            return True
        return False


def concat(*args: Any) -> Concat:
    return Concat(args)


class Strfy:
    """The text form of another source's value, cached."""

    def __init__(self, source: Any) -> None:
        self._source = as_source(source)
        self._cache: Cache[str] = Cache()

    def value(self) -> str:
        return self._cache.get_or_insert_with(lambda: _display(self._source.value()))

    def invalidate_caches(self, addrs) -> bool:
        if self._source.invalidate_caches(addrs):
            self._cache.reset()
            return True
        return False


def strfy(source: Any) -> Strfy:
    return Strfy(source)