"""Values shared between elements and callbacks, and the signals their changes send."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Redraw:
    """Asks the application to redraw its window."""


@dataclass(frozen=True)
class InvalidateCache:
    """Tells the application that the shared value at ``addr`` was changed."""

    addr: int


Signal = Any


class SignalSender:
    """Sends signals to the application; every copy feeds the same queue."""

    def __init__(self, queue: Optional["queue.SimpleQueue[Signal]"] = None) -> None:
        self._queue = queue if queue is not None else _new_queue()

    def shared(self, value: T) -> Shared[T]:
        """Wrap ``value`` so that changes to it send signals through this sender."""
        return Shared(value, self)

    def send(self, signal: Signal) -> None:
        self._queue.put(signal)

    def drain(self) -> Iterator[Signal]:
        """Yield every signal sent so far, without waiting for new ones."""
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return


def _new_queue() -> "queue.SimpleQueue[Signal]":
    return queue.SimpleQueue()


class _Cell:
    __slots__ = ("value", "lock")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.lock = threading.Lock()


class Shared(Generic[T]):
    """A value behind a lock; writing through a guard sends ``InvalidateCache``."""

    def __init__(self, value: T, signal_sender: SignalSender) -> None:
        self._cell = _Cell(value)
        self._signal_sender = signal_sender

    @property
    def addr(self) -> int:
        """An identity shared by every handle to the same value."""
        return id(self._cell)

    def lock(self) -> SharedGuard[T]:
        """A guard to use in a ``with`` block; it holds the lock while open."""
        return SharedGuard(self._cell, self._signal_sender, self.addr)

    def value(self) -> T:
        """The current value, read under the lock."""
        with self.lock() as guard:
            return guard.value

    def invalidate_caches(self, addrs) -> bool:
        return self.addr in addrs

    def __copy__(self) -> Shared[T]:
        other = Shared.__new__(Shared)
        other._cell = self._cell
        other._signal_sender = self._signal_sender
        return other


class SharedGuard(Generic[T]):
    """Access to a shared value while its lock is held."""

    def __init__(self, cell: _Cell, signal_sender: SignalSender, addr: int) -> None:
        self._cell = cell
        self._signal_sender = signal_sender
        self._addr = addr
        self._held = False

    def __enter__(self) -> SharedGuard[T]:
        self._cell.lock.acquire()
        self._held = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._held = False
        self._cell.lock.release()

    def _check(self) -> None:
        if not self._held:
            raise RuntimeError("shared value is not locked by this guard")

    @property
    def value(self) -> T:
        self._check()
        return self._cell.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._check()
        self._signal_sender.send(InvalidateCache(self._addr))
        self._cell.value = new_value