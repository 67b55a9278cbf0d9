"""Input events, their consumption, and the element interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from .location import LocationPoint


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    BACK = "back"
    FORWARD = "forward"


@dataclass(frozen=True)
class Click:
    """A mouse button was released at ``point``."""

    point: LocationPoint
    button: MouseButton


class Consume:
    """Returned by an event callback to stop the event from travelling further."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Consume)

    def __hash__(self) -> int:
        return hash(Consume)

    def __repr__(self) -> str:
        return "Consume()"


def into_consumed(result: Any) -> bool:
    """Whether a callback's result consumed the event.

    ``None`` and ``False`` let the event through; ``True`` and ``Consume`` stop it.
    """
    if result is None:
        return False
    if isinstance(result, Consume):
        return True
    if isinstance(result, bool):
        return result
    raise TypeError(f"not an event result: {result!r}")


def consume(f: Callable[[], Any]) -> Callable[[], Consume]:
    """Wrap ``f`` so that calling it always consumes the event."""

    def wrapper() -> Consume:
        f()
        return Consume()

    return wrapper


class Element(abc.ABC):
    """Something that draws itself, reacts to events and holds caches."""

    @abc.abstractmethod
    def draw(self, pass_, resources, location) -> None:
        """Draw into ``pass_`` within ``location``."""

    def handle_event(self, event) -> bool:
        """Handle ``event``; return ``True`` if it was consumed."""
        return False

    def invalidate_caches(self, addrs) -> bool:
        """Drop caches tied to ``addrs``; return ``True`` if any depended on them."""
        return False


def handle_in_order(elements: Iterable[Any], event) -> bool:
    """Pass ``event`` to each element until one consumes it."""
    return any(element.handle_event(event) for element in elements)


def invalidate_any(elements: Iterable[Any], addrs) -> bool:
    """Invalidate elements in order, stopping at the first that reports a change."""
    return any(element.invalidate_caches(addrs) for element in elements)