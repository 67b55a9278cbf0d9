"""Building blocks of an interface: rectangles, labels, layers, splits and click handlers."""

from __future__ import annotations

import math
import zlib
from enum import Enum
from typing import Any, Callable, Tuple

from .color import Color
from .drawer import (
    DefaultTexture,
    MeshDrawingInfo,
    NoGlobalTransform,
    UnitSquareTopLeft,
)
from .events import Click, Element, MouseButton, handle_in_order, into_consumed, invalidate_any
from .geometry import Rectangle, Transform, Vec2
from .values import as_source


class UnsupportedSplitError(RuntimeError):
    """Raised when a split of a kind that cannot be laid out is drawn."""


class Rect(Element):
    """A rectangle filling its location with one colour."""

    def __init__(self, color: Any) -> None:
        self.color = as_source(color)

    def draw(self, pass_, resources, location) -> None:
        area = location.rect
        transform = Transform.new_scale(
            area.top_left, area.size, self.color.value(), Rectangle.FULL
        )
        info = MeshDrawingInfo(
            resources.get(UnitSquareTopLeft).mesh,
            resources.get(NoGlobalTransform).transform,
            resources.get(DefaultTexture),
        )
        pass_.mesh().draw(info, transform)

    def handle_event(self, event) -> bool:
        return False

    def invalidate_caches(self, addrs) -> bool:
        return False


class Label(Element):
    """A stand-in for text: a translucent bar whose padding depends on the text."""

    COLOR = Color(1.0, 1.0, 1.0, 0.5)

    def __init__(self, source: Any) -> None:
        self.source = as_source(source)

    def draw(self, pass_, resources, location) -> None:
        bucket = zlib.crc32(str(self.source.value()).encode("utf-8")) % 16
        padding = 1.0 / bucket if bucket else math.inf
        if math.isinf(padding):
            # The bar would lie entirely outside the view.
            return
        area = Rectangle(Vec2(padding, 0.0), Vec2(1.0 - 2.0 * padding, 1.0))
        Rect(self.COLOR).draw(pass_, resources, location.subrect(area))

    def handle_event(self, event) -> bool:
        return False

    def invalidate_caches(self, addrs) -> bool:
        return self.source.invalidate_caches(addrs)


class Layers(Element):
    """Elements stacked in one location; the last drawn gets events first."""

    def __init__(self, elements) -> None:
        self.elements: Tuple[Any, ...] = tuple(elements)
        if not self.elements:
            raise ValueError("layers need at least one element")

    def draw(self, pass_, resources, location) -> None:
        for element in self.elements:
            element.draw(pass_, resources, location)

    def handle_event(self, event) -> bool:
        return handle_in_order(reversed(self.elements), event)

    def invalidate_caches(self, addrs) -> bool:
        return invalidate_any(self.elements, addrs)


class SplitType(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    ADAPTIVE = "adaptive"


class Split(Element):
    """Elements laid out side by side in equal parts of the location."""

    def __init__(self, ty: Any, elements) -> None:
        self.ty = as_source(ty)
        self.elements: Tuple[Any, ...] = tuple(elements)
        if not self.elements:
            raise ValueError("a split needs at least one element")

    def draw(self, pass_, resources, location) -> None:
        ty = self.ty.value()
        fraction = 1.0 / len(self.elements)
        if ty is SplitType.VERTICAL:
            size, offset = Vec2(1.0, fraction), Vec2(0.0, fraction)
        elif ty is SplitType.HORIZONTAL:
            size, offset = Vec2(fraction, 1.0), Vec2(fraction, 0.0)
        else:
            raise UnsupportedSplitError(f"cannot lay out a split of type {ty!r}")

        top_left = Vec2.ZERO
        for element in self.elements:
            element.draw(pass_, resources, location.subrect(Rectangle(top_left, size)))
            top_left = top_left + offset

    def handle_event(self, event) -> bool:
        return handle_in_order(self.elements, event)

    def invalidate_caches(self, addrs) -> bool:
        return self.ty.invalidate_caches(addrs) or invalidate_any(self.elements, addrs)


class OnClick(Element):
    """Calls ``f`` when the left mouse button is released, then passes the event on."""

    def __init__(self, element: Any, f: Callable[[], Any]) -> None:
        self.element = element
        self.f = f

    def draw(self, pass_, resources, location) -> None:
        self.element.draw(pass_, resources, location)

    def handle_event(self, event) -> bool:
        if isinstance(event, Click) and event.button is MouseButton.LEFT:
            if into_consumed(self.f()):
                return True
        return self.element.handle_event(event)

    def invalidate_caches(self, addrs) -> bool:
        return self.element.invalidate_caches(addrs)


def rect(color: Any) -> Rect:
    return Rect(color)


def label(source: Any) -> Label:
    return Label(source)


def layers(*args: Any) -> Layers:
    return Layers(args)


def split(*args: Any) -> Split:
    return Split(SplitType.ADAPTIVE, args)


def line(*args: Any) -> Split:
    """Elements side by side, left to right."""
    return Split(SplitType.HORIZONTAL, args)


def column(*args: Any) -> Split:
    """Elements one above another, top to bottom."""
    return Split(SplitType.VERTICAL, args)


def on_click(element: Any, f: Callable[[], Any]) -> OnClick:
    return OnClick(element, f)