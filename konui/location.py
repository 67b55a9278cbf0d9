"""Positions and areas in normalized device coordinates, paired with the window size."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import IntPosition, IntSize, Rectangle, Vec2


def _to_unsigned(value: float) -> int:
    # Truncates toward zero and clamps negatives to zero.
    return max(0, int(value))


@dataclass(frozen=True)
class LocationPoint:
    """A point in device coordinates (``-1..1`` on each axis) within a window."""

    point: Vec2
    window_size: IntSize

    def window_point(self) -> IntPosition:
        p = (self.point + Vec2.ONE) / 2.0
        return IntPosition(
            int(p.x * self.window_size.width),
            int(p.y * self.window_size.height),
        )


@dataclass(frozen=True)
class LocationRect:
    """A rectangle in device coordinates within a window."""

    rect: Rectangle
    window_size: IntSize

    @classmethod
    def full(cls, window_size: IntSize) -> LocationRect:
        """The whole window: top-left at ``(-1, 1)``, size ``(2, -2)``."""
        return cls(Rectangle(Vec2(-1.0, 1.0), Vec2(2.0, -2.0)), window_size)

    def window_rect_size(self) -> IntSize:
        half = self.rect.size / 2.0
        return IntSize(
            _to_unsigned(half.x * self.window_size.width),
            _to_unsigned(half.y * self.window_size.height),
        )

    def subrect(self, rect: Rectangle) -> LocationRect:
        return LocationRect(self.rect.subrect(rect), self.window_size)