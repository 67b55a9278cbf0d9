"""RGBA colours with float channels."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every channel is a float, normally in ``[0, 1]``.

    Calling ``Color()`` gives opaque white.
    """

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """An opaque colour."""
        return cls(r, g, b, 1.0)

    @classmethod
    def splat(cls, v: float) -> Color:
        """An opaque grey with every colour channel set to ``v``."""
        return cls(v, v, v, 1.0)

    @classmethod
    def splat_a(cls, v: float) -> Color:
        """A colour with all four channels, alpha included, set to ``v``."""
        return cls(v, v, v, v)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def with_r(self, r: float) -> Color:
        return replace(self, r=r)

    def with_g(self, g: float) -> Color:
        return replace(self, g=g)

    def with_b(self, b: float) -> Color:
        return replace(self, b=b)

    def with_a(self, a: float) -> Color:
        return replace(self, a=a)


Color.WHITE = Color.splat(1.0)
Color.BLACK = Color.splat(0.0)
Color.RED = Color.rgb(1.0, 0.0, 0.0)
Color.GREEN = Color.rgb(0.0, 1.0, 0.0)
Color.BLUE = Color.rgb(0.0, 0.0, 1.0)
Color.YELLOW = Color.rgb(1.0, 1.0, 0.0)
Color.MAGENTA = Color.rgb(1.0, 0.0, 1.0)
Color.CYAN = Color.rgb(0.0, 1.0, 1.0)
Color.TRANSPARENT = Color.splat_a(0.0)