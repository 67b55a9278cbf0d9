"""Small 2D vector, matrix, rectangle and instance-transform types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .color import Color

PADDING = (0.0, 0.0)


@dataclass(frozen=True)
class Vec2:
    """A 2D float vector; arithmetic works component-wise with vectors or scalars."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]

    @classmethod
    def splat(cls, v: float) -> Vec2:
        return cls(v, v)

    @staticmethod
    def _parts(other: Union[Vec2, float]) -> tuple[float, float]:
        if isinstance(other, Vec2):
            return other.x, other.y
        if isinstance(other, (int, float)):
            return float(other), float(other)
        raise TypeError(f"unsupported operand: {other!r}")

    def __add__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x + ox, self.y + oy)

    __radd__ = __add__

    def __sub__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x - ox, self.y - oy)

    def __mul__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x * ox, self.y * oy)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x / ox, self.y / oy)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)


@dataclass(frozen=True)
class Mat2:
    """A 2x2 matrix stored row by row: ``[[a, b], [c, d]]``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0

    IDENTITY: ClassVar[Mat2]

    @classmethod
    def from_diagonal(cls, diagonal: Vec2) -> Mat2:
        return cls(diagonal.x, 0.0, 0.0, diagonal.y)

    def __matmul__(self, other: Union[Mat2, Vec2]) -> Union[Mat2, Vec2]:
        if isinstance(other, Vec2):
            return Vec2(
                self.a * other.x + self.b * other.y,
                self.c * other.x + self.d * other.y,
            )
        if isinstance(other, Mat2):
            return Mat2(
                self.a * other.a + self.b * other.c,
                self.a * other.b + self.b * other.d,
                self.c * other.a + self.d * other.c,
                self.c * other.b + self.d * other.d,
            )
        return NotImplemented


Mat2.IDENTITY = Mat2()


@dataclass(frozen=True)
class IntSize:
    """A size in whole pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class IntPosition:
    """A position in whole pixels."""

    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    top_left: Vec2 = Vec2.ZERO
    size: Vec2 = Vec2.ONE

    FULL: ClassVar[Rectangle]

    def offset(self, offset: Vec2) -> Rectangle:
        return Rectangle(self.top_left + offset, self.size)

    def mul_size(self, times: Vec2) -> Rectangle:
        return Rectangle(self.top_left, self.size * times)

    def subrect(self, other: Rectangle) -> Rectangle:
        """Map ``other``, given in this rectangle's unit coordinates, into this one's space."""
        return Rectangle(
            self.top_left + other.top_left * self.size,
            self.size * other.size,
        )


Rectangle.FULL = Rectangle(Vec2.ZERO, Vec2.ONE)


@dataclass(frozen=True)
class Transform:
    """Per-instance transform: a linear map, a translation, a tint and a texture area."""

    matrix: Mat2 = field(default=Mat2.IDENTITY)
    translation: Vec2 = Vec2.ZERO
    color: Color = Color.WHITE
    texture_rect: Rectangle = Rectangle.FULL

    IDENTITY: ClassVar[Transform]

    @classmethod
    def new_scale(
        cls, translation: Vec2, scale: Vec2, color: Color, texture_rect: Rectangle
    ) -> Transform:
        return cls(Mat2.from_diagonal(scale), translation, color, texture_rect)

    @classmethod
    def new(cls, translation: Vec2, color: Color, texture_rect: Rectangle) -> Transform:
        return cls.new_scale(translation, Vec2.ONE, color, texture_rect)

    def apply(self, point: Vec2) -> Vec2:
        """Transform a point: matrix first, then translation."""
        return (self.matrix @ point) + self.translation


Transform.IDENTITY = Transform.new(Vec2.ZERO, Color.WHITE, Rectangle.FULL)