"""Sprite sheets addressed by enum members."""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Type, Union

from .geometry import Rectangle, Vec2

Coord = Union[Enum, Tuple[Enum, Enum]]
Kinds = Union[Type[Enum], Tuple[Type[Enum], Type[Enum]]]


def _enum_size(kind: Type[Enum]) -> float:
    return 1.0 / len(kind)


def _enum_coord(member: Enum) -> float:
    kind = type(member)
    return list(kind).index(member) * _enum_size(kind)


def sheet_size(kinds: Kinds) -> Union[float, Vec2]:
    """The fraction of the sheet one cell covers.

    A single enum gives a float; a pair of enums gives a ``Vec2`` with one axis each.
    """
    if isinstance(kinds, tuple):
        x_kind, y_kind = kinds
        return Vec2(_enum_size(x_kind), _enum_size(y_kind))
    return _enum_size(kinds)


def sheet_coord(coord: Coord) -> Union[float, Vec2]:
    """Where the cell of a member, or a pair of members, starts on the sheet."""
    if isinstance(coord, tuple):
        x, y = coord
        return Vec2(_enum_coord(x), _enum_coord(y))
    return _enum_coord(coord)


class Sheet:
    """An image split into a grid whose columns and rows are two enums."""

    def __init__(
        self, width: int, height: int, kinds: Tuple[Type[Enum], Type[Enum]]
    ) -> None:
        self.size = Vec2(float(width), float(height))
        self.kinds = kinds

    def texture_rect(self, coord: Tuple[Enum, Enum]) -> Rectangle:
        """The texture area, in unit coordinates, of the cell at ``coord``."""
        if not isinstance(coord, tuple) or len(coord) != 2:
            raise TypeError(f"expected a pair of members, got {coord!r}")
        for member, kind in zip(coord, self.kinds):
            if not isinstance(member, kind):
                raise TypeError(f"{member!r} is not a member of {kind.__name__}")
        return Rectangle(sheet_coord(coord), sheet_size(self.kinds))