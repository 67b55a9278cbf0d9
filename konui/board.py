"""A six-sided chess variant's board: tiles, starting pieces and their scaling."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Tuple

from .color import Color
from .geometry import Mat2, Transform, Vec2
from .sheet import Sheet


class PieceType(Enum):
    """The kinds of pieces, in the order of the piece sheet's columns."""

    KING = "king"
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    PAWN_SHADOW = "pawn_shadow"
    CHARIOT = "chariot"
    BOAT = "boat"
    DRAGON = "dragon"
    SPY = "spy"


class PieceColor(Enum):
    """The sides, in the order of the piece sheet's rows."""

    WHITE = "white"
    BLACK = "black"


PiecesSheetCoord = Tuple[PieceType, PieceColor]

TILE_SCALE = Vec2.splat(2.0 / 8.0)
LIGHT_TILE_COLOR = Color.splat(0.45)
DARK_TILE_COLOR = Color.splat(0.25)


def pieces_sheet(width: int, height: int) -> Sheet:
    """A sheet whose columns are piece types and whose rows are piece colours."""
    return Sheet(width, height, (PieceType, PieceColor))


@dataclass
class Scalable:
    """A global transform rescaled with the window, from its own base scale."""

    transform: Transform
    base_scale: Vec2


def translation(x: int, y: int) -> Vec2:
    return Vec2(float(x), float(y))


def make_piece_transform(
    sheet: Sheet, translation: Vec2, coord: PiecesSheetCoord
) -> Transform:
    """A piece at ``translation`` showing the sheet cell of ``coord``."""
    return Transform(translation=translation, texture_rect=sheet.texture_rect(coord))


def make_piece_transforms(sheet: Sheet) -> List[Transform]:
    """The starting pieces of both sides."""
    transforms: List[Transform] = []

    for y, color in ((-3, PieceColor.WHITE), (3 - 1, PieceColor.BLACK)):
        transforms.extend(
            make_piece_transform(sheet, translation(x, y), (PieceType.PAWN, color))
            for x in range(-4, 4)
        )

    for y, color in ((-4, PieceColor.WHITE), (4 - 1, PieceColor.BLACK)):
        for pos, kind in (
            (2, PieceType.BISHOP),
            (3, PieceType.KNIGHT),
            (4, PieceType.ROOK),
        ):
            transforms.extend(
                make_piece_transform(sheet, translation(x, y), (kind, color))
                for x in (-pos, pos - 1)
            )
        transforms.append(
            make_piece_transform(sheet, translation(-1, y), (PieceType.QUEEN, color))
        )
        transforms.append(
            make_piece_transform(sheet, translation(0, y), (PieceType.KING, color))
        )

    return transforms


def make_white_black_transforms() -> Tuple[List[Transform], List[Transform]]:
    """The 8x8 tiles split into light and dark ones."""
    white: List[Transform] = []
    black: List[Transform] = []
    for y in range(-4, 4):
        for x in range(-4, 4):
            target = black if (x + y) % 2 == 0 else white
            target.append(Transform(translation=translation(x, y)))
    return white, black


def scale_matrix(ratio: float) -> Mat2:
    """Shrink the longer axis so that the board keeps its shape at ``ratio``."""
    scale = 1.0
    return Mat2.from_diagonal(Vec2(min(scale / ratio, scale), min(scale * ratio, scale)))


def rescale(scalables: Iterable[Scalable], ratio: float) -> None:
    """Set each scalable's matrix for a window of width/height ``ratio``."""
    matrix = scale_matrix(ratio)
    for scalable in scalables:
        scalable.transform = replace(
            scalable.transform,
            matrix=matrix @ Mat2.from_diagonal(scalable.base_scale),
        )