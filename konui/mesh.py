"""Triangle meshes and their placement by per-instance transforms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .color import Color
from .geometry import Transform, Vec2


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, colour and texture coordinate."""

    position: Vec2
    color: Color = Color.WHITE
    texture_coord: Vec2 = Vec2.ZERO


def _tint(a: Color, b: Color) -> Color:
    return Color(a.r * b.r, a.g * b.g, a.b * b.b, a.a * b.a)


@dataclass(frozen=True)
class Mesh:
    """Vertices, optionally indexed, that form a list of triangles."""

    vertices: Tuple[Vertex, ...]
    indices: Optional[Tuple[int, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        if self.indices is not None:
            object.__setattr__(self, "indices", tuple(self.indices))
            if len(self.indices) % 3:
                raise ValueError("index count must be a multiple of 3")
            bad = [i for i in self.indices if not 0 <= i < len(self.vertices)]
            if bad:
                raise ValueError(f"indices out of range: {bad}")
        elif len(self.vertices) % 3:
            raise ValueError("vertex count must be a multiple of 3")

    @classmethod
    def rect(cls, size: Vec2) -> Mesh:
        """A rectangle with its top-left corner at the origin."""
        return cls(
            (
                Vertex(Vec2(0.0, 0.0), Color.WHITE, Vec2(0.0, 0.0)),
                Vertex(Vec2(0.0, size.y), Color.WHITE, Vec2(0.0, 1.0)),
                Vertex(Vec2(size.x, size.y), Color.WHITE, Vec2(1.0, 1.0)),
                Vertex(Vec2(size.x, 0.0), Color.WHITE, Vec2(1.0, 0.0)),
            ),
            (0, 1, 2, 0, 2, 3),
        )

    @classmethod
    def square(cls, size: float, ratio: float) -> Mesh:
        return cls.rect(Vec2(size, size * ratio))

    def triangles(self) -> Iterator[Tuple[Vertex, Vertex, Vertex]]:
        """The mesh's triangles, in index order."""
        order: Sequence[int] = (
            self.indices if self.indices is not None else range(len(self.vertices))
        )
        points = iter(order)
        for a, b, c in zip(points, points, points):
            yield self.vertices[a], self.vertices[b], self.vertices[c]

    def instance_polygons(
        self, transforms: Iterable[Transform]
    ) -> Iterator[Tuple[Tuple[Vec2, Vec2, Vec2], Color]]:
        """Each triangle placed by each transform, with its vertex colour tinted."""
        triangles = list(self.triangles())
        for transform in transforms:
            for triangle in triangles:
                points = tuple(transform.apply(v.position) for v in triangle)
                yield points, _tint(triangle[0].color, transform.color)