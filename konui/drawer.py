"""Batched mesh drawing and lazily created drawing resources."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from .color import Color
from .geometry import Transform, Vec2
from .mesh import Mesh

R = TypeVar("R")


def _tint(a: Color, b: Color) -> Color:
    return Color(a.r * b.r, a.g * b.g, a.b * b.b, a.a * b.a)


class UnitSquareTopLeft:
    """A unit square mesh with its top-left corner at ``(0, 0)``."""

    def __init__(self, context: Any = None) -> None:
        self.mesh = Mesh.rect(Vec2.ONE)


class NoGlobalTransform:
    """A global transform that leaves every point and colour unchanged."""

    def __init__(self, context: Any = None) -> None:
        self.transform = Transform.IDENTITY


class DefaultTexture:
    """A texture of a single opaque white pixel."""

    def __init__(self, context: Any = None) -> None:
        self.width = 1
        self.height = 1
        self.pixels = ((255, 255, 255, 255),)
        self.color = Color.WHITE


class Resources:
    """Creates each kind of resource once, from a shared context, on first request."""

    def __init__(self, context: Any) -> None:
        self.context = context
        self._resources: Dict[type, Any] = {}
        self._lock = threading.Lock()

    def get(self, kind: Type[R]) -> R:
        with self._lock:
            try:
                return self._resources[kind]
            except KeyError:
                resource = self._resources[kind] = kind(self.context)
                return resource


@dataclass(frozen=True, eq=False)
class MeshDrawingInfo:
    """What a batch of instances is drawn with: a mesh, a global transform, a texture."""

    mesh: Mesh
    global_transform: Transform
    texture: DefaultTexture

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshDrawingInfo):
            return NotImplemented
        return (
            self.mesh is other.mesh
            and self.global_transform == other.global_transform
            and self.texture is other.texture
        )

    def __hash__(self) -> int:
        return hash((id(self.mesh), self.global_transform, id(self.texture)))


class ActiveDrawer(Enum):
    MESH = "mesh"


@dataclass
class MeshDrawerInfo:
    """Instances waiting to be drawn and the mesh they are drawn with."""

    transforms: List[Transform] = field(default_factory=list)
    current_mesh_info: Optional[MeshDrawingInfo] = None


@dataclass
class Drawers:
    """The state of every drawer, kept between frames."""

    active: Optional[ActiveDrawer] = None
    mesh: Optional[MeshDrawerInfo] = None


class MeshDrawer:
    """Queues mesh instances and sends them to the renderer in batches."""

    def __init__(self, renderer: Any, info: MeshDrawerInfo) -> None:
        self._renderer = renderer
        self._info = info

    def draw(self, mesh_info: MeshDrawingInfo, transform: Transform) -> None:
        current = self._info.current_mesh_info
        if current is not None and current != mesh_info:
            self.flush()
        self._info.current_mesh_info = mesh_info
        self._info.transforms.append(transform)

    def flush(self) -> None:
        """Draw every queued instance and empty the queue."""
        info = self._info.current_mesh_info
        if info is None or not self._info.transforms:
            return
        global_transform = info.global_transform
        tint = _tint(global_transform.color, info.texture.color)
        for points, color in info.mesh.instance_polygons(self._info.transforms):
            placed = [global_transform.apply(point) for point in points]
            self._renderer.draw_polygon(placed, _tint(color, tint))
        self._info.transforms.clear()


class DrawPass:
    """One frame's drawing; pending batches are drawn when the pass is closed."""

    def __init__(self, renderer: Any, drawers: Optional[Drawers] = None) -> None:
        self.renderer = renderer
        self.drawers = drawers if drawers is not None else Drawers()

    def mesh(self) -> MeshDrawer:
        self._set_active(ActiveDrawer.MESH)
        if self.drawers.mesh is None:
            self.drawers.mesh = MeshDrawerInfo()
        return MeshDrawer(self.renderer, self.drawers.mesh)

    def _set_active(self, active: ActiveDrawer) -> None:
        if self.drawers.active is not None and self.drawers.active != active:
            self.flush()
        self.drawers.active = active

    def flush(self) -> None:
        if self.drawers.active is ActiveDrawer.MESH and self.drawers.mesh is not None:
            MeshDrawer(self.renderer, self.drawers.mesh).flush()

    def __enter__(self) -> DrawPass:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()