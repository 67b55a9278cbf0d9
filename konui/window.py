"""Windows drawn with pygame, their frames, window events and the event loop."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

import pygame

from .color import Color
from .events import MouseButton
from .geometry import IntSize, Vec2
from .lazy import Lazy


@dataclass(frozen=True)
class WindowAttributes:
    """How a window is created: its title, inner size and whether it can be resized."""

    title: str = "window"
    inner_size: IntSize = IntSize(800, 600)
    resizable: bool = True


def window_attributes(title: str, width: int, height: int) -> WindowAttributes:
    return WindowAttributes(title=title, inner_size=IntSize(width, height))


@dataclass(frozen=True)
class Resized:
    size: IntSize


@dataclass(frozen=True)
class RedrawRequested:
    pass


@dataclass(frozen=True)
class CloseRequested:
    pass


@dataclass(frozen=True)
class CursorMoved:
    device_id: int
    position: Vec2


@dataclass(frozen=True)
class CursorLeft:
    device_id: int


class ElementState(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class MouseInput:
    device_id: int
    state: ElementState
    button: MouseButton


WindowEvent = Union[
    Resized, RedrawRequested, CloseRequested, CursorMoved, CursorLeft, MouseInput
]


class RenderWindowError(RuntimeError):
    """Raised when a window's drawing surface cannot be created."""


@dataclass(frozen=True)
class SurfaceConfig:
    """The size and presentation settings of a window's drawing surface."""

    width: int
    height: int
    present_mode: str = "immediate"
    desired_maximum_frame_latency: int = 2


class RenderWindowSettings:
    """Decides how a window's surface is configured, created and presented.

    Subclass it to change any of these steps.
    """

    def surface_config(self, size: IntSize) -> SurfaceConfig:
        return SurfaceConfig(size.width, size.height)

    def create_surface(
        self, config: SurfaceConfig, attributes: WindowAttributes
    ) -> pygame.Surface:
        if not pygame.display.get_init():
            pygame.display.init()
        pygame.display.set_caption(attributes.title)
        flags = pygame.RESIZABLE if attributes.resizable else 0
        return pygame.display.set_mode((config.width, config.height), flags)

    def present(self, surface: pygame.Surface) -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is surface:
            pygame.display.flip()


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def _rgba(color: Color) -> tuple:
    return tuple(_channel(c) for c in color.to_tuple())


class RenderWindow:
    """A window together with the surface it is drawn on."""

    def __init__(
        self,
        attributes: Optional[WindowAttributes] = None,
        settings: Optional[RenderWindowSettings] = None,
    ) -> None:
        self.attributes = attributes if attributes is not None else WindowAttributes()
        self.settings = settings if settings is not None else RenderWindowSettings()
        self.inner_size = self.attributes.inner_size
        self.surface_config = self.settings.surface_config(self.inner_size)
        try:
            self.surface = self.settings.create_surface(
                self.surface_config, self.attributes
            )
        except pygame.error as error:
            raise RenderWindowError(f"cannot create a window surface: {error}") from error
        # A new window has nothing on it yet.
        self._redraw_requested = True

    def resize_surface(self, new_size: IntSize) -> None:
        """Follow a new window size; the surface never gets smaller than 1x1."""
        self.inner_size = new_size
        self.surface_config = replace(
            self.surface_config,
            width=max(1, new_size.width),
            height=max(1, new_size.height),
        )
        self.surface = self.settings.create_surface(self.surface_config, self.attributes)

    def ratio(self) -> float:
        """Width divided by height of the window's inner size."""
        width, height = self.inner_size.width, self.inner_size.height
        if height == 0:
            return math.inf if width else math.nan
        return width / height

    def start_drawing(self) -> Frame:
        return Frame(self)

    def request_redraw(self) -> None:
        self._redraw_requested = True
        if pygame.display.get_init():
            try:
                pygame.event.post(pygame.event.Event(pygame.USEREVENT, {"wake": True}))
            except pygame.error:
                pass

    def take_redraw_request(self) -> bool:
        """Whether a redraw was requested since the last call; clears the request."""
        requested, self._redraw_requested = self._redraw_requested, False
        return requested


class Frame:
    """One frame drawn on a window's surface; it is presented when the block closes.

    Points are in device coordinates: ``-1..1`` on both axes, ``y`` pointing up.
    """

    def __init__(self, window: RenderWindow) -> None:
        self._window = window
        self.surface = window.surface
        self._open = True

    @property
    def size(self) -> IntSize:
        width, height = self.surface.get_size()
        return IntSize(width, height)

    def _check(self) -> None:
        if not self._open:
            raise RuntimeError("the frame was already presented")

    def _to_pixels(self, point: Vec2) -> tuple:
        width, height = self.surface.get_size()
        return ((point.x + 1.0) / 2.0 * width, (1.0 - point.y) / 2.0 * height)

    def fill(self, color: Color) -> None:
        self._check()
        self.surface.fill(_rgba(color))

    def draw_polygon(self, points: Sequence[Vec2], color: Color) -> None:
        """Fill a polygon, blending it over what is drawn by its alpha."""
        self._check()
        if len(points) < 3:
            raise ValueError("a polygon needs at least 3 points")
        rgba = _rgba(color)
        if rgba[3] == 0:
            return
        pixels = [self._to_pixels(p) for p in points]
        if rgba[3] == 255:
            pygame.draw.polygon(self.surface, rgba, pixels)
            return
        left = math.floor(min(x for x, _ in pixels))
        top = math.floor(min(y for _, y in pixels))
        right = math.ceil(max(x for x, _ in pixels))
        bottom = math.ceil(max(y for _, y in pixels))
        layer = pygame.Surface(
            (max(1, right - left + 1), max(1, bottom - top + 1)), pygame.SRCALPHA, 32
        )
        pygame.draw.polygon(layer, rgba, [(x - left, y - top) for x, y in pixels])
        self.surface.blit(layer, (left, top))

    def __enter__(self) -> Frame:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._open:
            self._open = False
            self._window.settings.present(self.surface)


class EventHandler(abc.ABC):
    """Reacts to the events of one window."""

    @abc.abstractmethod
    def handle_event(self, event_loop: EventLoop, event: WindowEvent) -> None:
        """Handle one window event."""

    def device_event(self, event_loop: EventLoop, device_id: int, event: Any) -> None:
        """Handle a raw device event; ignored unless overridden."""


_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    6: MouseButton.BACK,
    7: MouseButton.FORWARD,
}


def _translate(event: Any) -> Optional[WindowEvent]:
    kind = event.type
    if kind == pygame.QUIT:
        return CloseRequested()
    if kind == pygame.VIDEORESIZE:
        return Resized(IntSize(event.w, event.h))
    if kind == pygame.WINDOWEXPOSED:
        return RedrawRequested()
    if kind == pygame.WINDOWLEAVE:
        return CursorLeft(0)
    if kind == pygame.MOUSEMOTION:
        x, y = event.pos
        return CursorMoved(0, Vec2(float(x), float(y)))
    if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _BUTTONS.get(event.button)
        if button is None:
            return None
        state = (
            ElementState.PRESSED
            if kind == pygame.MOUSEBUTTONDOWN
            else ElementState.RELEASED
        )
        return MouseInput(0, state, button)
    return None


def _poll_pygame() -> List[WindowEvent]:
    if not pygame.display.get_init():
        pygame.display.init()
    raw = [pygame.event.wait(), *pygame.event.get()]
    return [event for event in map(_translate, raw) if event is not None]


Poll = Callable[[], Optional[Iterable[WindowEvent]]]


class EventLoop:
    """Delivers window events to an application until it asks to exit.

    ``poll`` returns the next batch of events, or ``None`` when there will be no
    more; by default events come from pygame.
    """

    def __init__(self, poll: Optional[Poll] = None) -> None:
        self._poll = poll if poll is not None else _poll_pygame
        self._exiting = False
        self._windows: List[RenderWindow] = []

    @property
    def exiting(self) -> bool:
        return self._exiting

    def exit(self) -> None:
        self._exiting = True

    def _watch(self, window: RenderWindow) -> None:
        if all(w is not window for w in self._windows):
            self._windows.append(window)

    def _deliver_redraws(self, app: Any) -> None:
        for window in self._windows:
            if self._exiting:
                return
            if window.take_redraw_request():
                app.window_event(self, RedrawRequested())

    def run_app(self, app: Any) -> None:
        self._exiting = False
        app.resumed(self)
        while not self._exiting:
            self._deliver_redraws(app)
            if self._exiting:
                break
            batch = self._poll()
            if batch is None:
                break
            for event in batch:
                app.window_event(self, event)
                if self._exiting:
                    break


class WindowApp:
    """Creates its window and event handler when resumed, then forwards events."""

    def __init__(
        self,
        window_builder: Callable[[EventLoop], RenderWindow],
        event_handler_builder: Callable[[RenderWindow], EventHandler],
    ) -> None:
        self._window: Lazy[RenderWindow] = Lazy(window_builder)
        self._event_handler: Lazy[EventHandler] = Lazy(event_handler_builder)

    def resumed(self, event_loop: EventLoop) -> None:
        window = self._window.get_or_init(event_loop)
        event_loop._watch(window)
        self._event_handler.get_or_init(window)

    def window_event(self, event_loop: EventLoop, event: WindowEvent) -> None:
        handler = self.event_handler()
        if handler is None:
            raise RuntimeError("window event received before the application was resumed")
        handler.handle_event(event_loop, event)

    def device_event(self, event_loop: EventLoop, device_id: int, event: Any) -> None:
        handler = self.event_handler()
        if handler is None:
            raise RuntimeError("device event received before the application was resumed")
        handler.device_event(event_loop, device_id, event)

    def window(self) -> Optional[RenderWindow]:
        return self._window.get()

    def event_handler(self) -> Optional[EventHandler]:
        return self._event_handler.get()