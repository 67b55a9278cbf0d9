"""Running an element tree in a window: drawing, input and change signals."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Set

from .color import Color
from .drawer import DrawPass, Drawers, Resources
from .events import Click
from .geometry import Vec2
from .location import LocationPoint, LocationRect
from .shared import InvalidateCache, Redraw, SignalSender
from .window import (
    CloseRequested,
    CursorLeft,
    CursorMoved,
    ElementState,
    EventHandler,
    EventLoop,
    MouseInput,
    RedrawRequested,
    RenderWindow,
    RenderWindowSettings,
    Resized,
    WindowApp,
    window_attributes,
)

WINDOW_TITLE = "kon3"
WINDOW_WIDTH = 550
WINDOW_HEIGHT = 310


class KonEventHandler(EventHandler):
    """Draws one element tree into a window and feeds it clicks."""

    def __init__(self, window: RenderWindow, element: Any) -> None:
        self.window = window
        self.element = element
        self.resources = Resources(window)
        self.drawers = Drawers()
        self.cursor_positions: Dict[int, Vec2] = {}

    def draw(self) -> None:
        """Draw the element over the whole window on a black background."""
        with self.window.start_drawing() as frame:
            frame.fill(Color.BLACK)
            location = LocationRect.full(self.window.inner_size)
            with DrawPass(frame, self.drawers) as pass_:
                self.element.draw(pass_, self.resources, location)

    def handle_event(self, event_loop: EventLoop, event: Any) -> None:
        if isinstance(event, Resized):
            self.window.resize_surface(event.size)
        elif isinstance(event, RedrawRequested):
            self.draw()
        elif isinstance(event, CursorMoved):
            self.cursor_positions[event.device_id] = event.position
        elif isinstance(event, CursorLeft):
            self.cursor_positions.pop(event.device_id, None)
        elif isinstance(event, MouseInput):
            position = self.cursor_positions.get(event.device_id)
            if position is None or event.state is not ElementState.RELEASED:
                return
            click = Click(LocationPoint(position, self.window.inner_size), event.button)
            self.element.handle_event(click)
        elif isinstance(event, CloseRequested):
            event_loop.exit()


class App:
    """A window application that also acts on the signals its shared values send."""

    def __init__(
        self,
        window_app: WindowApp,
        signal_sender: SignalSender,
        event_loop_factory: Callable[[], EventLoop] = EventLoop,
    ) -> None:
        self.window_app = window_app
        self.signal_sender = signal_sender
        self.event_loop_factory = event_loop_factory
        self._invalidated: Set[int] = set()

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        self.event_loop_factory().run_app(self)

    def resumed(self, event_loop: EventLoop) -> None:
        self.window_app.resumed(event_loop)

    def window_event(self, event_loop: EventLoop, event: Any) -> None:
        self.window_app.window_event(event_loop, event)
        self.handle_signals()

    def handle_signals(self) -> None:
        """Act on every pending signal, then invalidate the caches of changed values."""
        handler: Optional[KonEventHandler] = self.window_app.event_handler()  # type: ignore[assignment]
        if handler is None:
            raise RuntimeError("signals handled before the application was resumed")
        for signal in self.signal_sender.drain():
            if isinstance(signal, Redraw):
                window = self.window_app.window()
                if window is not None:
                    window.request_redraw()
            elif isinstance(signal, InvalidateCache):
                self._invalidated.add(signal.addr)
        handler.element.invalidate_caches(self._invalidated)
        self._invalidated.clear()


def build_settings(
    element_builder: Callable[[SignalSender], Any], settings: RenderWindowSettings
) -> App:
    """Build the element tree and an application that shows it with ``settings``."""
    signal_sender = SignalSender()
    element = element_builder(signal_sender)
    window_app = WindowApp(
        lambda event_loop: RenderWindow(
            window_attributes(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT), settings
        ),
        lambda window: KonEventHandler(window, element),
    )
    return App(window_app, signal_sender)


def run_settings(
    element_builder: Callable[[SignalSender], Any], settings: RenderWindowSettings
) -> None:
    build_settings(element_builder, settings).run()


def run(element_builder: Callable[[SignalSender], Any]) -> None:
    build_settings(element_builder, RenderWindowSettings()).run()