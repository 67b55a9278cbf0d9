import pygame
import pytest

from konui.app import App, KonEventHandler, build_settings
from konui.color import Color
from konui.elements import column, rect
from konui.events import Click, Element, MouseButton
from konui.geometry import IntSize, Vec2
from konui.shared import Redraw, SignalSender
from konui.window import (
    CloseRequested,
    CursorLeft,
    CursorMoved,
    ElementState,
    EventLoop,
    MouseInput,
    RenderWindow,
    RenderWindowSettings,
    Resized,
    window_attributes,
)


class OffscreenSettings(RenderWindowSettings):
    def __init__(self):
        self.presented = 0

    def create_surface(self, config, attributes):
        return pygame.Surface((config.width, config.height), 0, 32)

    def present(self, surface):
        self.presented += 1


class Recorder(Element):
    def __init__(self):
        self.events = []
        self.draws = []
        self.invalidated = []

    def draw(self, pass_, resources, location):
        self.draws.append(location)

    def handle_event(self, event):
        self.events.append(event)
        return False

    def invalidate_caches(self, addrs):
        self.invalidated.append(set(addrs))
        return False


def scripted(*batches):
    it = iter(batches)
    return lambda: next(it, None)


def make_handler(element):
    window = RenderWindow(window_attributes("t", 40, 20), OffscreenSettings())
    return KonEventHandler(window, element)


def test_release_after_move_clicks_at_cursor():
    element = Recorder()
    handler = make_handler(element)
    loop = EventLoop(scripted())
    handler.handle_event(loop, CursorMoved(0, Vec2(3.0, 4.0)))
    handler.handle_event(loop, MouseInput(0, ElementState.RELEASED, MouseButton.LEFT))
    assert len(element.events) == 1
    click = element.events[0]
    assert isinstance(click, Click)
    assert click.point.point == Vec2(3.0, 4.0)
    assert click.point.window_size == IntSize(40, 20)
    assert click.button is MouseButton.LEFT


def test_press_and_unknown_cursor_are_ignored():
    element = Recorder()
    handler = make_handler(element)
    loop = EventLoop(scripted())
    handler.handle_event(loop, MouseInput(0, ElementState.RELEASED, MouseButton.LEFT))
    handler.handle_event(loop, CursorMoved(0, Vec2(1.0, 1.0)))
    handler.handle_event(loop, MouseInput(0, ElementState.PRESSED, MouseButton.LEFT))
    handler.handle_event(loop, CursorLeft(0))
    handler.handle_event(loop, MouseInput(0, ElementState.RELEASED, MouseButton.LEFT))
    assert element.events == []
    assert handler.cursor_positions == {}


def test_close_requested_exits_loop():
    handler = make_handler(Recorder())
    loop = EventLoop(scripted())
    handler.handle_event(loop, CloseRequested())
    assert loop.exiting is True


def test_resized_resizes_surface():
    handler = make_handler(Recorder())
    handler.handle_event(EventLoop(scripted()), Resized(IntSize(100, 50)))
    assert handler.window.inner_size == IntSize(100, 50)
    assert handler.window.surface.get_size() == (100, 50)


def test_draw_passes_full_window_location():
    element = Recorder()
    handler = make_handler(element)
    handler.draw()
    assert len(element.draws) == 1
    location = element.draws[0]
    assert location.window_size == IntSize(40, 20)
    assert location.rect.top_left == Vec2(-1.0, 1.0)
    assert location.rect.size == Vec2(2.0, -2.0)


def test_run_delivers_click_and_initial_redraw():
    element = Recorder()
    settings = OffscreenSettings()
    app = build_settings(lambda sender: element, settings)
    app.event_loop_factory = lambda: EventLoop(
        scripted(
            [
                CursorMoved(0, Vec2(5.0, 6.0)),
                MouseInput(0, ElementState.RELEASED, MouseButton.RIGHT),
            ]
        )
    )
    app.run()
    assert len(element.draws) == 1
    assert settings.presented == 1
    assert [e.button for e in element.events] == [MouseButton.RIGHT]
    assert app.window_app.window().inner_size == IntSize(550, 310)


def test_run_draws_column_of_rects():
    settings = OffscreenSettings()
    app = build_settings(
        lambda sender: column(rect(Color.RED), rect(Color.BLUE)), settings
    )
    app.event_loop_factory = lambda: EventLoop(scripted())
    app.run()
    surface = app.window_app.window().surface
    assert tuple(surface.get_at((275, 50))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((275, 260))) == (0, 0, 255, 255)


def test_handle_signals_requests_redraw_and_invalidates():
    element = Recorder()
    captured = {}

    def builder(sender):
        captured["sender"] = sender
        return element

    app = build_settings(builder, OffscreenSettings())
    app.resumed(EventLoop(scripted()))
    window = app.window_app.window()
    window.take_redraw_request()

    sender = captured["sender"]
    shared = sender.shared(1)
    with shared.lock() as guard:
        guard.value = 2
    sender.send(Redraw())
    app.handle_signals()

    assert window.take_redraw_request() is True
    assert element.invalidated[-1] == {shared.addr}


def test_handle_signals_before_resume_raises():
    app = build_settings(lambda sender: Recorder(), OffscreenSettings())
    with pytest.raises(RuntimeError):
        app.handle_signals()


def test_app_is_built_around_given_sender():
    sender = SignalSender()
    app = build_settings(lambda s: Recorder(), OffscreenSettings())
    other = App(app.window_app, sender)
    sender.send(Redraw())
    assert list(other.signal_sender.drain()) == [Redraw()]