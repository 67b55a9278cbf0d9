import pygame
import pytest

from konui.app import build_settings
from konui.counter import element_builder, main
from konui.events import Click, MouseButton
from konui.geometry import IntSize, Vec2
from konui.location import LocationPoint
from konui.shared import InvalidateCache, SignalSender
from konui.window import (
    CursorMoved,
    ElementState,
    EventLoop,
    MouseInput,
    RenderWindowSettings,
)


class OffscreenSettings(RenderWindowSettings):
    def create_surface(self, config, attributes):
        return pygame.Surface((config.width, config.height), 0, 32)

    def present(self, surface):
        pass


def click(button):
    return Click(LocationPoint(Vec2(0.0, 0.0), IntSize(10, 10)), button)


def label_text(element):
    return element.elements[0].source.value()


def test_initial_text():
    element = element_builder(SignalSender())
    assert label_text(element) == "clicked 0 times"


def test_left_click_is_consumed_and_counted():
    sender = SignalSender()
    element = element_builder(sender)
    assert element.handle_event(click(MouseButton.LEFT)) is True
    addrs = {s.addr for s in sender.drain() if isinstance(s, InvalidateCache)}
    assert len(addrs) == 1
    assert element.invalidate_caches(addrs) is True
    assert label_text(element) == "clicked 1 times"


def test_text_is_cached_until_invalidated():
    sender = SignalSender()
    element = element_builder(sender)
    assert label_text(element) == "clicked 0 times"
    element.handle_event(click(MouseButton.LEFT))
    assert label_text(element) == "clicked 0 times"
    assert element.invalidate_caches(set()) is False
    assert label_text(element) == "clicked 0 times"


def test_right_click_is_not_counted():
    sender = SignalSender()
    element = element_builder(sender)
    assert element.handle_event(click(MouseButton.RIGHT)) is False
    assert list(sender.drain()) == []


def test_click_through_app_updates_label():
    app = build_settings(element_builder, OffscreenSettings())
    app.event_loop_factory = lambda: EventLoop(
        iter(
            [
                [
                    CursorMoved(0, Vec2(10.0, 300.0)),
                    MouseInput(0, ElementState.RELEASED, MouseButton.LEFT),
                    MouseInput(0, ElementState.RELEASED, MouseButton.LEFT),
                ]
            ]
        ).__next__
        if False
        else _script(
            [
                CursorMoved(0, Vec2(10.0, 300.0)),
                MouseInput(0, ElementState.RELEASED, MouseButton.LEFT),
                MouseInput(0, ElementState.RELEASED, MouseButton.LEFT),
            ]
        )
    )
    app.run()
    element = app.window_app.event_handler().element
    assert label_text(element) == "clicked 2 times"


def _script(*batches):
    it = iter(batches)
    return lambda: next(it, None)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0