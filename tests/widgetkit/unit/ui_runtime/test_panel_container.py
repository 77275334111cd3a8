from __future__ import annotations

import random

from tests.widgetkit.conftest import play_icon
from widgetkit.api.geometry import Point, Rect
from widgetkit.api.input_events import Char, MouseButton, MouseDown, MouseMove, MouseUp
from widgetkit.api.render import Font
from widgetkit.rendering.recording import RecordingFrame
from widgetkit.ui_runtime.context import InteractionContext
from widgetkit.ui_runtime.widgets import Button, Panel, Textbox

LEFT_DOWN = MouseDown(MouseButton.LEFT)
LEFT_UP = MouseUp(MouseButton.LEFT)


def test_panel_assigns_child_rects_relative_to_its_origin() -> None:
    button = Button(play_icon())
    textbox = Textbox(Font(path=""))
    panel = Panel([(button, Rect(10, 10, 16, 16)), (textbox, Rect(40, 10, 100, 20))])

    assert panel.layout(Rect(100, 200, 800, 600)) == Rect(100, 200, 800, 600)
    assert button.rect == Rect(110, 210, 16, 16)
    assert textbox.rect == Rect(140, 210, 100, 20)
    assert panel.child_rects == (button.rect, textbox.rect)

    panel.layout(Rect(100, 200, 800, 600))
    assert button.rect == Rect(110, 210, 16, 16)


def test_panel_reports_which_child_activated() -> None:
    first = Button(play_icon())
    second = Button(play_icon())
    panel = Panel([(first, Rect(0, 0, 10, 10)), (second, Rect(20, 0, 10, 10))])
    panel.layout(Rect(0, 0, 100, 100))
    context = InteractionContext(cursor=Point(25, 5))

    assert panel.handle(LEFT_DOWN, context) is False
    assert panel.activated == ()
    assert panel.handle(LEFT_UP, context) is True
    assert panel.activated == (second,)
    assert panel.handle(MouseMove(), context) is False
    assert panel.activated == ()


def test_overlapping_buttons_only_first_acquires_capture() -> None:
    first = Button(play_icon())
    second = Button(play_icon())
    panel = Panel([(first, Rect(0, 0, 20, 20)), (second, Rect(10, 10, 20, 20))])
    panel.layout(Rect(0, 0, 100, 100))
    context = InteractionContext(cursor=Point(15, 15))

    panel.handle(LEFT_DOWN, context)
    assert first.down is True
    assert second.down is False
    assert panel.handle(LEFT_UP, context) is True
    assert panel.activated == (first,)
    assert context.mouse_captured is False


def test_panel_renders_children_in_order() -> None:
    textbox = Textbox(Font(path=""), text="t")
    panel = Panel([(Button(play_icon()), Rect(0, 0, 10, 10)), (textbox, Rect(0, 20, 10, 10))])
    panel.layout(Rect(0, 0, 50, 50))
    frame = RecordingFrame()
    panel.render(frame)
    assert frame.kinds() == ("rect", "path", "rect", "text")


def test_panel_forwards_chars_to_textboxes() -> None:
    textbox = Textbox(Font(path=""))
    panel = Panel([(textbox, Rect(0, 0, 10, 10))])
    panel.layout(Rect(0, 0, 10, 10))
    panel.handle(Char("q"), InteractionContext())
    assert textbox.text == "q"


def test_random_press_sequences_never_leak_or_share_capture() -> None:
    rng = random.Random(1234)
    buttons = [Button(play_icon()) for _ in range(4)]
    panel = Panel([(button, Rect(i * 15, 0, 20, 20)) for i, button in enumerate(buttons)])
    panel.layout(Rect(0, 0, 200, 100))
    context = InteractionContext()

    for _ in range(500):
        context.cursor = Point(rng.uniform(-10, 90), rng.uniform(-10, 30))
        event = rng.choice((LEFT_DOWN, LEFT_UP, MouseMove()))
        panel.handle(event, context)
        pressed = [button for button in buttons if button.down]
        assert len(pressed) <= 1
        assert context.mouse_captured == bool(pressed)

    panel.handle(LEFT_UP, context)
    assert context.mouse_captured is False
    assert not any(button.down for button in buttons)
