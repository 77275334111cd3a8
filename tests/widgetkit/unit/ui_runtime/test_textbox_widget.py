from __future__ import annotations

from widgetkit.api.geometry import Point, Rect
from widgetkit.api.input_events import (
    Char,
    Key,
    KeyDown,
    KeyUp,
    MouseButton,
    MouseDown,
    MouseMove,
    MouseUp,
    Scroll,
)
from widgetkit.api.render import WHITE, Font
from widgetkit.rendering.recording import RecordingFrame
from widgetkit.ui_runtime.context import InteractionContext
from widgetkit.ui_runtime.widgets import (
    TEXTBOX_COLOR,
    TEXTBOX_FOCUS_COLOR,
    TEXTBOX_FONT_SIZE,
    Textbox,
)

FONT = Font(path="test.ttf")


def test_chars_accumulate_in_order() -> None:
    textbox = Textbox(FONT)
    context = InteractionContext()
    for value in "abc":
        assert textbox.handle(Char(value), context) is False
    assert textbox.text == "abc"


def test_only_char_events_mutate_text() -> None:
    textbox = Textbox(FONT, text="seed")
    textbox.layout(Rect(0, 0, 100, 20))
    context = InteractionContext(cursor=Point(5, 5))
    events = (
        MouseMove(),
        MouseDown(MouseButton.LEFT),
        MouseUp(MouseButton.LEFT),
        Scroll(0.0, -1.0),
        KeyDown(Key.BACKSPACE),
        KeyUp(Key.BACKSPACE),
    )
    for event in events:
        assert textbox.handle(event, context) is False
    assert textbox.text == "seed"
    assert textbox.focus is False
    assert context.mouse_captured is False


def test_host_side_text_access() -> None:
    textbox = Textbox(FONT)
    textbox.append_text("hello")
    textbox.handle(Char("!"), InteractionContext())
    assert textbox.text == "hello!"
    textbox.set_text("x")
    assert textbox.text == "x"
    textbox.clear()
    assert textbox.text == ""


def test_render_draws_background_then_text_run() -> None:
    textbox = Textbox(FONT, text="hi")
    textbox.layout(Rect(5, 6, 100, 20))
    frame = RecordingFrame()
    textbox.render(frame)

    assert frame.kinds() == ("rect", "text")
    background, text = frame.commands
    assert background.color == TEXTBOX_COLOR
    assert text.value("font") is FONT
    assert text.value("size_px") == TEXTBOX_FONT_SIZE
    assert text.value("text") == "hi"
    assert text.pos == Point(5, 6)
    assert text.color == WHITE


def test_focused_textbox_renders_focus_color() -> None:
    textbox = Textbox(FONT)
    textbox.focus = True
    frame = RecordingFrame()
    textbox.render(frame)
    assert frame.commands[0].color == TEXTBOX_FOCUS_COLOR


def test_font_is_shared_not_copied() -> None:
    first = Textbox(FONT)
    second = Textbox(FONT)
    assert first.font is second.font is FONT
