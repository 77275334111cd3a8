from __future__ import annotations

import pytest

from tests.widgetkit.conftest import placed_button, play_icon
from widgetkit.api.geometry import Point, Rect
from widgetkit.api.input_events import KeyEvent, MouseMove, PointerEvent
from widgetkit.api.render import Color, Font
from widgetkit.rendering.recording import RecordingFrame, RecordingRenderer
from widgetkit.runtime.host import UiHost, UiHostConfig
from widgetkit.ui_runtime.widgets import BUTTON_HOVER_COLOR, Button, Panel, Textbox
from widgetkit.window.headless import HeadlessWindow


class _LayoutProbe:
    def __init__(self) -> None:
        self.layouts: list[Rect] = []
        self.renders = 0
        self.events: list[object] = []

    def layout(self, rect: Rect) -> Rect:
        self.layouts.append(rect)
        return rect

    def render(self, frame) -> None:
        _ = frame
        self.renders += 1

    def handle(self, event, context) -> bool:
        _ = context
        self.events.append(event)
        return False


def _click(x: float, y: float) -> tuple[PointerEvent, ...]:
    return (
        PointerEvent("pointer_down", x, y, 1),
        PointerEvent("pointer_up", x, y, 1),
    )


def test_start_lays_out_root_over_full_viewport() -> None:
    probe = _LayoutProbe()
    host = UiHost(probe)
    assert host.start(320, 200) == Rect(0.0, 0.0, 320.0, 200.0)
    assert probe.layouts == [Rect(0.0, 0.0, 320.0, 200.0)]
    assert host.viewport == Rect(0.0, 0.0, 320.0, 200.0)


def test_resize_only_relayouts_on_size_change() -> None:
    probe = _LayoutProbe()
    host = UiHost(probe)
    host.start(320, 200)
    assert host.resize(320, 200) is False
    assert host.resize(640, 480) is True
    assert probe.layouts[-1] == Rect(0.0, 0.0, 640.0, 480.0)
    assert len(probe.layouts) == 2


def test_click_inside_button_fires_activation_callback() -> None:
    fired: list[object] = []
    button = Button(play_icon())
    host = UiHost(Panel([(button, Rect(10, 10, 20, 20))]), on_activation=fired.append)
    host.start(100, 100)

    activations = host.ingest(_click(15, 15))

    assert activations == 1
    assert len(fired) == 1
    assert host.context.mouse_captured is False


def test_drag_off_button_before_release_does_not_activate() -> None:
    fired: list[object] = []
    button = Button(play_icon())
    host = UiHost(Panel([(button, Rect(10, 10, 20, 20))]), on_activation=fired.append)
    host.start(100, 100)

    host.ingest(
        (
            PointerEvent("pointer_down", 15, 15, 1),
            PointerEvent("pointer_move", 80, 80, 0),
            PointerEvent("pointer_up", 80, 80, 1),
        )
    )

    assert fired == []
    assert button.down is False
    assert host.context.mouse_captured is False


def test_overlapping_buttons_only_first_captures() -> None:
    first = placed_button(Rect(0, 0, 20, 20))
    second = placed_button(Rect(0, 0, 20, 20))
    panel = Panel([(first, Rect(0, 0, 20, 20)), (second, Rect(0, 0, 20, 20))])
    host = UiHost(panel)
    host.start(50, 50)

    host.ingest((PointerEvent("pointer_down", 5, 5, 1),))

    assert first.down is True
    assert second.down is False
    assert second.hover is True


def test_typed_characters_reach_textbox() -> None:
    textbox = Textbox(Font(path=""))
    host = UiHost(Panel([(textbox, Rect(0, 0, 100, 20))]))
    host.start(100, 20)

    host.ingest((KeyEvent("char", "hi"), KeyEvent("key_down", "Enter")))

    assert textbox.text == "hi"


def test_dispatch_rejects_reentrant_delivery() -> None:
    class _Reentrant(_LayoutProbe):
        host: UiHost | None = None

        def handle(self, event, context) -> bool:
            if self.host is not None:
                return self.host.dispatch(event)
            return super().handle(event, context)

    root = _Reentrant()
    host = UiHost(root)
    root.host = host
    host.start(10, 10)

    with pytest.raises(RuntimeError):
        host.dispatch(MouseMove())

    root.host = None
    assert host.dispatch(MouseMove()) is False
    assert root.events == [MouseMove()]


def test_render_clears_with_configured_color_then_draws_tree() -> None:
    color = Color(0.5, 0.5, 0.5, 1.0)
    root = Panel([(placed_button(Rect(0, 0, 10, 10)), Rect(0, 0, 10, 10))])
    host = UiHost(root, UiHostConfig(clear_color=color))
    host.start(10, 10)
    frame = RecordingFrame(10, 10)

    host.render(frame)

    assert frame.clear_color == color
    assert frame.kinds() == ("rect", "path")
    assert frame.finished is True


def test_frame_handles_input_before_rendering() -> None:
    button = Button(play_icon())
    host = UiHost(Panel([(button, Rect(10, 10, 20, 20))]))
    window = HeadlessWindow(100, 100)
    renderer = RecordingRenderer()
    window.push_input(PointerEvent("pointer_move", 15, 15, 0))

    host.frame(window, renderer)

    assert host.frame_index == 1
    assert host.context.cursor == Point(15.0, 15.0)
    frame = renderer.last_frame
    assert frame is not None
    assert frame.commands[0].color == BUTTON_HOVER_COLOR
    assert button.hover is True


def test_frame_applies_resize_and_close_window_events() -> None:
    probe = _LayoutProbe()
    host = UiHost(probe)
    window = HeadlessWindow(100, 100)
    renderer = RecordingRenderer()
    host.frame(window, renderer)

    window.resize(200, 150)
    host.frame(window, renderer)
    assert probe.layouts[-1] == Rect(0.0, 0.0, 200.0, 150.0)
    assert renderer.last_frame is not None
    assert (renderer.last_frame.width, renderer.last_frame.height) == (200.0, 150.0)

    window.request_close()
    host.frame(window, renderer)
    assert host.is_closed() is True
    assert renderer.frames_begun == 2
    assert host.frame_index == 2


def test_first_frame_starts_host_from_window_size() -> None:
    probe = _LayoutProbe()
    host = UiHost(probe)
    renderer = RecordingRenderer()

    host.frame(HeadlessWindow(120, 90), renderer)

    assert probe.layouts == [Rect(0.0, 0.0, 120.0, 90.0)]
    assert renderer.last_frame is not None
    assert (renderer.last_frame.width, renderer.last_frame.height) == (120.0, 90.0)
    assert probe.renders == 1
