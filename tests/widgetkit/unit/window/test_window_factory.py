from __future__ import annotations

import pytest

from widgetkit.api.input_events import PointerEvent
from widgetkit.api.window import WindowCloseEvent, WindowResizeEvent
from widgetkit.runtime.config import load_runtime_config
from widgetkit.window import factory
from widgetkit.window.headless import HeadlessWindow


def test_factory_passes_config_to_rendercanvas_window(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def _fake_create(**kwargs):
        captured.update(kwargs)
        return "window"

    monkeypatch.setattr(factory, "create_rendercanvas_window", _fake_create)
    config = load_runtime_config(
        env={
            "WIDGETKIT_WINDOW_WIDTH": "320",
            "WIDGETKIT_WINDOW_HEIGHT": "200",
            "WIDGETKIT_WINDOW_TITLE": "demo",
            "WIDGETKIT_RENDER_FPS_CAP": "24",
            "WIDGETKIT_WINDOW_EVENTS_TRACE_ENABLED": "true",
        }
    )

    assert factory.create_window_layer(config) == "window"
    assert captured == {
        "width": 320,
        "height": 200,
        "title": "demo",
        "update_mode": "continuous",
        "max_fps": 24.0,
        "vsync": True,
        "events_trace_enabled": True,
    }


def test_factory_rejects_unknown_backend() -> None:
    config = load_runtime_config(env={"WIDGETKIT_WINDOW_BACKEND": "qt"})
    with pytest.raises(RuntimeError, match="Unsupported WIDGETKIT_WINDOW_BACKEND"):
        factory.create_window_layer(config)


def test_headless_window_queues_and_drains_events() -> None:
    window = HeadlessWindow(100, 50)
    window.push_input(PointerEvent("pointer_move", 1, 2, 0))
    window.resize(200, 80)
    window.request_close()

    assert window.logical_size() == (200.0, 80.0)
    assert window.poll_events() == (
        WindowResizeEvent(200.0, 80.0, 200, 80, 1.0),
        WindowCloseEvent(),
    )
    assert window.poll_input_events() == (PointerEvent("pointer_move", 1, 2, 0),)
    assert window.poll_events() == ()


def test_headless_draw_requires_callback_and_honors_stop() -> None:
    window = HeadlessWindow()
    with pytest.raises(RuntimeError):
        window.draw(1)

    calls: list[int] = []

    def _draw() -> None:
        calls.append(len(calls))
        if len(calls) == 2:
            window.stop_loop()

    window.set_draw_callback(_draw)
    window.draw(5)
    assert calls == [0, 1]
    window.close()
    assert window.closed is True
