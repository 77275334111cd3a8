"""Rendercanvas/GLFW-backed window layer implementation."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
import logging
from typing import Any

from widgetkit.api.input_events import KeyEvent, PointerEvent, RawInputEvent, WheelEvent
from widgetkit.api.window import (
    BitmapPresenter,
    WindowCloseEvent,
    WindowEvent,
    WindowPort,
    WindowResizeEvent,
)
from widgetkit.runtime.errors import BACKEND_ERRORS, log_backend_failure

_LOG = logging.getLogger("widgetkit.window")


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas backend loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()


@dataclass(slots=True)
class RenderCanvasWindow(WindowPort):
    """Window-layer adapter over an existing rendercanvas canvas."""

    canvas: Any
    events_trace_enabled: bool = False
    _events: deque[WindowEvent] = field(default_factory=deque)
    _input_events: deque[RawInputEvent] = field(default_factory=deque)
    _rc_auto: Any | None = field(default=None, repr=False)
    _presenter: BitmapPresenter | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._bind_window_events()

    def logical_size(self) -> tuple[float, float]:
        getter = getattr(self.canvas, "get_logical_size", None)
        if not callable(getter):
            raise RuntimeError("Canvas does not report a logical size.")
        width, height = getter()
        return (float(width), float(height))

    def bitmap_presenter(self) -> BitmapPresenter:
        if self._presenter is None:
            get_context = getattr(self.canvas, "get_context", None)
            if not callable(get_context):
                raise RuntimeError("Canvas does not provide presentation contexts.")
            self._presenter = get_context("bitmap")
        return self._presenter

    def poll_events(self) -> tuple[WindowEvent, ...]:
        drained = tuple(self._events)
        self._events.clear()
        return drained

    def poll_input_events(self) -> tuple[RawInputEvent, ...]:
        drained = tuple(self._input_events)
        self._input_events.clear()
        return drained

    def set_title(self, title: str) -> None:
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title)

    def set_draw_callback(self, callback: Callable[[], None]) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if not callable(request_draw):
            raise RuntimeError("Canvas does not support draw callbacks.")
        request_draw(callback)

    def close(self) -> None:
        self.stop_loop()
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def run_loop(self) -> None:
        if self._rc_auto is None:
            return
        run_backend_loop(self._rc_auto)

    def stop_loop(self) -> None:
        if self._rc_auto is None:
            return
        stop_backend_loop(self._rc_auto)

    def _bind_window_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        self._try_add_event_handler(add_handler, self._on_resize, "resize")
        self._try_add_event_handler(add_handler, self._on_close, "close")
        self._try_add_event_handler(add_handler, self._on_pointer_down, "pointer_down")
        self._try_add_event_handler(add_handler, self._on_pointer_move, "pointer_move")
        self._try_add_event_handler(add_handler, self._on_pointer_up, "pointer_up")
        self._try_add_event_handler(add_handler, self._on_key_down, "key_down")
        self._try_add_event_handler(add_handler, self._on_key_up, "key_up")
        self._try_add_event_handler(add_handler, self._on_char, "char")
        self._try_add_event_handler(add_handler, self._on_wheel, "wheel")
        if self.events_trace_enabled:
            self._try_add_event_handler(add_handler, self._on_any_event, "*")

    def _on_resize(self, event: object) -> None:
        size = _event_value(event, "size")
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            lw, lh = size[0], size[1]
        else:
            lw = _event_value(event, "width")
            lh = _event_value(event, "height")
        if not isinstance(lw, (int, float)) or not isinstance(lh, (int, float)):
            return
        ratio_raw = _event_value(event, "pixel_ratio", 1.0)
        dpi_scale = float(ratio_raw) if isinstance(ratio_raw, (int, float)) and ratio_raw > 0 else 1.0
        self._events.append(
            WindowResizeEvent(
                logical_width=float(lw),
                logical_height=float(lh),
                physical_width=max(1, int(float(lw) * dpi_scale)),
                physical_height=max(1, int(float(lh) * dpi_scale)),
                dpi_scale=dpi_scale,
            )
        )

    def _on_close(self, event: object) -> None:
        _ = event
        self._events.append(WindowCloseEvent())

    def _on_pointer_down(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_down"))

    def _on_pointer_move(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_move"))

    def _on_pointer_up(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_up"))

    def _on_key_down(self, event: object) -> None:
        self._queue_input(_parse_key_event(event, expected_type="key_down"))

    def _on_key_up(self, event: object) -> None:
        self._queue_input(_parse_key_event(event, expected_type="key_up"))

    def _on_char(self, event: object) -> None:
        self._queue_input(_parse_char_event(event))

    def _on_wheel(self, event: object) -> None:
        self._queue_input(_parse_wheel_event(event))

    def _queue_input(self, parsed: RawInputEvent | None) -> None:
        if parsed is not None:
            self._input_events.append(parsed)

    def _try_add_event_handler(self, add_handler: Any, handler: Any, event_type: str) -> None:
        try:
            add_handler(handler, event_type)
        except BACKEND_ERRORS:
            log_backend_failure(_LOG, "window_event_type_unsupported", type=event_type)

    def _on_any_event(self, event: object) -> None:
        event_type = str(_event_value(event, "event_type", ""))
        if event_type in {"before_draw", "animate"}:
            return
        _LOG.debug("window_event type=%s payload=%r", event_type, event)


def create_rendercanvas_window(
    canvas: Any | None = None,
    *,
    width: int = 800,
    height: int = 600,
    title: str = "widgetkit",
    update_mode: str = "continuous",
    max_fps: float = 60.0,
    vsync: bool = True,
    events_trace_enabled: bool = False,
) -> RenderCanvasWindow:
    """Create window adapter over an existing or newly created rendercanvas canvas."""
    if canvas is not None:
        return RenderCanvasWindow(canvas=canvas, events_trace_enabled=events_trace_enabled)
    try:
        import rendercanvas.auto as rc_auto
    except ImportError as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
    try:
        canvas = canvas_cls(
            size=(int(width), int(height)),
            title=title,
            update_mode=update_mode,
            max_fps=float(max_fps),
            vsync=bool(vsync),
        )
    except TypeError:
        canvas = canvas_cls(size=(int(width), int(height)), title=title)
    return RenderCanvasWindow(
        canvas=canvas,
        events_trace_enabled=events_trace_enabled,
        _rc_auto=rc_auto,
    )


def _parse_modifiers(event: object) -> tuple[str, ...]:
    raw = _event_value(event, "modifiers", ())
    if not isinstance(raw, (tuple, list)):
        return ()
    return tuple(str(item) for item in raw if isinstance(item, str))


def _parse_pointer_event(event: object, *, expected_type: str) -> PointerEvent | None:
    if str(_event_value(event, "event_type", "")).strip().lower() != expected_type:
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    button = _event_value(event, "button", 0)
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    if not isinstance(button, int):
        button = 0
    if expected_type in {"pointer_down", "pointer_up"} and int(button) == 0:
        button = 1
    return PointerEvent(expected_type, float(x), float(y), int(button), _parse_modifiers(event))


def _parse_key_event(event: object, *, expected_type: str) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != expected_type:
        return None
    key = _event_value(event, "key")
    if not isinstance(key, str):
        return None
    return KeyEvent(expected_type, key, _parse_modifiers(event))


def _parse_char_event(event: object) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != "char":
        return None
    value = _event_value(event, "data")
    if not isinstance(value, str) or not value:
        return None
    return KeyEvent("char", value, _parse_modifiers(event))


def _parse_wheel_event(event: object) -> WheelEvent | None:
    if str(_event_value(event, "event_type", "")) != "wheel":
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    dx = _event_value(event, "dx", 0.0)
    dy = _event_value(event, "dy")
    if not all(isinstance(value, (int, float)) for value in (x, y, dx, dy)):
        return None
    return WheelEvent(float(x), float(y), float(dx), float(dy), _parse_modifiers(event))


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


__all__ = [
    "RenderCanvasWindow",
    "create_rendercanvas_window",
    "run_backend_loop",
    "stop_backend_loop",
]
