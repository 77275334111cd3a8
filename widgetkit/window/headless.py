"""In-process window used for headless runs and scripted input."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from widgetkit.api.input_events import RawInputEvent
from widgetkit.api.window import (
    BitmapPresenter,
    WindowCloseEvent,
    WindowEvent,
    WindowPort,
    WindowResizeEvent,
)


class _DiscardPresenter:
    def set_bitmap(self, bitmap: object) -> None:
        _ = bitmap


class HeadlessWindow(WindowPort):
    """Window without an OS surface; events are pushed by the caller."""

    def __init__(self, width: float = 800.0, height: float = 600.0, title: str = "") -> None:
        self._size = (float(width), float(height))
        self.title = title
        self._events: deque[WindowEvent] = deque()
        self._input_events: deque[RawInputEvent] = deque()
        self._draw_callback: Callable[[], None] | None = None
        self._running = False
        self.closed = False

    def push_input(self, *events: RawInputEvent) -> None:
        self._input_events.extend(events)

    def resize(self, width: float, height: float) -> None:
        self._size = (float(width), float(height))
        self._events.append(
            WindowResizeEvent(
                logical_width=float(width),
                logical_height=float(height),
                physical_width=max(1, int(width)),
                physical_height=max(1, int(height)),
                dpi_scale=1.0,
            )
        )

    def request_close(self) -> None:
        self._events.append(WindowCloseEvent())

    def logical_size(self) -> tuple[float, float]:
        return self._size

    def bitmap_presenter(self) -> BitmapPresenter:
        return _DiscardPresenter()

    def poll_events(self) -> tuple[WindowEvent, ...]:
        drained = tuple(self._events)
        self._events.clear()
        return drained

    def poll_input_events(self) -> tuple[RawInputEvent, ...]:
        drained = tuple(self._input_events)
        self._input_events.clear()
        return drained

    def set_title(self, title: str) -> None:
        self.title = title

    def set_draw_callback(self, callback: Callable[[], None]) -> None:
        self._draw_callback = callback

    def draw(self, frames: int = 1) -> None:
        """Invoke the registered draw callback a bounded number of times."""
        if self._draw_callback is None:
            raise RuntimeError("no draw callback registered")
        self._running = True
        for _ in range(max(0, int(frames))):
            if not self._running:
                break
            self._draw_callback()
        self._running = False

    def run_loop(self) -> None:
        self.draw(1)

    def stop_loop(self) -> None:
        self._running = False

    def close(self) -> None:
        self.stop_loop()
        self.closed = True


__all__ = ["HeadlessWindow"]
