"""Window and presentation contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from widgetkit.api.input_events import RawInputEvent


@dataclass(frozen=True, slots=True)
class WindowResizeEvent:
    """Normalized resize/DPI event in logical and physical units."""

    logical_width: float
    logical_height: float
    physical_width: int
    physical_height: int
    dpi_scale: float


@dataclass(frozen=True, slots=True)
class WindowCloseEvent:
    """Normalized close-request event."""

    requested: bool = True


WindowEvent = WindowResizeEvent | WindowCloseEvent


class BitmapPresenter(Protocol):
    """Sink accepting one finished RGBA bitmap per frame."""

    def set_bitmap(self, bitmap: object) -> None:
        """Present an (height, width, 4) uint8 array."""


class WindowPort(Protocol):
    """Host-facing window/event-loop ownership contract."""

    def logical_size(self) -> tuple[float, float]:
        """Return the current drawable size in logical pixels."""

    def bitmap_presenter(self) -> BitmapPresenter:
        """Return the presentation target for software-rendered frames."""

    def poll_events(self) -> tuple[WindowEvent, ...]:
        """Poll and return normalized window events."""

    def poll_input_events(self) -> tuple[RawInputEvent, ...]:
        """Poll and return raw input events for normalization."""

    def set_title(self, title: str) -> None:
        """Set OS window title."""

    def set_draw_callback(self, callback: Callable[[], None]) -> None:
        """Register the per-frame draw callback."""

    def run_loop(self) -> None:
        """Run the OS/backend event loop."""

    def stop_loop(self) -> None:
        """Stop the OS/backend event loop when supported."""

    def close(self) -> None:
        """Close window and release backend resources."""


__all__ = [
    "BitmapPresenter",
    "WindowCloseEvent",
    "WindowEvent",
    "WindowPort",
    "WindowResizeEvent",
]
