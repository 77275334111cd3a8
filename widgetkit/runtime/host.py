"""Host loop adapter driving one widget tree."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from widgetkit.api.component import Component
from widgetkit.api.geometry import Rect
from widgetkit.api.input_events import Event, RawInputEvent
from widgetkit.api.render import Color, Frame
from widgetkit.api.window import WindowCloseEvent, WindowPort, WindowResizeEvent
from widgetkit.input.input_controller import InputController
from widgetkit.runtime.config import DEFAULT_CLEAR_COLOR
from widgetkit.ui_runtime.context import InteractionContext

_LOG = logging.getLogger("widgetkit.runtime")

ActivationCallback = Callable[[Event], None]


class FrameSource(Protocol):
    """Renderer side that opens one drawable frame per displayed frame."""

    def begin_frame(self, width: float, height: float) -> Frame:
        """Return a fresh frame covering the viewport."""


@dataclass(frozen=True, slots=True)
class UiHostConfig:
    """Host runtime configuration."""

    clear_color: Color = DEFAULT_CLEAR_COLOR
    input_trace_enabled: bool = False


class UiHost:
    """Owns the root component and its interaction context for one running tree.

    Events are dispatched strictly one at a time; rendering happens only after
    every queued event of the frame has been handled.
    """

    def __init__(
        self,
        root: Component,
        config: UiHostConfig | None = None,
        *,
        on_activation: ActivationCallback | None = None,
        input_controller: InputController | None = None,
    ) -> None:
        self._root = root
        self._config = config or UiHostConfig()
        self._on_activation = on_activation
        self._input = input_controller or InputController(
            trace_enabled=self._config.input_trace_enabled
        )
        self._context = InteractionContext()
        self._viewport: Rect | None = None
        self._frame_index = 0
        self._closed = False
        self._dispatching = False

    @property
    def root(self) -> Component:
        return self._root

    @property
    def context(self) -> InteractionContext:
        return self._context

    @property
    def viewport(self) -> Rect | None:
        return self._viewport

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if not self._closed:
            _LOG.info("host_close frames=%d", self._frame_index)
        self._closed = True

    def start(self, width: float, height: float) -> Rect:
        """Lay the tree out over the full initial viewport and return that viewport."""
        return self._layout(width, height)

    def resize(self, width: float, height: float) -> bool:
        """Re-layout when the viewport size changed; return whether it did."""
        if self._viewport is not None and (self._viewport.w, self._viewport.h) == (
            float(width),
            float(height),
        ):
            return False
        self._layout(width, height)
        return True

    def dispatch(self, event: Event) -> bool:
        """Deliver one normalized event to the root and report activation."""
        if self._dispatching:
            raise RuntimeError("re-entrant dispatch: events must be delivered one at a time")
        self._dispatching = True
        try:
            activated = bool(self._root.handle(event, self._context))
        finally:
            self._dispatching = False
        if activated:
            _LOG.debug("activation event=%r cursor=%r", event, self._context.cursor)
            if self._on_activation is not None:
                self._on_activation(event)
        return activated

    def ingest(self, raw_events: Iterable[RawInputEvent]) -> int:
        """Normalize and dispatch raw input in arrival order; return activation count."""
        activations = 0
        for raw in raw_events:
            for event in self._input.translate(raw, self._context):
                if self.dispatch(event):
                    activations += 1
        return activations

    def render(self, frame: Frame) -> None:
        frame.clear(self._config.clear_color)
        self._root.render(frame)
        frame.finish()

    def frame(self, window: WindowPort, renderer: FrameSource) -> None:
        """Run one host frame: window events, then input, then drawing."""
        for window_event in window.poll_events():
            if isinstance(window_event, WindowResizeEvent):
                self.resize(window_event.logical_width, window_event.logical_height)
            elif isinstance(window_event, WindowCloseEvent):
                self.close()
        if self._closed:
            return
        viewport = self._viewport
        if viewport is None:
            viewport = self.start(*window.logical_size())
        self.ingest(window.poll_input_events())
        self.render(renderer.begin_frame(viewport.w, viewport.h))
        self._frame_index += 1

    def _layout(self, width: float, height: float) -> Rect:
        viewport = Rect(0.0, 0.0, float(width), float(height))
        self._viewport = viewport
        assigned = self._root.layout(viewport)
        _LOG.debug("layout viewport=%r assigned=%r", viewport, assigned)
        return viewport


__all__ = ["ActivationCallback", "FrameSource", "UiHost", "UiHostConfig"]
