"""Runtime bootstrap wiring config, logging, window, renderer and host."""

from __future__ import annotations

import logging

from widgetkit.api.component import Component
from widgetkit.api.window import WindowPort
from widgetkit.rendering.bitmap import BitmapRenderer
from widgetkit.rendering.recording import RecordingRenderer
from widgetkit.runtime.config import RuntimeConfig, get_runtime_config
from widgetkit.runtime.host import ActivationCallback, FrameSource, UiHost, UiHostConfig
from widgetkit.runtime.logging import setup_logging, shutdown_logging
from widgetkit.window.factory import create_window_layer
from widgetkit.window.headless import HeadlessWindow

_LOG = logging.getLogger("widgetkit.runtime")


def run(
    root: Component,
    *,
    on_activation: ActivationCallback | None = None,
    config: RuntimeConfig | None = None,
    window: WindowPort | None = None,
) -> UiHost:
    """Run the widget tree until the window closes; headless runs a bounded frame count."""
    cfg = config or get_runtime_config()
    setup_logging(cfg.logging)
    host = UiHost(
        root,
        UiHostConfig(
            clear_color=cfg.render.clear_color,
            input_trace_enabled=cfg.input.trace_enabled,
        ),
        on_activation=on_activation,
    )
    renderer: FrameSource
    if window is None and cfg.render.headless:
        window = HeadlessWindow(cfg.window.width, cfg.window.height, cfg.window.title)
        renderer = RecordingRenderer()
    else:
        if window is None:
            window = create_window_layer(cfg)
        renderer = BitmapRenderer(presenter=window.bitmap_presenter())

    width, height = window.logical_size()
    host.start(width, height)
    _LOG.info(
        "host_start width=%.0f height=%.0f headless=%s", width, height, cfg.render.headless
    )

    def _draw() -> None:
        host.frame(window, renderer)
        if host.is_closed():
            window.stop_loop()

    window.set_draw_callback(_draw)
    try:
        if isinstance(window, HeadlessWindow):
            window.draw(cfg.render.headless_frames)
        else:
            window.run_loop()
    finally:
        _LOG.info("host_stop frames=%d", host.frame_index)
        shutdown_logging()
    return host


__all__ = ["run"]
