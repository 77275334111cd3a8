"""Window backend selection and factory helpers."""

from __future__ import annotations

from widgetkit.api.window import WindowPort
from widgetkit.runtime.config import RuntimeConfig
from widgetkit.window.rendercanvas_glfw import create_rendercanvas_window


def create_window_layer(config: RuntimeConfig) -> WindowPort:
    backend = config.window.backend
    if backend == "rendercanvas_glfw":
        return create_rendercanvas_window(
            width=config.window.width,
            height=config.window.height,
            title=config.window.title,
            update_mode="continuous",
            max_fps=config.render.fps_cap,
            vsync=config.render.vsync,
            events_trace_enabled=config.window.events_trace_enabled,
        )
    raise RuntimeError(f"Unsupported WIDGETKIT_WINDOW_BACKEND: {backend!r}")


__all__ = ["create_window_layer"]
