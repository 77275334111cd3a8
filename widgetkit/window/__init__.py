"""Window subsystem runtime adapters."""

from widgetkit.window.factory import create_window_layer
from widgetkit.window.headless import HeadlessWindow
from widgetkit.window.rendercanvas_glfw import RenderCanvasWindow, create_rendercanvas_window

__all__ = ["HeadlessWindow", "RenderCanvasWindow", "create_rendercanvas_window", "create_window_layer"]
