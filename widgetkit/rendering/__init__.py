"""Drawing surface implementations."""

from widgetkit.rendering.bitmap import BitmapFrame, BitmapRenderer, GlyphCache
from widgetkit.rendering.fonts import load_font
from widgetkit.rendering.recording import DrawCommand, RecordingFrame, RecordingRenderer

__all__ = [
    "BitmapFrame",
    "BitmapRenderer",
    "DrawCommand",
    "GlyphCache",
    "RecordingFrame",
    "RecordingRenderer",
    "load_font",
]
