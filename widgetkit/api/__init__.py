"""Public widgetkit API contracts and value types."""

from widgetkit.api.component import Component
from widgetkit.api.geometry import EMPTY_RECT, Point, Rect
from widgetkit.api.input_events import (
    Char,
    Event,
    Key,
    KeyDown,
    KeyUp,
    Modifiers,
    MouseButton,
    MouseDown,
    MouseMove,
    MouseUp,
    Scroll,
)
from widgetkit.api.logging import LoggingConfig
from widgetkit.api.render import (
    IDENTITY,
    WHITE,
    Color,
    DrawingSurface,
    Font,
    Frame,
    Mat2x2,
    Path,
    PathBuilder,
)

__all__ = [
    "Char",
    "Color",
    "Component",
    "DrawingSurface",
    "EMPTY_RECT",
    "Event",
    "Font",
    "Frame",
    "IDENTITY",
    "Key",
    "KeyDown",
    "KeyUp",
    "LoggingConfig",
    "Mat2x2",
    "Modifiers",
    "MouseButton",
    "MouseDown",
    "MouseMove",
    "MouseUp",
    "Path",
    "PathBuilder",
    "Point",
    "Rect",
    "Scroll",
    "WHITE",
]
