"""Reference widgets implementing the component contract."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from widgetkit.api.component import Component
from widgetkit.api.geometry import EMPTY_RECT, Rect
from widgetkit.api.input_events import Char, Event, MouseButton, MouseDown, MouseMove, MouseUp
from widgetkit.api.render import IDENTITY, WHITE, Color, DrawingSurface, Font, Path
from widgetkit.ui_runtime.context import InteractionContext

BUTTON_IDLE_COLOR = Color(0.38, 0.42, 0.48, 1.0)
BUTTON_HOVER_COLOR = Color(0.54, 0.63, 0.71, 1.0)
BUTTON_DOWN_COLOR = Color(0.141, 0.44, 0.77, 1.0)
TEXTBOX_COLOR = Color(0.21, 0.27, 0.32, 1.0)
TEXTBOX_FOCUS_COLOR = Color(0.43, 0.50, 0.66, 1.0)
TEXTBOX_FONT_SIZE = 14.0


class ButtonState(Enum):
    IDLE = "idle"
    HOVER = "hover"
    DOWN = "down"


class Button:
    """Clickable icon button with idle/hover/down visual states."""

    def __init__(self, icon: Path) -> None:
        self._rect = EMPTY_RECT
        self._icon = icon
        self._hover = False
        self._down = False

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def icon(self) -> Path:
        return self._icon

    @property
    def hover(self) -> bool:
        return self._hover

    @property
    def down(self) -> bool:
        return self._down

    @property
    def state(self) -> ButtonState:
        if self._down:
            return ButtonState.DOWN
        if self._hover:
            return ButtonState.HOVER
        return ButtonState.IDLE

    def layout(self, rect: Rect) -> Rect:
        self._rect = rect
        return rect

    def render(self, frame: DrawingSurface) -> None:
        color = {
            ButtonState.DOWN: BUTTON_DOWN_COLOR,
            ButtonState.HOVER: BUTTON_HOVER_COLOR,
            ButtonState.IDLE: BUTTON_IDLE_COLOR,
        }[self.state]
        frame.draw_rect(self._rect.pos, self._rect.size, IDENTITY, color)
        frame.draw_path(self._icon, self._rect.pos, IDENTITY, WHITE)

    def handle(self, event: Event, context: InteractionContext) -> bool:
        if isinstance(event, MouseMove):
            self._hover = self._rect.contains(context.cursor)
        elif isinstance(event, MouseDown) and event.button is MouseButton.LEFT:
            if self._rect.contains(context.cursor) and context.try_capture():
                self._down = True
        elif isinstance(event, MouseUp) and event.button is MouseButton.LEFT:
            if self._down:
                context.release_capture()
                self._down = False
                return self._rect.contains(context.cursor)
        return False


class Textbox:
    """Single-line text field that appends typed characters."""

    def __init__(self, font: Font, text: str = "") -> None:
        self._rect = EMPTY_RECT
        self._font = font
        self._text = text
        self.focus = False

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def font(self) -> Font:
        return self._font

    @property
    def text(self) -> str:
        return self._text

    def append_text(self, value: str) -> None:
        self._text += value

    def set_text(self, value: str) -> None:
        self._text = value

    def clear(self) -> None:
        self._text = ""

    def layout(self, rect: Rect) -> Rect:
        self._rect = rect
        return rect

    def render(self, frame: DrawingSurface) -> None:
        color = TEXTBOX_FOCUS_COLOR if self.focus else TEXTBOX_COLOR
        frame.draw_rect(self._rect.pos, self._rect.size, IDENTITY, color)
        frame.draw_text(self._font, TEXTBOX_FONT_SIZE, self._text, self._rect.pos, IDENTITY, WHITE)

    def handle(self, event: Event, context: InteractionContext) -> bool:
        _ = context
        if isinstance(event, Char):
            self._text += event.char
        return False


class Panel:
    """Flat container placing each child at a fixed rect relative to its own origin."""

    def __init__(self, children: Sequence[tuple[Component, Rect]] = ()) -> None:
        self._rect = EMPTY_RECT
        self._children: list[tuple[Component, Rect]] = list(children)
        self._child_rects: list[Rect] = [EMPTY_RECT for _ in self._children]
        self._activated: tuple[Component, ...] = ()

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(child for child, _ in self._children)

    @property
    def child_rects(self) -> tuple[Rect, ...]:
        """Rects the children reported from the last layout pass."""
        return tuple(self._child_rects)

    @property
    def activated(self) -> tuple[Component, ...]:
        """Children that reported activation for the most recent event."""
        return self._activated

    def layout(self, rect: Rect) -> Rect:
        self._rect = rect
        self._child_rects = [
            child.layout(offset.translated(rect.x, rect.y)) for child, offset in self._children
        ]
        return rect

    def render(self, frame: DrawingSurface) -> None:
        for child, _ in self._children:
            child.render(frame)

    def handle(self, event: Event, context: InteractionContext) -> bool:
        activated: list[Component] = []
        for child, _ in self._children:
            if child.handle(event, context):
                activated.append(child)
        self._activated = tuple(activated)
        return bool(activated)


__all__ = [
    "BUTTON_DOWN_COLOR",
    "BUTTON_HOVER_COLOR",
    "BUTTON_IDLE_COLOR",
    "Button",
    "ButtonState",
    "Panel",
    "TEXTBOX_COLOR",
    "TEXTBOX_FOCUS_COLOR",
    "TEXTBOX_FONT_SIZE",
    "Textbox",
]
