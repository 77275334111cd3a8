"""Raw window input normalization into widget events."""

from __future__ import annotations

import logging

from widgetkit.api.geometry import Point
from widgetkit.api.input_events import (
    Char,
    Event,
    KeyDown,
    KeyEvent,
    KeyUp,
    Modifiers,
    MouseButton,
    MouseDown,
    MouseMove,
    MouseUp,
    PointerEvent,
    RawInputEvent,
    Scroll,
    WheelEvent,
)
from widgetkit.ui_runtime.context import InteractionContext
from widgetkit.ui_runtime.keymap import map_key_name

logger = logging.getLogger(__name__)

# rendercanvas button numbering: 1=left, 2=right, 3=middle.
_POINTER_BUTTONS: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.RIGHT,
    3: MouseButton.MIDDLE,
}


class InputController:
    """Translate raw window events into normalized events, updating the context first."""

    def __init__(self, *, trace_enabled: bool = False) -> None:
        self._trace_enabled = trace_enabled

    def translate(self, raw: RawInputEvent, context: InteractionContext) -> tuple[Event, ...]:
        """Return the events to dispatch for one raw event, in order."""
        context.modifiers = Modifiers.from_names(raw.modifiers)
        if isinstance(raw, PointerEvent):
            events = self._translate_pointer(raw, context)
        elif isinstance(raw, KeyEvent):
            events = self._translate_key(raw)
        elif isinstance(raw, WheelEvent):
            events = (Scroll(float(raw.dx), float(raw.dy)),)
        else:
            events = ()
        if self._trace_enabled:
            logger.debug("input_translate raw=%r events=%r", raw, events)
        return events

    @staticmethod
    def _translate_pointer(raw: PointerEvent, context: InteractionContext) -> tuple[Event, ...]:
        position = Point(float(raw.x), float(raw.y))
        if raw.event_type == "pointer_move":
            context.cursor = position
            return (MouseMove(),)
        events: list[Event] = []
        if position != context.cursor:
            context.cursor = position
            events.append(MouseMove())
        button = _POINTER_BUTTONS.get(int(raw.button))
        if button is None:
            return tuple(events)
        if raw.event_type == "pointer_down":
            events.append(MouseDown(button))
        elif raw.event_type == "pointer_up":
            events.append(MouseUp(button))
        return tuple(events)

    @staticmethod
    def _translate_key(raw: KeyEvent) -> tuple[Event, ...]:
        if raw.event_type == "char":
            return tuple(Char(char) for char in raw.value)
        key = map_key_name(raw.value)
        if key is None:
            return ()
        if raw.event_type == "key_down":
            return (KeyDown(key),)
        if raw.event_type == "key_up":
            return (KeyUp(key),)
        return ()


__all__ = ["InputController"]
