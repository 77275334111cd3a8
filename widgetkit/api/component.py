"""Widget contract every component implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from widgetkit.api.geometry import Rect
from widgetkit.api.input_events import Event
from widgetkit.api.render import DrawingSurface

if TYPE_CHECKING:
    from widgetkit.ui_runtime.context import InteractionContext


@runtime_checkable
class Component(Protocol):
    """Layout, render and event-dispatch capability set of a widget."""

    def layout(self, rect: Rect) -> Rect:
        """Store the allocated rectangle and return the one actually occupied.

        Must be idempotent for equal input.
        """

    def render(self, frame: DrawingSurface) -> None:
        """Draw current state; must not mutate widget or interaction state."""

    def handle(self, event: Event, context: InteractionContext) -> bool:
        """Consume one event and return True only for a completed activation.

        Irrelevant events are a no-op returning False.
        """


__all__ = ["Component"]
