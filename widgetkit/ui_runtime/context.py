"""Shared mutable interaction state for one widget tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from widgetkit.api.geometry import Point
from widgetkit.api.input_events import Modifiers

# Out of bounds for every non-negative layout until the first cursor move.
CURSOR_SENTINEL = Point(-1.0, -1.0)


@dataclass(slots=True)
class InteractionContext:
    """Cursor, modifier and mouse-capture state passed into every dispatch call.

    At most one widget holds mouse capture at a time. Widgets acquire it with
    `try_capture` and must `release_capture` when their press gesture ends.
    """

    cursor: Point = CURSOR_SENTINEL
    modifiers: Modifiers = field(default_factory=Modifiers)
    mouse_captured: bool = False

    def try_capture(self) -> bool:
        """Claim capture if it is free and report whether the claim succeeded."""
        if self.mouse_captured:
            return False
        self.mouse_captured = True
        return True

    def release_capture(self) -> None:
        self.mouse_captured = False


__all__ = ["CURSOR_SENTINEL", "InteractionContext"]
