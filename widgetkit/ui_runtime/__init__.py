"""Widget runtime: interaction context, reference widgets and key mapping."""

from widgetkit.ui_runtime.context import CURSOR_SENTINEL, InteractionContext
from widgetkit.ui_runtime.keymap import map_key_name
from widgetkit.ui_runtime.widgets import Button, ButtonState, Panel, Textbox

__all__ = [
    "Button",
    "ButtonState",
    "CURSOR_SENTINEL",
    "InteractionContext",
    "Panel",
    "Textbox",
    "map_key_name",
]
