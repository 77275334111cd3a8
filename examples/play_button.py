"""Play button and text field driven by the rendercanvas/GLFW host."""

from __future__ import annotations

import logging

from widgetkit import run
from widgetkit.api import Event, PathBuilder, Rect
from widgetkit.rendering import load_font
from widgetkit.runtime import get_runtime_config
from widgetkit.ui_runtime import Button, Panel, Textbox

_LOG = logging.getLogger("widgetkit.examples.play_button")


def main() -> None:
    play_icon = PathBuilder().move_to(4.0, 3.0).line_to(4.0, 13.0).line_to(12.0, 8.0).build()
    button = Button(play_icon)
    textbox = Textbox(load_font(get_runtime_config().render.font_path))
    root = Panel(
        [
            (button, Rect(16.0, 16.0, 16.0, 16.0)),
            (textbox, Rect(48.0, 16.0, 240.0, 20.0)),
        ]
    )

    def on_activation(event: Event) -> None:
        _LOG.info("play pressed text=%r trigger=%r", textbox.text, event)
        textbox.clear()

    run(root, on_activation=on_activation)


if __name__ == "__main__":
    main()
