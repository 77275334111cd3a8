"""Input normalization subsystem."""

from widgetkit.input.input_controller import InputController

__all__ = ["InputController"]
