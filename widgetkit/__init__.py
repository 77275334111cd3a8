"""Retained-mode widget toolkit runtime and API boundary modules."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from widgetkit.api.component import Component
    from widgetkit.api.window import WindowPort
    from widgetkit.runtime.config import RuntimeConfig
    from widgetkit.runtime.host import ActivationCallback, UiHost


def run(
    root: "Component",
    *,
    on_activation: "ActivationCallback | None" = None,
    config: "RuntimeConfig | None" = None,
    window: "WindowPort | None" = None,
) -> "UiHost":
    """Run one widget tree with runtime-owned window and renderer composition."""
    from widgetkit.runtime.bootstrap import run as runtime_run

    return runtime_run(root, on_activation=on_activation, config=config, window=window)


__all__ = ["run"]
