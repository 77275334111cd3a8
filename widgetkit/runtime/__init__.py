"""Host runtime: configuration, logging, host loop and bootstrap."""

from widgetkit.runtime.config import RuntimeConfig, get_runtime_config, load_runtime_config
from widgetkit.runtime.host import ActivationCallback, UiHost, UiHostConfig
from widgetkit.runtime.logging import configure_logging, setup_logging

__all__ = [
    "ActivationCallback",
    "RuntimeConfig",
    "UiHost",
    "UiHostConfig",
    "configure_logging",
    "get_runtime_config",
    "load_runtime_config",
    "setup_logging",
]
