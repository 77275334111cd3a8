"""Centralized runtime configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from widgetkit.api.logging import LoggingConfig
from widgetkit.api.render import Color

DEFAULT_CLEAR_COLOR = Color(0.1, 0.15, 0.2, 1.0)


@dataclass(frozen=True, slots=True)
class RuntimeWindowConfig:
    backend: str
    width: int
    height: int
    title: str
    events_trace_enabled: bool


@dataclass(frozen=True, slots=True)
class RuntimeRenderConfig:
    headless: bool
    headless_frames: int
    fps_cap: float
    vsync: bool
    clear_color: Color
    font_path: str | None


@dataclass(frozen=True, slots=True)
class RuntimeInputConfig:
    trace_enabled: bool


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    window: RuntimeWindowConfig
    render: RuntimeRenderConfig
    input: RuntimeInputConfig
    logging: LoggingConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("widgetkit_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _color(name: str, default: Color, *, env: Mapping[str, str] | None = None) -> Color:
    """Parse `r,g,b[,a]` channels in [0, 1]; malformed input keeps the default."""
    raw = _text(name, "", env=env)
    if not raw:
        return default
    parts = [item.strip() for item in raw.split(",")]
    if len(parts) not in {3, 4}:
        return default
    try:
        channels = [min(1.0, max(0.0, float(item))) for item in parts]
    except ValueError:
        return default
    if len(channels) == 3:
        channels.append(1.0)
    return Color(channels[0], channels[1], channels[2], channels[3])


def _normalize_window_backend(raw: str) -> str:
    value = str(raw).strip().lower()
    if value in {"rendercanvas", "rendercanvas_glfw", "glfw"}:
        return "rendercanvas_glfw"
    return value


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    log_level = _raw("WIDGETKIT_LOG_LEVEL", env=env)
    if log_level is None:
        log_level = _text("LOG_LEVEL", "INFO", env=env)
    log_file = _text("WIDGETKIT_LOG_FILE", "", env=env)
    font_path = _text("WIDGETKIT_FONT_PATH", "", env=env)
    return RuntimeConfig(
        window=RuntimeWindowConfig(
            backend=_normalize_window_backend(
                _text("WIDGETKIT_WINDOW_BACKEND", "rendercanvas_glfw", env=env)
            ),
            width=_int("WIDGETKIT_WINDOW_WIDTH", 800, minimum=1, env=env),
            height=_int("WIDGETKIT_WINDOW_HEIGHT", 600, minimum=1, env=env),
            title=_text("WIDGETKIT_WINDOW_TITLE", "widgetkit", env=env),
            events_trace_enabled=_flag("WIDGETKIT_WINDOW_EVENTS_TRACE_ENABLED", False, env=env),
        ),
        render=RuntimeRenderConfig(
            headless=_flag("WIDGETKIT_HEADLESS", False, env=env),
            headless_frames=_int("WIDGETKIT_HEADLESS_FRAMES", 1, minimum=1, env=env),
            fps_cap=_float("WIDGETKIT_RENDER_FPS_CAP", 60.0, minimum=1.0, env=env),
            vsync=_flag("WIDGETKIT_RENDER_VSYNC", True, env=env),
            clear_color=_color("WIDGETKIT_CLEAR_COLOR", DEFAULT_CLEAR_COLOR, env=env),
            font_path=font_path or None,
        ),
        input=RuntimeInputConfig(
            trace_enabled=_flag("WIDGETKIT_INPUT_TRACE_ENABLED", False, env=env),
        ),
        logging=LoggingConfig(
            level_name=log_level.strip().upper() or "INFO",
            console_format=_text("WIDGETKIT_LOG_FORMAT", "text", env=env).lower(),
            file_path=log_file or None,
            file_format=_text("WIDGETKIT_LOG_FILE_FORMAT", "json", env=env).lower(),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "DEFAULT_CLEAR_COLOR",
    "RuntimeConfig",
    "RuntimeInputConfig",
    "RuntimeRenderConfig",
    "RuntimeWindowConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "set_runtime_config",
]
