"""Backend failures widgetkit tolerates, and how they are reported."""

from __future__ import annotations

import logging

# What rendercanvas, glfw and freetype raise for unsupported or unavailable
# features. Programming errors (TypeError, AttributeError) are not in here.
BACKEND_ERRORS: tuple[type[Exception], ...] = (OSError, RuntimeError, ValueError)


def log_backend_failure(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Log a tolerated backend failure as `event key=value ...` with the traceback."""
    details = " ".join(f"{key}={value!r}" for key, value in fields.items())
    logger.log(level, f"{event} {details}" if details else event, exc_info=True)


__all__ = ["BACKEND_ERRORS", "log_backend_failure"]
