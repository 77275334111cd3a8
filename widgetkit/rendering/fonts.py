"""Font resource loading."""

from __future__ import annotations

import logging
from pathlib import Path

import freetype

from widgetkit.api.render import Font
from widgetkit.runtime.errors import BACKEND_ERRORS, log_backend_failure

_LOG = logging.getLogger("widgetkit.rendering.fonts")


def load_font(path: str | None) -> Font:
    """Load a font face with freetype; an unloadable font yields a face-less Font."""
    font_path = str(path or "").strip()
    if not font_path:
        _LOG.warning("font_unset text output disabled")
        return Font(path="")
    if not Path(font_path).is_file():
        _LOG.warning("font_missing path=%s text output disabled", font_path)
        return Font(path=font_path)
    try:
        face = freetype.Face(font_path)
    except (*BACKEND_ERRORS, freetype.FT_Exception):
        log_backend_failure(_LOG, "font_load_failed", level=logging.WARNING, path=font_path)
        return Font(path=font_path)
    _LOG.info("font_loaded path=%s family=%r", font_path, face.family_name)
    return Font(path=font_path, face=face)


__all__ = ["load_font"]
