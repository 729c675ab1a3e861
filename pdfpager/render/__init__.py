"""Rendering: pure frame model plus ANSI frame composition."""

from __future__ import annotations

from .frame import body_row_count, render_frame
from .model import (
    DEFAULT_TITLE,
    FOOTER_INPUT,
    FOOTER_NORMAL,
    FOOTER_NORMAL_SEARCH,
    RenderLine,
    RenderModel,
    build_render_model,
)

__all__ = [
    "DEFAULT_TITLE",
    "FOOTER_INPUT",
    "FOOTER_NORMAL",
    "FOOTER_NORMAL_SEARCH",
    "RenderLine",
    "RenderModel",
    "body_row_count",
    "build_render_model",
    "render_frame",
]
