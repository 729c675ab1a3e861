"""Compose a full-screen ANSI frame from a :class:`RenderModel`.

Layout, top to bottom: header row, divider, page body, divider, footer row,
and a status row when the model carries one. Body lines wrap to the terminal
width and are cut off at the bottom of the viewport.
"""

from __future__ import annotations

from ..ansi import clip_text, pad_text, wrap_spans
from ..search import Span
from ..ui_theme import UITheme
from .model import RenderLine, RenderModel

CLEAR_SCREEN = "\033[H\033[J"


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _render_spans(spans: list[Span], theme: UITheme) -> str:
    out: list[str] = []
    for span in spans:
        style = theme.search_hit if span.matched else theme.body
        out.append(_styled(span.text, style, theme))
    return "".join(out)


def _body_rows(lines: tuple[RenderLine, ...], width: int, max_rows: int, theme: UITheme) -> list[str]:
    rows: list[str] = []
    for line in lines:
        spans = list(line.spans) if line.spans else [Span(line.text)]
        for wrapped in wrap_spans(spans, width):
            if len(rows) >= max_rows:
                return rows
            rows.append(_render_spans(wrapped, theme))
    return rows


def body_row_count(model: RenderModel, height: int) -> int:
    """Rows left for page text once header, footer and status are placed."""
    chrome = 4 + (1 if model.status is not None else 0)
    return max(1, height - chrome)


def render_frame(model: RenderModel, width: int, height: int, theme: UITheme) -> str:
    width = max(1, width)
    line_width = max(1, width - 1)
    divider = _styled("─" * line_width, theme.divider, theme)
    header_style = theme.header_prompt if model.header_is_prompt else theme.header

    out: list[str] = [CLEAR_SCREEN]
    out.append(_styled(pad_text(model.header, line_width), header_style, theme))
    out.append("\r\n")
    out.append(divider)
    out.append("\r\n")

    content_rows = body_row_count(model, height)
    rows = _body_rows(model.lines, line_width, content_rows, theme)
    for row in range(content_rows):
        if row < len(rows):
            out.append(rows[row])
        out.append("\r\n")

    out.append(divider)
    out.append("\r\n")
    out.append(_styled(clip_text(model.footer, line_width), theme.footer, theme))
    if model.status is not None:
        out.append("\r\n")
        out.append(_styled(clip_text(model.status, line_width), theme.status, theme))
    return "".join(out)
