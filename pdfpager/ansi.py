"""Display-width measurement and span wrapping for terminal cells.

Works on plain text spans so styling can be applied after layout; tabs are
expanded to spaces and East Asian wide characters take two cells.
"""

from __future__ import annotations

import unicodedata

from .search import Span

TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns, expanding tabs."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def pad_text(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad it with spaces to fill them."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def wrap_spans(spans: list[Span], width: int) -> list[list[Span]]:
    """Wrap a styled line into rows that fit ``width`` display columns.

    Spans split at row boundaries keep their ``matched`` flag on both halves.
    An empty line still produces one (empty) row.
    """
    if width <= 0:
        return [[]]

    rows: list[list[Span]] = []
    row: list[Span] = []
    chunk: list[str] = []
    col = 0
    for span in spans:
        for ch in span.text:
            w = char_display_width(ch, col)
            if col + w > width and col > 0:
                if chunk:
                    row.append(Span("".join(chunk), span.matched))
                    chunk = []
                rows.append(row)
                row = []
                col = 0
                w = char_display_width(ch, col)
            chunk.append(" " * w if ch == "\t" else ch)
            col += w
        if chunk:
            row.append(Span("".join(chunk), span.matched))
            chunk = []
    rows.append(row)
    return rows
