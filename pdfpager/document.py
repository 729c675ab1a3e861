"""Pagination of raw extracted text into normalized pages.

Form feeds are honoured as explicit page breaks. Without them the text is
carved into fixed-size line chunks, which is only an estimate of real pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

FORM_FEED = "\x0c"
DEFAULT_LINES_PER_PAGE = 50


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing newline does not produce an extra line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def normalize_page(text: str) -> str:
    """Trim every line, drop blank ones, and rejoin with newlines."""
    stripped = (line.strip() for line in split_lines(text))
    return "\n".join(line for line in stripped if line)


@dataclass(frozen=True)
class Document:
    """Ordered, immutable sequence of normalized page texts."""

    pages: tuple[str, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def is_blank(self) -> bool:
        """True when no page carries any text."""
        return not any(self.pages)

    @cached_property
    def _page_lines(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(page.split("\n")) if page else () for page in self.pages)

    def page_lines(self, index: int) -> tuple[str, ...]:
        """Return the lines of page ``index`` (empty for out-of-range indices)."""
        if 0 <= index < len(self.pages):
            return self._page_lines[index]
        return ()


def paginate(raw_text: str, lines_per_page: int = DEFAULT_LINES_PER_PAGE) -> Document:
    """Turn one raw text blob into a :class:`Document`.

    Segments or chunks that normalize to nothing are dropped. When nothing is
    left the whole input becomes a single page, which is empty only when the
    input had no visible text at all.
    """
    if lines_per_page < 1:
        raise ValueError(f"lines_per_page must be >= 1, got {lines_per_page}")

    if FORM_FEED in raw_text:
        segments = raw_text.split(FORM_FEED)
    else:
        lines = split_lines(raw_text)
        segments = [
            "\n".join(lines[start : start + lines_per_page])
            for start in range(0, len(lines), lines_per_page)
        ]

    pages = [page for page in (normalize_page(segment) for segment in segments) if page]
    if not pages:
        pages = [normalize_page(raw_text)]
    return Document(pages=tuple(pages))


__all__ = [
    "DEFAULT_LINES_PER_PAGE",
    "Document",
    "FORM_FEED",
    "normalize_page",
    "paginate",
    "split_lines",
]
