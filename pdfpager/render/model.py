"""Pure projection of application state onto what one frame shows.

Nothing here touches the terminal; ``frame.py`` turns a :class:`RenderModel`
into escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..search import Span, highlight_spans
from ..state import AppState, PageJumpMode, SearchMode

DEFAULT_TITLE = "PDF Reader"

FOOTER_NORMAL = "g (goto page) | / (search) | ←/→ (pages) | ↑/↓ (scroll) | Home/End | q/Esc (quit)"
FOOTER_NORMAL_SEARCH = (
    "g (goto page) | / (search) | F/B (next/prev result) | ←/→ (pages) | ↑/↓ (scroll) "
    "| Home/End | Esc (clear search) | q (quit)"
)
FOOTER_INPUT = "Enter (submit) | Esc (cancel) | Backspace (delete)"


@dataclass(frozen=True)
class RenderLine:
    """One page line; ``spans`` is empty when no search is active."""

    text: str
    spans: tuple[Span, ...] = ()


@dataclass(frozen=True)
class RenderModel:
    header: str
    header_is_prompt: bool
    lines: tuple[RenderLine, ...]
    footer: str
    status: str | None


def header_text(state: AppState, title: str = DEFAULT_TITLE) -> str:
    mode = state.mode
    page_count = state.document.page_count
    if isinstance(mode, PageJumpMode):
        return f"Enter page number (1-{page_count}): {mode.buffer}"
    if isinstance(mode, SearchMode):
        return f"Search: {mode.buffer}"
    return f"{title} - Page {state.navigation.current_page + 1} of {page_count}"


def footer_text(state: AppState) -> str:
    if state.mode.capturing:
        return FOOTER_INPUT
    if state.search.active:
        return FOOTER_NORMAL_SEARCH
    return FOOTER_NORMAL


def visible_lines(state: AppState) -> tuple[RenderLine, ...]:
    """Current page lines from the scroll offset on, highlighted for the active query."""
    nav = state.navigation
    page_lines = state.document.page_lines(nav.current_page)[nav.scroll_offset :]
    query = state.search.query
    if not query:
        return tuple(RenderLine(line) for line in page_lines)
    return tuple(RenderLine(line, tuple(highlight_spans(line, query))) for line in page_lines)


def build_render_model(state: AppState, title: str = DEFAULT_TITLE) -> RenderModel:
    show_status = state.mode.capturing or bool(state.status_message)
    return RenderModel(
        header=header_text(state, title),
        header_is_prompt=state.mode.capturing,
        lines=visible_lines(state),
        footer=footer_text(state),
        status=state.status_message if show_status else None,
    )
