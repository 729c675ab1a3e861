"""State transitions triggered by key presses.

Each function takes the application context, applies one transition, and
marks the state dirty. Invalid input ends up in ``status_message``.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import EmptySearchQueryError
from ..state import NORMAL, AppState, PageJumpMode, SearchMode

logger = logging.getLogger(__name__)


def quit_app(state: AppState) -> None:
    state.should_quit = True


def next_page(state: AppState) -> None:
    if state.navigation.next_page():
        state.dirty = True


def prev_page(state: AppState) -> None:
    if state.navigation.prev_page():
        state.dirty = True


def scroll_down(state: AppState) -> None:
    state.navigation.scroll_down()
    state.dirty = True


def scroll_up(state: AppState) -> None:
    state.navigation.scroll_up()
    state.dirty = True


def go_to_home(state: AppState) -> None:
    state.navigation.go_to_home()
    state.dirty = True


def go_to_end(state: AppState) -> None:
    state.navigation.go_to_end()
    state.dirty = True


def jump_to_page(state: AppState, page_number: int) -> bool:
    """Jump to 1-based ``page_number`` and report the outcome in the status line."""
    if state.navigation.jump_to_page(page_number):
        state.status_message = f"Jumped to page {page_number}"
        ok = True
    else:
        state.status_message = f"Invalid page number: {page_number}"
        ok = False
    state.dirty = True
    return ok


def go_to_search_result(state: AppState, index: int | None = None) -> bool:
    """Move the view to the result under the cursor, or to ``index`` when given."""
    session = state.search
    if not session.results:
        return False
    if index is not None:
        if not 0 <= index < len(session.results):
            return False
        session.cursor = index
    result = session.current()
    if result is None:
        return False
    state.navigation.go_to_result(result)
    state.status_message = session.position_label()
    state.dirty = True
    return True


def next_search_result(state: AppState) -> None:
    if state.search.next_result() is not None:
        go_to_search_result(state)


def prev_search_result(state: AppState) -> None:
    if state.search.previous_result() is not None:
        go_to_search_result(state)


def clear_search(state: AppState) -> None:
    state.search.clear()
    state.status_message = "Search cleared"
    state.dirty = True


def escape_normal(state: AppState) -> None:
    """Esc clears an active search first and only quits when none is left."""
    if state.search.active:
        clear_search(state)
    else:
        quit_app(state)


def start_page_jump(state: AppState) -> None:
    state.mode = PageJumpMode()
    state.status_message = "Enter page number:"
    state.dirty = True


def start_search(state: AppState) -> None:
    state.mode = SearchMode()
    state.status_message = "Enter search term:"
    state.dirty = True


def _leave_input_mode(state: AppState) -> None:
    state.mode = NORMAL
    state.dirty = True


def cancel_input(state: AppState) -> None:
    state.status_message = ""
    _leave_input_mode(state)


def append_input(state: AppState, char: str) -> None:
    mode = state.mode
    if isinstance(mode, PageJumpMode) and not ("0" <= char <= "9"):
        return
    if isinstance(mode, (PageJumpMode, SearchMode)):
        state.mode = replace(mode, buffer=mode.buffer + char)
        state.dirty = True


def backspace(state: AppState) -> None:
    mode = state.mode
    if isinstance(mode, (PageJumpMode, SearchMode)) and mode.buffer:
        state.mode = replace(mode, buffer=mode.buffer[:-1])
        state.dirty = True


def execute_search(state: AppState, query: str) -> None:
    """Run ``query`` over the document and jump to the first match."""
    try:
        results = state.search.run(state.document, query)
    except EmptySearchQueryError as exc:
        state.status_message = str(exc)
        state.dirty = True
        return
    logger.debug("search %r: %d result(s)", query, len(results))
    if not results:
        state.status_message = f"No results found for '{query}'"
        state.dirty = True
        return
    go_to_search_result(state, 0)


def submit_input(state: AppState) -> None:
    mode = state.mode
    if isinstance(mode, PageJumpMode):
        if mode.buffer.isdigit():
            jump_to_page(state, int(mode.buffer))
        else:
            state.status_message = "Invalid page number"
    elif isinstance(mode, SearchMode):
        execute_search(state, mode.buffer)
    else:
        return
    _leave_input_mode(state)
