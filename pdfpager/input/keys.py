"""Default key bindings for normal, page-jump, and search modes."""

from __future__ import annotations

from ..state import AppState, NormalMode, PageJumpMode, SearchMode
from . import actions
from .key_registry import KeyBinding, KeyDispatchTable

NORMAL_MODES = (NormalMode.kind,)
CAPTURING_MODES = (PageJumpMode.kind, SearchMode.kind)


def build_key_table() -> KeyDispatchTable:
    """Return the dispatch table covering every ``(mode, key)`` pair we react to."""
    table = KeyDispatchTable()
    table.bind(
        NORMAL_MODES,
        KeyBinding(("q", "CTRL_C"), actions.quit_app),
        KeyBinding(("ESC",), actions.escape_normal),
        KeyBinding(("RIGHT", "n"), actions.next_page),
        KeyBinding(("LEFT", "p"), actions.prev_page),
        KeyBinding(("DOWN", "j"), actions.scroll_down),
        KeyBinding(("UP", "k"), actions.scroll_up),
        KeyBinding(("g",), actions.start_page_jump),
        KeyBinding(("/",), actions.start_search),
        KeyBinding(("F",), actions.next_search_result),
        KeyBinding(("B",), actions.prev_search_result),
        KeyBinding(("HOME",), actions.go_to_home),
        KeyBinding(("END",), actions.go_to_end),
    )
    table.bind(
        CAPTURING_MODES,
        KeyBinding(("ENTER",), actions.submit_input),
        KeyBinding(("ESC", "CTRL_C"), actions.cancel_input),
        KeyBinding(("BACKSPACE",), actions.backspace),
    )
    table.bind_text(CAPTURING_MODES, actions.append_input)
    return table


DEFAULT_KEY_TABLE = build_key_table()


def handle_key(state: AppState, key: str, table: KeyDispatchTable | None = None) -> bool:
    """Apply one key event to ``state``; return whether any binding handled it."""
    return (table or DEFAULT_KEY_TABLE).dispatch(state, key)
