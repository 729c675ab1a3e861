"""Main interactive event loop.

Each iteration draws the current state when it changed, blocks for one key,
and applies exactly one transition. The loop ends when the quit flag is set.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..errors import TerminalSurfaceError
from ..input import DEFAULT_KEY_TABLE, KeyDispatchTable, handle_key, read_key
from ..render import DEFAULT_TITLE, build_render_model, render_frame
from ..state import AppState
from ..terminal import TerminalController
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation settings and injected input source for ``run_main_loop``."""

    theme: UITheme = DEFAULT_THEME
    title: str = DEFAULT_TITLE
    key_table: KeyDispatchTable = field(default=DEFAULT_KEY_TABLE)
    read_key: Callable[[int], str] = read_key


def draw(state: AppState, terminal: TerminalController, options: RuntimeLoopOptions) -> None:
    columns, lines = terminal.size()
    model = build_render_model(state, options.title)
    terminal.write_frame(render_frame(model, columns, lines, options.theme))
    state.dirty = False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions | None = None,
) -> None:
    """Run the TUI until a quit action occurs.

    Terminal I/O failures surface as :class:`TerminalSurfaceError` after the
    raw-mode session has been released.
    """
    opts = options or RuntimeLoopOptions()
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not state.should_quit:
            size = terminal.size()
            if state.dirty or size != last_size:
                draw(state, terminal, opts)
                last_size = size
            try:
                key = opts.read_key(stdin_fd)
            except OSError as exc:
                raise TerminalSurfaceError(f"failed to read input: {exc}") from exc
            if handle_key(state, key, opts.key_table):
                nav = state.navigation
                logger.debug("key %r: mode=%s page=%d offset=%d", key, state.mode.kind, nav.current_page, nav.scroll_offset)
