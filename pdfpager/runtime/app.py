"""Runtime composition: build the application context and start the loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from ..document import Document
from ..render import DEFAULT_TITLE
from ..state import AppState
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopOptions, run_main_loop

logger = logging.getLogger(__name__)


def write_plain(document: Document, out: TextIO) -> None:
    """Print every page with a separator, for pipes and ``--nopager``."""
    total = document.page_count
    for index, page in enumerate(document.pages):
        if index:
            out.write("\n")
        out.write(f"--- Page {index + 1} of {total} ---\n")
        if page:
            out.write(page)
            out.write("\n")


def run_pager(
    document: Document,
    path: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
) -> None:
    """Show ``document`` interactively, or print it when no TTY is attached."""
    if nopager or not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        write_plain(document, sys.stdout)
        return

    state = AppState.for_document(document)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    options = RuntimeLoopOptions(
        theme=resolve_theme(theme_name, no_color=no_color),
        title=f"{DEFAULT_TITLE} - {path.name}" if path.name else DEFAULT_TITLE,
    )
    logger.info("viewing %s (%d page(s))", path, document.page_count)
    run_main_loop(state, terminal, sys.stdin.fileno(), options)
