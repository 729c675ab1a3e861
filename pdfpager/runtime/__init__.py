"""Public runtime entry points.

Groups the pager bootstrap (`run_pager`) and the event loop used by tests and
composition code.
"""

from __future__ import annotations

from .app import run_pager, write_plain
from .loop import RuntimeLoopOptions, draw, run_main_loop

__all__ = [
    "RuntimeLoopOptions",
    "draw",
    "run_main_loop",
    "run_pager",
    "write_plain",
]
