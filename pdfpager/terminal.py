"""Terminal control for the interactive session.

Owns the raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import termios
import tty

from .errors import TerminalRestoreError, TerminalSurfaceError

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[0m\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions and frame writes for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalSurfaceError(f"cannot read terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, and restore tty attributes."""
        try:
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the current terminal."""
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    def write_frame(self, frame: str) -> None:
        try:
            os.write(self.stdout_fd, frame.encode("utf-8", errors="replace"))
        except OSError as exc:
            raise TerminalSurfaceError(f"failed to draw frame: {exc}") from exc

    @contextlib.contextmanager
    def raw_mode(self):
        """Hold the TUI session for the duration of the ``with`` block.

        The terminal is restored on every exit path. If restoring fails while
        an error is already propagating, a :class:`TerminalRestoreError`
        carrying the original error is raised instead.
        """
        try:
            self.enable_tui_mode()
            yield
        except BaseException as exc:
            try:
                self.disable_tui_mode()
            except (OSError, termios.error) as restore_exc:
                logger.error("terminal restore failed after %r: %s", exc, restore_exc)
                raise TerminalRestoreError(
                    f"failed to restore terminal: {restore_exc}", original=exc
                ) from restore_exc
            raise
        else:
            try:
                self.disable_tui_mode()
            except (OSError, termios.error) as restore_exc:
                raise TerminalSurfaceError(f"failed to restore terminal: {restore_exc}") from restore_exc
