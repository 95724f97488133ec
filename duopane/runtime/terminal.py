"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle and alternate-screen switching. Restoration runs on
every exit path through the ``raw_mode`` context manager.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

DEFAULT_TERMINAL_SIZE = (80, 30)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, lines)`` for the controlling terminal."""
    size = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
    return size.columns, size.lines


class TerminalController:
    """Manage raw input mode and the alternate screen buffer."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen and the saved tty state."""
        os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = [
    "DEFAULT_TERMINAL_SIZE",
    "ENTER_TUI_SEQUENCE",
    "EXIT_TUI_SEQUENCE",
    "TerminalController",
    "terminal_size",
]
