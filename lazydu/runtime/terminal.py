"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. The saved tty state
and main screen are restored on every exit path, including termination
signals delivered while the session runs.
"""

from __future__ import annotations

import contextlib
import os
import signal
import termios
import tty

_RESTORE_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def _exit_on_signal(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Save and switch to the alternate screen, clear it, hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[2J\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen buffer and tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls.

        SIGTERM and SIGHUP are turned into ``SystemExit`` for the duration so
        the exit path still runs; previous handlers are reinstated afterwards.
        """
        previous = {sig: signal.getsignal(sig) for sig in _RESTORE_SIGNALS}
        for sig in _RESTORE_SIGNALS:
            signal.signal(sig, _exit_on_signal)
        try:
            self.enable_tui_mode()
            yield
        finally:
            try:
                self.disable_tui_mode()
            finally:
                for sig, handler in previous.items():
                    signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
