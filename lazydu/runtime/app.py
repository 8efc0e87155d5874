"""Runtime composition layer for lazydu.

Builds initial session state from a scan, wires rendering and deletion into
the loop, and decides between the interactive UI and a one-shot frame.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import partial

from ..ansi import strip_ansi
from ..deletion import remove_path
from ..render import paint_frame, render_frame
from ..session import Resize, apply_event
from ..state import SessionState
from ..types import ScanResult
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, current_terminal_size, run_main_loop
from .terminal import TerminalController

log = logging.getLogger(__name__)


def render_snapshot(
    result: ScanResult,
    *,
    width: int,
    height: int,
    theme_name: str | None = None,
    no_color: bool = True,
    binary_units: bool = False,
) -> str:
    """Render the initial files view of ``result`` as newline-terminated text.

    With ``no_color`` the output carries no escape sequences at all, not even
    the reverse-video cursor row used by the interactive plain theme.
    """
    state = apply_event(SessionState.from_scan(result), Resize(width=width, height=height))
    theme = resolve_theme(theme_name, no_color=no_color)
    lines = render_frame(state, theme, binary_units=binary_units)
    if no_color:
        lines = [strip_ansi(line) for line in lines]
    return "".join(f"{line}\n" for line in lines)


def _paint(state: SessionState, *, theme, binary_units: bool, fd: int) -> None:
    paint_frame(render_frame(state, theme, binary_units=binary_units), fd)


def run_session(
    result: ScanResult,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    binary_units: bool = False,
) -> SessionState | None:
    """Run the interactive session over ``result``.

    Without a terminal on both stdin and stdout a single plain frame is
    printed instead and ``None`` is returned.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not (os.isatty(stdin_fd) and os.isatty(stdout_fd)):
        width, height = current_terminal_size()
        sys.stdout.write(
            render_snapshot(
                result,
                width=width,
                height=height,
                theme_name=theme_name,
                no_color=True,
                binary_units=binary_units,
            )
        )
        return None

    theme = resolve_theme(theme_name, no_color=no_color)
    terminal = TerminalController(stdin_fd, stdout_fd)
    callbacks = RuntimeLoopCallbacks(
        paint=partial(_paint, theme=theme, binary_units=binary_units, fd=stdout_fd),
        remove_path=remove_path,
    )
    log.info("starting session on %s with theme %s", result.root, theme.name)
    final_state = run_main_loop(SessionState.from_scan(result), terminal, stdin_fd, callbacks)
    log.info("session ended")
    return final_state


__all__ = ["render_snapshot", "run_session"]
