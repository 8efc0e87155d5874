"""Main interactive event loop for the terminal UI.

Each iteration turns a terminal size change into a ``Resize`` event, repaints
when state changed, then blocks briefly for one key and applies its action.
Feature logic lives in ``lazydu.session``; this module only wires it up.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyComboRegistry, build_default_registry, read_key
from ..session import Action, RemovePath, Resize, apply_event
from ..state import SessionState
from .terminal import TerminalController

log = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


def current_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    paint: Callable[[SessionState], None]
    remove_path: RemovePath
    terminal_size: Callable[[], tuple[int, int]] = current_terminal_size


def run_main_loop(
    state: SessionState,
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    registry: KeyComboRegistry | None = None,
) -> SessionState:
    """Run the interactive loop until a quit action and return final state."""
    ops = callbacks
    keys = registry if registry is not None else build_default_registry()
    last_size: tuple[int, int] | None = None
    dirty = True

    with terminal.raw_mode():
        while state.running:
            size = ops.terminal_size()
            if size != last_size:
                last_size = size
                state = apply_event(state, Resize(width=size[0], height=size[1]))
                dirty = True

            if dirty:
                ops.paint(state)
                dirty = False

            key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if key == "":
                continue
            action = keys.dispatch(key)
            if action is None and state.last_error is not None:
                action = Action.DISMISS_ERROR
            if action is None:
                log.debug("unbound key %r", key)
                continue
            state = apply_event(state, action, remove_path=ops.remove_path)
            dirty = True

    return state


__all__ = ["KEY_POLL_TIMEOUT_MS", "RuntimeLoopCallbacks", "run_main_loop"]
