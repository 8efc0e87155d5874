"""Session transitions: ``apply_event(state, event) -> state``.

Every key action and viewport change flows through :func:`apply_event`.
Handlers read and write the current list only through
``active_collection``/``with_active_collection`` so files and folders share
one code path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from .deletion import remove_path as default_remove_path
from .errors import DeleteError
from .state import (
    SessionState,
    active_collection,
    clamp_cursor,
    last_index,
    max_offset,
    settled_offset,
    visible_rows,
    with_active_collection,
)

log = logging.getLogger(__name__)

RemovePath = Callable[[Path], None]


class Action(Enum):
    QUIT = "quit"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    JUMP_HOME = "jump-home"
    JUMP_END = "jump-end"
    SWITCH_VIEW = "switch-view"
    TOGGLE_SELECT = "toggle-select"
    REQUEST_DELETE = "request-delete"
    CONFIRM_DELETE = "confirm-delete"
    CANCEL_DELETE = "cancel-delete"
    DISMISS_ERROR = "dismiss-error"


@dataclass(frozen=True)
class Resize:
    """Terminal viewport changed size."""

    width: int
    height: int


SessionEvent = Action | Resize


def _settle(state: SessionState) -> SessionState:
    offset = settled_offset(state)
    if offset == state.scroll_offset:
        return state
    return replace(state, scroll_offset=offset)


def _quit(state: SessionState) -> SessionState:
    return replace(state, running=False)


def _move_up(state: SessionState) -> SessionState:
    if state.cursor <= 0:
        return state
    cursor = state.cursor - 1
    offset = min(state.scroll_offset, cursor)
    return replace(state, cursor=cursor, scroll_offset=offset)


def _move_down(state: SessionState) -> SessionState:
    if state.cursor >= last_index(state):
        return state
    rows = visible_rows(state)
    cursor = state.cursor + 1
    offset = state.scroll_offset
    if cursor >= offset + rows:
        offset = cursor - rows + 1
    return replace(state, cursor=cursor, scroll_offset=offset)


def _page_up(state: SessionState) -> SessionState:
    rows = visible_rows(state)
    return replace(
        state,
        cursor=max(0, state.cursor - rows),
        scroll_offset=max(0, state.scroll_offset - rows),
    )


def _page_down(state: SessionState) -> SessionState:
    rows = visible_rows(state)
    return replace(
        state,
        cursor=clamp_cursor(state, state.cursor + rows),
        scroll_offset=min(state.scroll_offset + rows, max_offset(state)),
    )


def _jump_home(state: SessionState) -> SessionState:
    return replace(state, cursor=0, scroll_offset=0)


def _jump_end(state: SessionState) -> SessionState:
    last = last_index(state)
    if last < 0:
        return _jump_home(state)
    return replace(
        state,
        cursor=last,
        scroll_offset=max(0, last - visible_rows(state) + 1),
    )


def _switch_view(state: SessionState) -> SessionState:
    return replace(
        state,
        active_view=state.active_view.toggled(),
        cursor=0,
        scroll_offset=0,
    )


def _toggle_select(state: SessionState) -> SessionState:
    items = active_collection(state)
    if not 0 <= state.cursor < len(items):
        return state
    current = items[state.cursor]
    updated = list(items)
    updated[state.cursor] = replace(current, is_selected=not current.is_selected)
    return with_active_collection(state, updated)


def _request_delete(state: SessionState) -> SessionState:
    return replace(state, confirming_delete=True)


def _cancel_delete(state: SessionState) -> SessionState:
    if not state.confirming_delete:
        return state
    return replace(state, confirming_delete=False)


def _dismiss_error(state: SessionState) -> SessionState:
    if state.last_error is None:
        return state
    return replace(state, last_error=None)


def _is_within(path: Path, removed: list[Path]) -> bool:
    return any(path.is_relative_to(parent) for parent in removed)


def _confirm_delete(state: SessionState, remove_path: RemovePath) -> SessionState:
    """Remove selected items in order, stopping at the first failure.

    Items removed before the failure leave the collection, together with any
    rows below a removed folder. The failing item and everything after it
    stay, still selected.
    """
    if not state.confirming_delete:
        return state

    items = active_collection(state)
    removed: list[Path] = []
    error: DeleteError | None = None
    for item in items:
        if not item.is_selected or _is_within(item.path, removed):
            continue
        try:
            remove_path(item.path)
        except DeleteError as exc:
            error = exc
            break
        removed.append(item.path)

    kept = [item for item in items if not _is_within(item.path, removed)]
    log.info(
        "removed %d item(s) from %s view, %d row(s) cleared",
        len(removed),
        state.active_view.value,
        len(items) - len(kept),
    )
    state = with_active_collection(state, kept)
    state = replace(
        state,
        confirming_delete=False,
        last_error=error,
        cursor=clamp_cursor(state, state.cursor),
    )
    return _settle(state)


_NAVIGATION: dict[Action, Callable[[SessionState], SessionState]] = {
    Action.MOVE_UP: _move_up,
    Action.MOVE_DOWN: _move_down,
    Action.PAGE_UP: _page_up,
    Action.PAGE_DOWN: _page_down,
    Action.JUMP_HOME: _jump_home,
    Action.JUMP_END: _jump_end,
}

_HANDLERS: dict[Action, Callable[[SessionState], SessionState]] = {
    Action.QUIT: _quit,
    Action.SWITCH_VIEW: _switch_view,
    Action.TOGGLE_SELECT: _toggle_select,
    Action.REQUEST_DELETE: _request_delete,
    Action.CANCEL_DELETE: _cancel_delete,
    Action.DISMISS_ERROR: _dismiss_error,
}


def apply_event(
    state: SessionState,
    event: SessionEvent,
    *,
    remove_path: RemovePath = default_remove_path,
) -> SessionState:
    """Return the state that follows ``event``.

    While a delete error is shown, every action other than quit only
    dismisses the error.
    """
    if isinstance(event, Resize):
        return replace(
            state,
            viewport_width=max(1, event.width),
            viewport_height=max(1, event.height),
        )

    if state.last_error is not None and event is not Action.QUIT:
        return _dismiss_error(state)

    if event is Action.CONFIRM_DELETE:
        return _confirm_delete(state, remove_path)

    navigate = _NAVIGATION.get(event)
    if navigate is not None:
        return navigate(_settle(state))

    handler = _HANDLERS.get(event)
    if handler is None:
        raise ValueError(f"unknown session event: {event!r}")
    return handler(state)


__all__ = [
    "Action",
    "Resize",
    "SessionEvent",
    "RemovePath",
    "apply_event",
]
