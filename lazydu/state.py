"""Session state and the geometry derived from it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from .errors import DeleteError
from .types import Collection, ScanResult, ViewMode

# Title, header, status and help rows reserved around the item list.
CHROME_ROWS = 4
DEFAULT_VIEWPORT_WIDTH = 100
DEFAULT_VIEWPORT_HEIGHT = 10


@dataclass(frozen=True)
class SessionState:
    root: Path
    files: Collection
    folders: Collection
    active_view: ViewMode = ViewMode.FILES
    cursor: int = 0
    scroll_offset: int = 0
    confirming_delete: bool = False
    last_error: DeleteError | None = None
    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    running: bool = True

    @classmethod
    def from_scan(cls, result: ScanResult) -> SessionState:
        return cls(root=result.root, files=result.files, folders=result.folders)


def active_collection(state: SessionState) -> Collection:
    """Return the collection backing the active view."""
    if state.active_view is ViewMode.FOLDERS:
        return state.folders
    return state.files


def with_active_collection(state: SessionState, items: Collection) -> SessionState:
    """Return ``state`` with the active view's collection replaced."""
    if state.active_view is ViewMode.FOLDERS:
        return replace(state, folders=tuple(items))
    return replace(state, files=tuple(items))


def visible_rows(state: SessionState) -> int:
    """Number of item rows that fit below the title/header and above help."""
    return max(1, state.viewport_height - CHROME_ROWS)


def last_index(state: SessionState) -> int:
    return len(active_collection(state)) - 1


def max_offset(state: SessionState) -> int:
    return max(0, len(active_collection(state)) - visible_rows(state))


def clamp_cursor(state: SessionState, cursor: int) -> int:
    return max(0, min(cursor, last_index(state)))


def settled_offset(state: SessionState) -> int:
    """Scroll offset that keeps the cursor visible inside the collection.

    Equals ``state.scroll_offset`` whenever the viewport has not changed
    since the last navigation event.
    """
    rows = visible_rows(state)
    offset = state.scroll_offset
    if state.cursor < offset:
        offset = state.cursor
    elif state.cursor >= offset + rows:
        offset = state.cursor - rows + 1
    return max(0, min(offset, max_offset(state)))


__all__ = [
    "CHROME_ROWS",
    "SessionState",
    "active_collection",
    "with_active_collection",
    "visible_rows",
    "last_index",
    "max_offset",
    "clamp_cursor",
    "settled_offset",
]
