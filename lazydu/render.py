"""Frame rendering for the size-ranked list view.

``render_frame`` is a pure function of session state and returns screen
lines; ``paint_frame`` writes them to the terminal in one call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_ansi_line, pad_left, pad_right, truncate_end, truncate_start
from .sizes import format_size
from .state import SessionState, active_collection, settled_offset, visible_rows
from .types import Item
from .ui_theme import UITheme, styled

APP_TITLE = "Disk Usage Analyzer"
HELP_TEXT = (
    "↑/↓: Navigate • PgUp/PgDn: Page • Home/End: Jump • Tab: Switch View "
    "• Space: Select • d: Delete • q: Quit"
)
EMPTY_HELP_TEXT = "Tab: Switch View • q: Quit"
EMPTY_VIEW_TEXT = "No items found in this view"
CONFIRM_TEXT = " Delete selected items? (y/n) "
ERROR_HINT_TEXT = "Press any key to continue • q: Quit"

SELECT_WIDTH = 3
SIZE_WIDTH = 8
MIN_PATH_WIDTH = 30
MAX_NAME_WIDTH = 100
MIN_COLUMN_WIDTH = 4
# Separators and slack between the four columns.
COLUMN_GAPS = 6


@dataclass(frozen=True)
class ColumnWidths:
    name: int
    path: int


def column_widths(width: int) -> ColumnWidths:
    """Split ``width`` between the name and path columns.

    The name column takes what is left after a minimum path allowance (capped
    at ``MAX_NAME_WIDTH``); the path column gets the remainder.
    """
    name = width - SIZE_WIDTH - SELECT_WIDTH - MIN_PATH_WIDTH - COLUMN_GAPS
    name = max(MIN_COLUMN_WIDTH, min(name, MAX_NAME_WIDTH))
    path = max(MIN_COLUMN_WIDTH, width - SIZE_WIDTH - name - SELECT_WIDTH - COLUMN_GAPS)
    return ColumnWidths(name=name, path=path)


def display_parent(path: Path, root: Path) -> str:
    """Return the parent directory of ``path`` relative to the scan root."""
    try:
        return os.path.relpath(path.parent, root)
    except ValueError:
        return str(path.parent)


def highlight_row(theme: UITheme, text: str) -> str:
    """Apply cursor-row styling without discarding inner ANSI colors."""
    if not theme.cursor_row:
        return text
    reset = theme.reset or "\033[0m"
    inner = text.replace(reset, reset + theme.cursor_row) if theme.reset else text
    return f"{theme.cursor_row}{inner}{reset}"


def format_item_row(
    item: Item,
    root: Path,
    widths: ColumnWidths,
    theme: UITheme,
    *,
    binary_units: bool = False,
) -> str:
    mark = styled(theme, theme.selection_mark, "*") if item.is_selected else " "
    size = styled(theme, theme.size, pad_left(format_size(item.size, binary=binary_units), SIZE_WIDTH))
    name = pad_right(truncate_end(item.path.name, widths.name), widths.name)
    parent = truncate_start(display_parent(item.path, root), widths.path)
    return f"[{mark}] {size} {name} {parent}"


def header_row(widths: ColumnWidths) -> str:
    return f"[ ] {pad_left('SIZE', SIZE_WIDTH)} {pad_right('NAME', widths.name)} PATH"


def title_row(state: SessionState) -> str:
    total = len(active_collection(state))
    position = min(state.cursor + 1, total)
    return f" {APP_TITLE} - {state.active_view.value.upper()} ({position}/{total}) "


def _error_frame(state: SessionState, theme: UITheme) -> list[str]:
    return [
        styled(theme, theme.error_text, f"Error: {state.last_error}"),
        "",
        styled(theme, theme.help_text, ERROR_HINT_TEXT),
    ]


def render_frame(
    state: SessionState,
    theme: UITheme,
    *,
    binary_units: bool = False,
) -> list[str]:
    """Build the screen lines for ``state``.

    The visible window is computed from a settled scroll offset, so a
    viewport that shrank since the last key still shows the cursor.
    """
    if state.last_error is not None:
        lines = _error_frame(state, theme)
    else:
        widths = column_widths(state.viewport_width)
        items = active_collection(state)
        lines = [
            styled(theme, theme.title, title_row(state)),
            styled(theme, theme.header, header_row(widths)),
        ]
        if not items:
            lines.append(styled(theme, theme.normal, EMPTY_VIEW_TEXT))
            help_text = EMPTY_HELP_TEXT
        else:
            start = settled_offset(state)
            end = min(len(items), start + visible_rows(state))
            for idx in range(start, end):
                row = format_item_row(items[idx], state.root, widths, theme, binary_units=binary_units)
                if idx == state.cursor:
                    lines.append(highlight_row(theme, row))
                else:
                    lines.append(styled(theme, theme.normal, row))
            help_text = HELP_TEXT
        lines.append(styled(theme, theme.confirm_text, CONFIRM_TEXT) if state.confirming_delete else "")
        lines.append(styled(theme, theme.help_text, help_text))

    clipped = [clip_ansi_line(line, state.viewport_width) for line in lines[: state.viewport_height]]
    if theme.reset:
        clipped = [line + theme.reset if "\033" in line else line for line in clipped]
    return clipped


def paint_frame(lines: list[str], fd: int) -> None:
    """Redraw the whole screen with ``lines`` in a single write."""
    body = "\r\n".join(f"{line}\033[K" for line in lines)
    os.write(fd, f"\033[H{body}\033[J".encode("utf-8", errors="replace"))


__all__ = [
    "APP_TITLE",
    "HELP_TEXT",
    "CONFIRM_TEXT",
    "ColumnWidths",
    "column_widths",
    "display_parent",
    "format_item_row",
    "render_frame",
    "paint_frame",
]
