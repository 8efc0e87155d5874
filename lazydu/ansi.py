"""ANSI-aware text measurement and column shaping.

Width math counts terminal cells, not code points: escape sequences are
free, combining marks take no cell, East Asian wide characters take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "..."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def _take_head(text: str, max_cols: int) -> str:
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def _take_tail(text: str, max_cols: int) -> str:
    out: list[str] = []
    col = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(reversed(out))


def truncate_end(text: str, max_cols: int) -> str:
    """Keep the beginning of plain ``text``, marking the cut with ``...``."""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= len(ELLIPSIS):
        return _take_head(text, max(0, max_cols))
    return _take_head(text, max_cols - len(ELLIPSIS)) + ELLIPSIS


def truncate_start(text: str, max_cols: int) -> str:
    """Keep the end of plain ``text``, marking the cut with a leading ``...``."""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= len(ELLIPSIS):
        return _take_tail(text, max(0, max_cols))
    return ELLIPSIS + _take_tail(text, max_cols - len(ELLIPSIS))


def pad_right(text: str, width: int) -> str:
    """Left-align ``text`` in ``width`` cells (never truncates)."""
    return text + " " * max(0, width - display_width(text))


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` in ``width`` cells (never truncates)."""
    return " " * max(0, width - display_width(text)) + text


__all__ = [
    "ANSI_ESCAPE_RE",
    "ELLIPSIS",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "clip_ansi_line",
    "truncate_end",
    "truncate_start",
    "pad_right",
    "pad_left",
]
