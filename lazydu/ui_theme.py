"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the title bar, list rows, and status chrome.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    title: str
    header: str
    cursor_row: str
    normal: str
    size: str
    selection_mark: str
    help_text: str
    error_text: str
    confirm_text: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;2;255;255;255;48;2;3;102;214m",
    header="\033[1;38;2;255;255;255;48;2;47;54;61m",
    cursor_row="\033[1;38;2;255;255;255;48;2;46;160;67m",
    normal="\033[38;2;255;255;255m",
    size="\033[38;2;88;166;255m",
    selection_mark="\033[38;2;255;0;0m",
    help_text="\033[38;2;139;148;158m",
    error_text="\033[38;2;248;81;73m",
    confirm_text="\033[38;2;255;255;255;48;2;218;54;51m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;231;48;5;24m",
    header="\033[1;38;5;153;48;5;17m",
    cursor_row="\033[1;38;5;231;48;5;31m",
    normal="\033[38;5;252m",
    size="\033[38;5;73m",
    selection_mark="\033[38;5;215m",
    help_text="\033[2;38;5;110m",
    error_text="\033[38;5;203m",
    confirm_text="\033[1;38;5;231;48;5;124m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    header="",
    cursor_row="\033[7m",
    normal="",
    size="",
    selection_mark="",
    help_text="",
    error_text="",
    confirm_text="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def styled(theme: UITheme, style: str, text: str) -> str:
    """Wrap ``text`` in ``style`` and the theme's reset sequence."""
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "styled",
]
