"""Default key bindings for the list view."""

from __future__ import annotations

from ..session import Action
from .key_registry import KeyComboBinding, KeyComboRegistry

DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("q", "CTRL_C"), Action.QUIT),
    KeyComboBinding(("UP", "k"), Action.MOVE_UP),
    KeyComboBinding(("DOWN", "j"), Action.MOVE_DOWN),
    KeyComboBinding(("PAGE_UP",), Action.PAGE_UP),
    KeyComboBinding(("PAGE_DOWN",), Action.PAGE_DOWN),
    KeyComboBinding(("HOME",), Action.JUMP_HOME),
    KeyComboBinding(("END",), Action.JUMP_END),
    KeyComboBinding(("TAB",), Action.SWITCH_VIEW),
    KeyComboBinding((" ",), Action.TOGGLE_SELECT),
    KeyComboBinding(("d",), Action.REQUEST_DELETE),
    KeyComboBinding(("y",), Action.CONFIRM_DELETE),
    KeyComboBinding(("n",), Action.CANCEL_DELETE),
    KeyComboBinding(("ESC", "ENTER"), Action.DISMISS_ERROR),
)


def build_default_registry() -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)
