"""Key-combo registry mapping key tokens to session actions."""

from __future__ import annotations

from dataclasses import dataclass

from ..session import Action


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single session action."""

    combos: tuple[str, ...]
    action: Action


class KeyComboRegistry:
    """Small exact-match key-dispatch table."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> Action | None:
        """Return the action bound to ``key``, or ``None`` when unbound."""
        return self._actions.get(key)
