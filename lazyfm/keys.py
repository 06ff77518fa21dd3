"""Key bindings for browser actions and their help-screen labels."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KEY_LABELS = {
    "DOWN": "Down",
    "UP": "Up",
    "ENTER": "Enter",
    "RIGHT": "Right",
    "LEFT": "Left",
    "BACKSPACE": "Backspace",
    "DELETE": "Del",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PgUp",
    "PAGE_DOWN": "PgDn",
    "ALT_LEFT": "Alt+Left",
    "ALT_RIGHT": "Alt+Right",
    "CTRL_D": "Ctrl+D",
    "CTRL_H": "Ctrl+H",
    "CTRL_L": "Ctrl+L",
    "CTRL_U": "Ctrl+U",
}


def key_label(token: str) -> str:
    """Return the help-screen spelling of a key token."""
    return KEY_LABELS.get(token, token)


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable from one or more key tokens.

    Bindings without a ``description`` still dispatch but stay off the
    help screen.
    """

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]
    description: str = ""

    def label(self) -> str:
        return "/".join(key_label(combo) for combo in self.combos)


class KeyComboRegistry:
    """Key token to action table; later bindings win for a shared token."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}
        self._bindings: list[KeyComboBinding] = []

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        self._bindings.append(binding)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()

    def help_lines(self) -> list[tuple[str, str]]:
        """Return ``(keys, description)`` pairs for described bindings."""
        return [(binding.label(), binding.description) for binding in self._bindings if binding.description]


__all__ = ["KEY_LABELS", "KeyComboBinding", "KeyComboRegistry", "key_label"]
