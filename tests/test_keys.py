"""Tests for the key binding table and help labels."""

from __future__ import annotations

import unittest

from lazyfm.keys import KeyComboBinding, KeyComboRegistry, key_label


class KeyComboRegistryTests(unittest.TestCase):
    def test_dispatch_runs_bound_handler_and_reports_unbound_keys(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("j", "DOWN"), lambda: calls.append("down") or True, "move down"),
        )

        self.assertTrue(registry.dispatch("DOWN"))
        self.assertIsNone(registry.dispatch("x"))
        self.assertEqual(calls, ["down"])

    def test_later_binding_wins_for_shared_token(self) -> None:
        registry = KeyComboRegistry()
        registry.register_binding(KeyComboBinding(("r",), lambda: False))
        registry.register_binding(KeyComboBinding(("r",), lambda: True))

        self.assertTrue(registry.dispatch("r"))

    def test_help_lines_skip_undescribed_bindings_and_use_labels(self) -> None:
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("PAGE_DOWN",), lambda: True),
            KeyComboBinding(("CTRL_H", "."), lambda: True, "toggle hidden files"),
            KeyComboBinding(("ALT_LEFT",), lambda: True, "back"),
        )

        self.assertEqual(
            registry.help_lines(),
            [("Ctrl+H/.", "toggle hidden files"), ("Alt+Left", "back")],
        )

    def test_unknown_tokens_label_as_themselves(self) -> None:
        self.assertEqual(key_label("q"), "q")
        self.assertEqual(key_label("BACKSPACE"), "Backspace")


if __name__ == "__main__":
    unittest.main()
