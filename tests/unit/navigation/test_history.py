"""Tests for back/forward directory history semantics."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyfm.navigation import NavigationHistory


class NavigationHistoryTests(unittest.TestCase):
    def test_back_and_forward_round_trip(self) -> None:
        history = NavigationHistory()
        source = Path("/srv/source")
        current = Path("/srv/target")

        history.record(source)
        self.assertEqual(history.go_back(current), source)
        self.assertEqual(history.go_forward(source), current)

    def test_record_clears_forward_stack(self) -> None:
        history = NavigationHistory()
        history.record(Path("/one"))
        history.go_back(Path("/two"))
        self.assertEqual(len(history.forward), 1)

        history.record(Path("/three"))
        self.assertEqual(history.forward, [])

    def test_record_avoids_adjacent_duplicates(self) -> None:
        history = NavigationHistory()
        place = Path("/same")

        history.record(place)
        history.record(place)

        self.assertEqual(history.back, [place])

    def test_history_respects_max_entries(self) -> None:
        history = NavigationHistory(max_entries=2)
        for name in ("first", "second", "third"):
            history.record(Path("/") / name)

        self.assertEqual(history.back, [Path("/second"), Path("/third")])

    def test_peek_skips_current_location_without_moving(self) -> None:
        history = NavigationHistory()
        history.record(Path("/a"))
        history.record(Path("/b"))

        self.assertEqual(history.peek_back(Path("/b")), Path("/a"))
        self.assertEqual(history.back, [Path("/a"), Path("/b")])
        self.assertIsNone(history.peek_forward(Path("/b")))


if __name__ == "__main__":
    unittest.main()
