"""CLI argument and start-directory behavior tests.

Verifies how ``lazyfm.cli.main`` validates paths and dispatches modes.
"""

from __future__ import annotations

import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm import cli


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("lazyfm.cli.configure_logging")
        self.configure_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def test_main_launches_browser_at_resolved_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with (
                mock.patch.object(sys, "argv", ["lazyfm", f"{root}/./", "--no-color", "--show-hidden"]),
                mock.patch("lazyfm.cli.run_browser") as run_browser,
            ):
                cli.main()

            run_browser.assert_called_once()
            start_path, theme = run_browser.call_args.args
            self.assertEqual(start_path, root)
            self.assertEqual(theme.name, "plain")
            self.assertTrue(run_browser.call_args.kwargs["show_hidden"])
            self.configure_logging.assert_called_once()

    def test_main_without_path_starts_at_default(self) -> None:
        with (
            mock.patch.object(sys, "argv", ["lazyfm"]),
            mock.patch("lazyfm.cli.run_browser") as run_browser,
        ):
            cli.main()

        start_path, _theme = run_browser.call_args.args
        self.assertIsNone(start_path)
        self.assertFalse(run_browser.call_args.kwargs["show_hidden"])

    def test_missing_path_exits_with_message(self) -> None:
        with (
            mock.patch.object(sys, "argv", ["lazyfm", "/nonexistent/path"]),
            mock.patch("lazyfm.cli.run_browser") as run_browser,
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        self.assertEqual(str(ctx.exception), "Path not found: /nonexistent/path")
        run_browser.assert_not_called()

    def test_file_path_exits_with_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")
            with mock.patch.object(sys, "argv", ["lazyfm", str(target)]):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        self.assertIn("Not a directory", str(ctx.exception))

    def test_list_mode_prints_sorted_listing_and_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "zeta.txt").write_text("abc", encoding="utf-8")
            (root / "alpha").mkdir()
            (root / ".hidden").write_text("", encoding="utf-8")

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["lazyfm", str(root), "--list", "--max-cols", "80"]),
                mock.patch("lazyfm.cli.run_browser") as run_browser,
                mock.patch("sys.stdout", stdout),
            ):
                cli.main()

            run_browser.assert_not_called()
            lines = stdout.getvalue().splitlines()
            self.assertEqual(len(lines), 3)
            self.assertTrue(lines[0].startswith("alpha/"))
            self.assertTrue(lines[1].startswith("zeta.txt"))
            self.assertIn("3 B", lines[1])
            self.assertEqual(lines[2], "2 items (1 hidden)")

    def test_list_mode_with_hidden_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".hidden").write_text("", encoding="utf-8")

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["lazyfm", str(root), "--list", "--show-hidden"]),
                mock.patch("sys.stdout", stdout),
            ):
                cli.main()

            lines = stdout.getvalue().splitlines()
            self.assertTrue(lines[0].startswith(".hidden"))
            self.assertEqual(lines[-1], "1 items")

    def test_log_level_flag_is_passed_to_logging(self) -> None:
        with (
            mock.patch.object(sys, "argv", ["lazyfm", "--log-level", "debug"]),
            mock.patch("lazyfm.cli.run_browser"),
        ):
            cli.main()

        self.configure_logging.assert_called_once_with("DEBUG")


if __name__ == "__main__":
    unittest.main()
