"""Tests for canonical directory resolution."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.listing import NotADirectory, NotFound, resolve_directory


class ResolveDirectoryTests(unittest.TestCase):
    def test_resolves_symlinks_and_relative_segments(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            real = root / "real"
            (real / "inner").mkdir(parents=True)
            link = root / "link"
            link.symlink_to(real, target_is_directory=True)

            resolved = resolve_directory(f"{link}/inner/../inner/.")

            self.assertEqual(resolved, real / "inner")

    def test_missing_path_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope" / "deeper"
            with self.assertRaises(NotFound) as ctx:
                resolve_directory(missing)
            self.assertIn("Path not found", str(ctx.exception))

    def test_file_raises_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(NotADirectory):
                resolve_directory(target)

    def test_symlink_to_file_is_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_text("x", encoding="utf-8")
            link = Path(tmp) / "notes-link"
            link.symlink_to(target)
            with self.assertRaises(NotADirectory):
                resolve_directory(link)

    def test_empty_and_whitespace_candidates_are_not_found(self) -> None:
        with self.assertRaises(NotFound):
            resolve_directory("")
        with self.assertRaises(NotFound):
            resolve_directory("   ")

    def test_tilde_is_expanded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = Path(tmp).resolve()
            (home / "Documents").mkdir()
            with mock.patch.dict(os.environ, {"HOME": str(home)}):
                self.assertEqual(resolve_directory("~/Documents"), home / "Documents")

    def test_trailing_whitespace_is_part_of_the_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            (root / "docs ").mkdir()

            self.assertEqual(resolve_directory(root / "docs "), root / "docs ")
            self.assertEqual(resolve_directory(f"{root}/docs "), root / "docs ")
            with self.assertRaises(NotFound):
                resolve_directory(f" {root}/docs")


if __name__ == "__main__":
    unittest.main()
