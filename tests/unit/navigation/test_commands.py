"""Tests for command dispatch and the places table."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyfm.listing import CreateFailed, NotFound, Unreadable
from lazyfm.navigation import (
    ROOT_PATH,
    ActivateEntry,
    CommandDispatcher,
    CreateFolder,
    DeleteEntry,
    GoBack,
    NavigateTo,
    NavigateUp,
    NavigationState,
    OpenPlace,
    Refresh,
    ToggleHidden,
    build_places,
    with_bookmark,
)


class BuildPlacesTests(unittest.TestCase):
    def test_places_are_ordered_home_first_root_last(self) -> None:
        home = Path("/home/tester")

        places = build_places(home, {"Projects": "/srv/projects"})

        self.assertEqual(
            list(places),
            ["Home", "Desktop", "Documents", "Downloads", "Pictures", "Music", "Videos", "Projects", "Root"],
        )
        self.assertEqual(places["Home"], home)
        self.assertEqual(places["Downloads"], home / "Downloads")
        self.assertEqual(places["Projects"], Path("/srv/projects"))
        self.assertEqual(places["Root"], ROOT_PATH)

    def test_bookmarks_cannot_shadow_builtin_places(self) -> None:
        home = Path("/home/tester")

        places = build_places(home, {"Home": "/elsewhere", "Root": "/elsewhere"})

        self.assertEqual(places["Home"], home)
        self.assertEqual(places["Root"], ROOT_PATH)

    def test_with_bookmark_inserts_before_root_without_mutating_input(self) -> None:
        places = build_places(Path("/home/tester"))

        updated = with_bookmark(places, "Work", Path("/srv/work"))

        self.assertEqual(list(updated)[-2:], ["Work", "Root"])
        self.assertEqual(updated["Work"], Path("/srv/work"))
        self.assertNotIn("Work", places)


class CommandDispatcherTests(unittest.TestCase):
    def test_successful_commands_return_new_view(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / ".dot").write_text("", encoding="utf-8")
            dispatcher = CommandDispatcher(NavigationState(root))

            result = dispatcher.dispatch(ActivateEntry("sub"))
            self.assertTrue(result.ok)
            self.assertEqual(result.view.path, root / "sub")

            result = dispatcher.dispatch(NavigateUp())
            self.assertEqual(result.view.path, root)

            result = dispatcher.dispatch(ToggleHidden())
            self.assertTrue(result.view.show_hidden)
            self.assertIn(".dot", [row.name for row in result.view.rows])

            result = dispatcher.dispatch(GoBack())
            self.assertEqual(result.view.path, root / "sub")

    def test_resolution_error_is_returned_with_unchanged_view(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            state = NavigationState(root)
            dispatcher = CommandDispatcher(state)
            before = state.view

            result = dispatcher.dispatch(NavigateTo("/nonexistent/path"))

            self.assertFalse(result.ok)
            self.assertIsInstance(result.error, NotFound)
            self.assertIs(result.view, before)
            self.assertEqual(state.current_path, root)

    def test_mutation_commands_report_failures(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            dispatcher = CommandDispatcher(NavigationState(root))

            created = dispatcher.dispatch(CreateFolder("made"))
            self.assertTrue(created.ok)
            self.assertEqual([row.name for row in created.view.rows], ["made"])

            duplicate = dispatcher.dispatch(CreateFolder("made"))
            self.assertIsInstance(duplicate.error, CreateFailed)

            removed = dispatcher.dispatch(DeleteEntry("made"))
            self.assertTrue(removed.ok)
            self.assertEqual(removed.view.rows, ())

    def test_open_place_navigates_and_unknown_place_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Documents").mkdir()
            state = NavigationState(root)
            dispatcher = CommandDispatcher(state, build_places(root))

            result = dispatcher.dispatch(OpenPlace("Documents"))
            self.assertEqual(result.view.path, root / "Documents")

            missing = dispatcher.dispatch(OpenPlace("Music"))
            self.assertIsInstance(missing.error, NotFound)
            self.assertEqual(state.current_path, root / "Documents")

            unknown = dispatcher.dispatch(OpenPlace("Nowhere"))
            self.assertIsInstance(unknown.error, NotFound)

    def test_unreadable_refresh_surfaces_view_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            doomed = root / "doomed"
            doomed.mkdir()
            dispatcher = CommandDispatcher(NavigationState(doomed))
            doomed.rmdir()

            result = dispatcher.dispatch(Refresh())

            self.assertIsInstance(result.error, Unreadable)
            self.assertEqual(result.view.rows, ())

    def test_unknown_command_type_is_a_programming_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            dispatcher = CommandDispatcher(NavigationState(Path(tmp).resolve()))
            with self.assertRaises(TypeError):
                dispatcher.dispatch("refresh")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
