"""Navigation state machine for the directory browser.

``NavigationState`` owns the current directory and the hidden-file flag and
turns every action into a freshly published ``BrowserView``. It is meant to
be driven from a single UI thread.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..listing import (
    CreateFailed,
    ListingRow,
    NotADirectory,
    RemoveFailed,
    ResolutionError,
    StatusSummary,
    Unreadable,
    apply_visibility,
    count_directory,
    format_entry,
    list_directory,
    resolve_directory,
)
from .history import NavigationHistory

logger = logging.getLogger(__name__)

ROOT_PATH = Path("/")
NEW_FOLDER_MODE = 0o755


@dataclass(frozen=True)
class BrowserView:
    """Complete render payload for one directory.

    ``error`` carries a directory-level condition (for example the directory
    could not be read); ``rows`` is then empty.
    """

    path: Path
    show_hidden: bool
    rows: tuple[ListingRow, ...]
    status: StatusSummary
    error: Unreadable | None = None

    @property
    def status_text(self) -> str:
        return self.status.text()


def home_directory() -> Path:
    """Return the canonical home directory, or ``/`` when it is unavailable."""
    home = os.environ.get("HOME")
    if home:
        try:
            return resolve_directory(home)
        except ResolutionError:
            pass
    return ROOT_PATH


def _child_name_problem(name: str) -> str | None:
    if not name:
        return "empty name"
    if name in {".", ".."} or "/" in name or "\0" in name:
        return "invalid name"
    return None


class NavigationState:
    """Current path plus hidden-file flag, with navigation operations.

    Every operation either publishes a complete new view or leaves the
    previous state and view untouched.
    """

    def __init__(
        self,
        start_path: str | Path | None = None,
        show_hidden: bool = False,
        history: NavigationHistory | None = None,
    ) -> None:
        self._current_path = self._initial_path(start_path)
        self._show_hidden = bool(show_hidden)
        self.history = history if history is not None else NavigationHistory()
        self._view = self._build_view()

    @staticmethod
    def _initial_path(start_path: str | Path | None) -> Path:
        if start_path is not None:
            try:
                return resolve_directory(start_path)
            except ResolutionError as exc:
                logger.info("start path rejected, using home: %s", exc)
        return home_directory()

    @property
    def current_path(self) -> Path:
        return self._current_path

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    @property
    def view(self) -> BrowserView:
        """Last published view."""
        return self._view

    def compute_status(self) -> StatusSummary:
        """Count entries with a scan independent of the rendered listing."""
        total, hidden = count_directory(self._current_path)
        return StatusSummary(total_items=total, hidden_items=hidden, show_hidden=self._show_hidden)

    def _build_view(self) -> BrowserView:
        entries, error = list_directory(self._current_path)
        rows = tuple(format_entry(entry) for entry in apply_visibility(entries, self._show_hidden))
        return BrowserView(
            path=self._current_path,
            show_hidden=self._show_hidden,
            rows=rows,
            status=self.compute_status(),
            error=error,
        )

    def refresh(self) -> BrowserView:
        """Rebuild the view for the unchanged current path."""
        self._view = self._build_view()
        return self._view

    def _move_to(self, path: Path, *, record: bool = True) -> BrowserView:
        if record and path != self._current_path:
            self.history.record(self._current_path)
        logger.debug("navigate %s -> %s", self._current_path, path)
        self._current_path = path
        return self.refresh()

    def navigate_to(self, candidate: str | Path) -> BrowserView:
        """Resolve ``candidate`` and make it current.

        Raises ``ResolutionError`` and leaves state unchanged when the
        candidate is missing or not a directory.
        """
        return self._move_to(resolve_directory(candidate))

    def navigate_up(self) -> BrowserView:
        """Move to the lexical parent; a no-op at ``/``.

        The parent is not re-resolved. If it vanished, the refresh yields an
        empty listing with an ``Unreadable`` condition.
        """
        if self._current_path == ROOT_PATH:
            return self._view
        return self._move_to(self._current_path.parent)

    def toggle_hidden(self) -> BrowserView:
        self._show_hidden = not self._show_hidden
        return self.refresh()

    def activate_entry(self, name: str) -> BrowserView:
        """Enter the named child when it is a directory; files are ignored."""
        try:
            return self.navigate_to(self._current_path / name)
        except NotADirectory:
            return self._view

    def go_back(self) -> BrowserView:
        target = self.history.peek_back(self._current_path)
        if target is None:
            return self._view
        resolved = resolve_directory(target)
        self.history.go_back(self._current_path)
        return self._move_to(resolved, record=False)

    def go_forward(self) -> BrowserView:
        target = self.history.peek_forward(self._current_path)
        if target is None:
            return self._view
        resolved = resolve_directory(target)
        self.history.go_forward(self._current_path)
        return self._move_to(resolved, record=False)

    def create_folder(self, name: str) -> BrowserView:
        """Create ``name`` inside the current directory and refresh."""
        target = self._current_path / name if name else self._current_path
        problem = _child_name_problem(name)
        if problem is not None:
            raise CreateFailed(target, problem)
        try:
            os.mkdir(target, NEW_FOLDER_MODE)
        except OSError as exc:
            raise CreateFailed(target, exc.strerror) from exc
        logger.info("created folder %s", target)
        return self.refresh()

    def delete_entry(self, name: str) -> BrowserView:
        """Remove one file or empty directory (never recursive) and refresh."""
        target = self._current_path / name if name else self._current_path
        problem = _child_name_problem(name)
        if problem is not None:
            raise RemoveFailed(target, problem)
        try:
            if target.is_dir() and not target.is_symlink():
                os.rmdir(target)
            else:
                os.unlink(target)
        except OSError as exc:
            raise RemoveFailed(target, exc.strerror) from exc
        logger.info("removed %s", target)
        return self.refresh()


__all__ = ["ROOT_PATH", "BrowserView", "NavigationState", "home_directory"]
