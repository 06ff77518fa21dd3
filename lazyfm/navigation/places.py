"""Static table of sidebar places (shortcut name to directory path)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .state import ROOT_PATH

HOME_PLACE = "Home"
ROOT_PLACE = "Root"
HOME_SUBDIRECTORY_PLACES: tuple[str, ...] = (
    "Desktop",
    "Documents",
    "Downloads",
    "Pictures",
    "Music",
    "Videos",
)


def build_places(home: Path, bookmarks: Mapping[str, str | Path] | None = None) -> dict[str, Path]:
    """Return ordered place shortcuts.

    Home and its standard subdirectories come first, then user bookmarks,
    then ``Root``. Paths are not checked here; opening a missing place
    reports ``NotFound`` through normal navigation. Bookmarks never replace
    built-in names.
    """
    places: dict[str, Path] = {HOME_PLACE: home}
    for name in HOME_SUBDIRECTORY_PLACES:
        places[name] = home / name
    for name, raw_path in (bookmarks or {}).items():
        if name in places or name == ROOT_PLACE:
            continue
        places[name] = Path(raw_path).expanduser()
    places[ROOT_PLACE] = ROOT_PATH
    return places


def with_bookmark(places: Mapping[str, Path], name: str, path: Path) -> dict[str, Path]:
    """Return a copy of ``places`` with ``name`` added just before ``Root``."""
    updated = {key: value for key, value in places.items() if key != ROOT_PLACE}
    updated[name] = path
    if ROOT_PLACE in places:
        updated[ROOT_PLACE] = places[ROOT_PLACE]
    return updated


__all__ = ["HOME_PLACE", "ROOT_PLACE", "HOME_SUBDIRECTORY_PLACES", "build_places", "with_bookmark"]
