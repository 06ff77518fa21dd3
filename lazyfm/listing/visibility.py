"""Hidden-file policy applied to raw directory entries."""

from __future__ import annotations

from collections.abc import Iterable

from .types import DirectoryEntry


def apply_visibility(entries: Iterable[DirectoryEntry], show_hidden: bool) -> list[DirectoryEntry]:
    """Drop dot-named entries unless ``show_hidden``; input order is kept."""
    if show_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.is_hidden]


__all__ = ["apply_visibility"]
