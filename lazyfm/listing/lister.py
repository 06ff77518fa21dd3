"""Filesystem scanning for a single directory level.

Listing is best effort: children that vanish or cannot be stat'ed between
enumeration and stat are dropped instead of failing the whole scan.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .errors import Unreadable
from .types import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


def list_directory(path: Path) -> tuple[list[DirectoryEntry], Unreadable | None]:
    """List statable immediate children of ``path`` in filesystem order.

    Returns ``(entries, error)``. ``error`` is set, and ``entries`` empty,
    when the directory itself cannot be opened or enumerated.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(path) as it:
            for child in it:
                name = child.name
                if name in _PSEUDO_ENTRIES:
                    continue
                try:
                    st = child.stat(follow_symlinks=True)
                except OSError as exc:
                    logger.debug("skipping %s: %s", child.path, exc)
                    continue

                if stat.S_ISDIR(st.st_mode):
                    kind = EntryKind.DIRECTORY
                    size_bytes = None
                else:
                    kind = EntryKind.FILE
                    size_bytes = int(st.st_size)
                entries.append(
                    DirectoryEntry(
                        name=name,
                        kind=kind,
                        size_bytes=size_bytes,
                        modified_at=int(st.st_mtime),
                    )
                )
    except OSError as exc:
        logger.warning("cannot list %s: %s", path, exc)
        return [], Unreadable(path, exc.strerror)
    return entries, None


def count_directory(path: Path) -> tuple[int, int]:
    """Return ``(total, hidden)`` name counts for ``path`` without stat calls.

    This scan is independent of ``list_directory``; an unreadable directory
    counts as ``(0, 0)``.
    """
    total = 0
    hidden = 0
    try:
        with os.scandir(path) as it:
            for child in it:
                name = child.name
                if name in _PSEUDO_ENTRIES:
                    continue
                total += 1
                if name.startswith("."):
                    hidden += 1
    except OSError as exc:
        logger.debug("cannot count %s: %s", path, exc)
        return 0, 0
    return total, hidden


__all__ = ["list_directory", "count_directory"]
