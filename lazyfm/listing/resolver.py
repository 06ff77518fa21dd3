"""Canonicalize and validate navigation candidates against the filesystem."""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path

from .errors import NotADirectory, NotFound


def resolve_directory(candidate: str | Path) -> Path:
    """Return the canonical absolute path for an existing directory.

    ``candidate`` is used exactly as given apart from ``~`` expansion; callers
    holding typed text trim it first. Raises ``NotFound`` when nothing exists
    at ``candidate`` and ``NotADirectory`` when the (symlink-followed) target
    is not a directory.
    """
    if not str(candidate):
        raise NotFound("")
    path = Path(candidate).expanduser()
    try:
        st = path.stat()
    except OSError as exc:
        detail = None if exc.errno in {errno.ENOENT, errno.ENOTDIR} else exc.strerror
        raise NotFound(path, detail) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectory(path)
    return Path(os.path.realpath(path))


__all__ = ["resolve_directory"]
