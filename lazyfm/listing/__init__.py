"""Single-directory listing engine primitives.

This package contains non-UI building blocks:
- path resolution against the real filesystem
- one-level directory scans and independent status counts
- hidden-file visibility filtering
- display formatting for sizes, timestamps, and file types
"""

from __future__ import annotations

from .errors import (
    BrowserError,
    CreateFailed,
    NotADirectory,
    NotFound,
    RemoveFailed,
    ResolutionError,
    Unreadable,
)
from .formatting import format_entry, format_size, format_timestamp, size_text_for, type_label
from .lister import count_directory, list_directory
from .resolver import resolve_directory
from .types import DirectoryEntry, EntryKind, ListingRow, StatusSummary
from .visibility import apply_visibility

__all__ = [
    "BrowserError",
    "ResolutionError",
    "NotFound",
    "NotADirectory",
    "Unreadable",
    "CreateFailed",
    "RemoveFailed",
    "DirectoryEntry",
    "EntryKind",
    "ListingRow",
    "StatusSummary",
    "resolve_directory",
    "list_directory",
    "count_directory",
    "apply_visibility",
    "format_entry",
    "format_size",
    "format_timestamp",
    "size_text_for",
    "type_label",
]
