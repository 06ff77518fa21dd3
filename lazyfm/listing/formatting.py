"""Display strings for listing rows: size, timestamp, and file type."""

from __future__ import annotations

import functools
from datetime import datetime

from pygments.lexers import find_lexer_class_for_filename

from .types import DirectoryEntry, ListingRow

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
UNKNOWN_TIMESTAMP = "?"
FOLDER_LABEL = "Folder"
FILE_LABEL = "File"


def format_size(size_bytes: int) -> str:
    """Format a byte count with base-1024 units.

    Values below 1 KiB print as whole bytes; larger values use one decimal
    place in the largest unit that keeps the value below 1024 (up to GB).
    """
    if size_bytes < KIB:
        return f"{size_bytes} B"
    if size_bytes < MIB:
        return f"{size_bytes / KIB:.1f} KB"
    if size_bytes < GIB:
        return f"{size_bytes / MIB:.1f} MB"
    return f"{size_bytes / GIB:.1f} GB"


def format_timestamp(seconds: float) -> str:
    """Render an epoch timestamp as local ``YYYY-MM-DD HH:MM``.

    Timestamps the platform cannot represent render as ``?``.
    """
    try:
        moment = datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIMESTAMP
    return moment.strftime(TIMESTAMP_FORMAT)


def size_text_for(entry: DirectoryEntry) -> str:
    """Return the size column text; directories always get an empty string."""
    if entry.is_dir or entry.size_bytes is None:
        return ""
    return format_size(entry.size_bytes)


@functools.lru_cache(maxsize=4096)
def _lexer_name_for_filename(name: str) -> str | None:
    lexer_class = find_lexer_class_for_filename(name)
    if lexer_class is None:
        return None
    return lexer_class.name


def type_label(entry: DirectoryEntry) -> str:
    """Return a short type name derived from the filename only."""
    if entry.is_dir:
        return FOLDER_LABEL
    return _lexer_name_for_filename(entry.name) or FILE_LABEL


def format_entry(entry: DirectoryEntry) -> ListingRow:
    return ListingRow(
        entry=entry,
        size_text=size_text_for(entry),
        modified_text=format_timestamp(entry.modified_at),
        type_label=type_label(entry),
    )


__all__ = [
    "format_size",
    "format_timestamp",
    "size_text_for",
    "type_label",
    "format_entry",
]
