"""Domain datatypes for one-directory listings and their status summary."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """One statable child of a listed directory.

    ``kind`` reflects the symlink target. ``size_bytes`` is ``None`` for
    directories.
    """

    name: str
    kind: EntryKind
    size_bytes: int | None
    modified_at: int

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(frozen=True)
class ListingRow:
    """Display-ready strings for one entry."""

    entry: DirectoryEntry
    size_text: str
    modified_text: str
    type_label: str

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir


@dataclass(frozen=True)
class StatusSummary:
    """Item counts from an independent directory scan.

    Counts include entries that the listing dropped because they could not be
    stat'ed, so ``visible_items`` may differ from the number of listing rows.
    """

    total_items: int
    hidden_items: int
    show_hidden: bool

    @property
    def visible_items(self) -> int:
        return self.total_items - self.hidden_items

    def text(self) -> str:
        """Return the human status line for the current hidden-file mode."""
        if self.show_hidden:
            return f"{self.total_items} items"
        return f"{self.visible_items} items ({self.hidden_items} hidden)"


__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "ListingRow",
    "StatusSummary",
]
