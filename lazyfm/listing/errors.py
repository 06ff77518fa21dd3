"""Error taxonomy for resolution, listing, and mutation failures.

Every condition here is recoverable by the user and never process-fatal.
``str()`` of each error is a short message suitable for a status line.
"""

from __future__ import annotations

from pathlib import Path


class BrowserError(Exception):
    """Base class for user-visible browser conditions tied to one path."""

    reason = "error"

    def __init__(self, path: str | Path, detail: str | None = None) -> None:
        self.path = str(path)
        self.detail = detail
        super().__init__(self.message())

    def message(self) -> str:
        """Return the status-line text for this condition."""
        if self.detail:
            return f"{self.reason}: {self.path} ({self.detail})"
        return f"{self.reason}: {self.path}"


class ResolutionError(BrowserError):
    """Raised when a navigation candidate cannot become the current path."""


class NotFound(ResolutionError):
    reason = "Path not found"


class NotADirectory(ResolutionError):
    reason = "Not a directory"


class Unreadable(BrowserError):
    """Directory exists but cannot be opened or enumerated."""

    reason = "Cannot read directory"


class CreateFailed(BrowserError):
    reason = "Cannot create folder"


class RemoveFailed(BrowserError):
    reason = "Cannot delete"


__all__ = [
    "BrowserError",
    "ResolutionError",
    "NotFound",
    "NotADirectory",
    "Unreadable",
    "CreateFailed",
    "RemoveFailed",
]
