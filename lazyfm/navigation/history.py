"""Back/forward stacks of visited directories.

This module intentionally has no filesystem or UI concerns.
"""

from __future__ import annotations

from pathlib import Path

MAX_HISTORY = 256


class NavigationHistory:
    """Bounded back/forward stacks for directory visits.

    Adjacent duplicate paths are suppressed to avoid no-op navigation steps.
    """

    def __init__(self, max_entries: int = MAX_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.back: list[Path] = []
        self.forward: list[Path] = []

    def _append_unique(self, stack: list[Path], path: Path) -> None:
        if stack and stack[-1] == path:
            return
        stack.append(path)
        overflow = len(stack) - self.max_entries
        if overflow > 0:
            del stack[:overflow]

    def record(self, origin: Path) -> None:
        """Push the directory being left and clear forward history."""
        self._append_unique(self.back, origin)
        self.forward.clear()

    def peek_back(self, current: Path) -> Path | None:
        """Return the next back target without moving, skipping ``current``."""
        for path in reversed(self.back):
            if path != current:
                return path
        return None

    def peek_forward(self, current: Path) -> Path | None:
        for path in reversed(self.forward):
            if path != current:
                return path
        return None

    def go_back(self, current: Path) -> Path | None:
        """Pop next back target and push ``current`` onto the forward stack."""
        while self.back and self.back[-1] == current:
            self.back.pop()
        if not self.back:
            return None
        target = self.back.pop()
        self._append_unique(self.forward, current)
        return target

    def go_forward(self, current: Path) -> Path | None:
        """Pop next forward target and push ``current`` onto the back stack."""
        while self.forward and self.forward[-1] == current:
            self.forward.pop()
        if not self.forward:
            return None
        target = self.forward.pop()
        self._append_unique(self.back, current)
        return target


__all__ = ["MAX_HISTORY", "NavigationHistory"]
