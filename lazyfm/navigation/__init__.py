"""Navigation state, history, places, and the command dispatcher."""

from __future__ import annotations

from .commands import (
    ActivateEntry,
    Command,
    CommandDispatcher,
    CommandResult,
    CreateFolder,
    DeleteEntry,
    GoBack,
    GoForward,
    NavigateTo,
    NavigateUp,
    OpenPlace,
    Refresh,
    ToggleHidden,
)
from .history import NavigationHistory
from .places import ROOT_PLACE, build_places, with_bookmark
from .state import ROOT_PATH, BrowserView, NavigationState, home_directory

__all__ = [
    "ROOT_PATH",
    "BrowserView",
    "NavigationState",
    "NavigationHistory",
    "home_directory",
    "build_places",
    "with_bookmark",
    "ROOT_PLACE",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "NavigateTo",
    "NavigateUp",
    "Refresh",
    "ToggleHidden",
    "OpenPlace",
    "ActivateEntry",
    "CreateFolder",
    "DeleteEntry",
    "GoBack",
    "GoForward",
]
