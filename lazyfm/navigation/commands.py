"""Command messages and the dispatcher that applies them to a state.

Every UI action is a small immutable message. ``CommandDispatcher`` applies
one message to an explicitly passed ``NavigationState`` and returns the view
to render plus any user-visible error, so UI code never calls into the
engine ad hoc.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from ..listing import BrowserError, NotFound
from .state import BrowserView, NavigationState


@dataclass(frozen=True)
class NavigateTo:
    path: str | Path


@dataclass(frozen=True)
class NavigateUp:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class ToggleHidden:
    pass


@dataclass(frozen=True)
class OpenPlace:
    name: str


@dataclass(frozen=True)
class ActivateEntry:
    name: str


@dataclass(frozen=True)
class CreateFolder:
    name: str


@dataclass(frozen=True)
class DeleteEntry:
    name: str


@dataclass(frozen=True)
class GoBack:
    pass


@dataclass(frozen=True)
class GoForward:
    pass


Command = (
    NavigateTo
    | NavigateUp
    | Refresh
    | ToggleHidden
    | OpenPlace
    | ActivateEntry
    | CreateFolder
    | DeleteEntry
    | GoBack
    | GoForward
)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command.

    On failure ``error`` is set and ``view`` is the unchanged previous view.
    """

    view: BrowserView
    error: BrowserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandDispatcher:
    """Type-keyed dispatch table from command messages to state operations."""

    def __init__(self, state: NavigationState, places: Mapping[str, Path] | None = None) -> None:
        self.state = state
        self.places: dict[str, Path] = dict(places or {})
        self._handlers: dict[type, Callable[..., BrowserView]] = {
            NavigateTo: lambda cmd: state.navigate_to(cmd.path),
            NavigateUp: lambda _cmd: state.navigate_up(),
            Refresh: lambda _cmd: state.refresh(),
            ToggleHidden: lambda _cmd: state.toggle_hidden(),
            OpenPlace: self._open_place,
            ActivateEntry: lambda cmd: state.activate_entry(cmd.name),
            CreateFolder: lambda cmd: state.create_folder(cmd.name),
            DeleteEntry: lambda cmd: state.delete_entry(cmd.name),
            GoBack: lambda _cmd: state.go_back(),
            GoForward: lambda _cmd: state.go_forward(),
        }

    def _open_place(self, command: OpenPlace) -> BrowserView:
        target = self.places.get(command.name)
        if target is None:
            raise NotFound(command.name, "unknown place")
        return self.state.navigate_to(target)

    def dispatch(self, command: Command) -> CommandResult:
        """Apply ``command`` and capture user-visible engine errors."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"unsupported command: {command!r}")
        try:
            view = handler(command)
        except BrowserError as exc:
            return CommandResult(view=self.state.view, error=exc)
        return CommandResult(view=view, error=view.error)


__all__ = [
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
    "Command",
    "CommandResult",
    "CommandDispatcher",
]
