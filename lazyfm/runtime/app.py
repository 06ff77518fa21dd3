"""Interactive terminal browser on top of the navigation engine.

``BrowserApp`` keeps UI-only state (selection, scroll, prompts, messages)
and turns key tokens into navigation commands. ``run_browser`` wires it to
a raw-mode terminal and runs the read/render loop.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Mapping
from pathlib import Path

from ..input import read_key
from ..keys import KeyComboBinding, KeyComboRegistry
from ..listing import ListingRow
from ..navigation import (
    ROOT_PLACE,
    ActivateEntry,
    Command,
    CommandDispatcher,
    CreateFolder,
    DeleteEntry,
    GoBack,
    GoForward,
    NavigateTo,
    NavigateUp,
    NavigationState,
    OpenPlace,
    Refresh,
    ToggleHidden,
    build_places,
    home_directory,
    with_bookmark,
)
from ..navigation.state import BrowserView
from ..render import Prompt, RenderContext, clamp_scroll, listing_rows_visible, render_frame, sort_rows
from ..ui_theme import DEFAULT_THEME, PLAIN_THEME, UITheme, available_theme_names, resolve_theme
from .config import load_bookmarks, save_bookmark, save_theme_name
from .terminal import TerminalController

logger = logging.getLogger(__name__)

PROMPT_PATH = "path"
PROMPT_NEW_FOLDER = "new_folder"
PROMPT_DELETE = "delete"
PROMPT_FIND = "find"

_PROMPT_LABELS = {
    PROMPT_PATH: "Go to: ",
    PROMPT_NEW_FOLDER: "New folder: ",
    PROMPT_FIND: "Find: ",
}

INPUT_POLL_MS = 250
MAX_PLACE_SHORTCUTS = 9


class BrowserApp:
    """Key handling and frame composition for one browser session."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.dispatcher = dispatcher
        self.theme = theme
        self.view: BrowserView = dispatcher.state.view
        self.rows: list[ListingRow] = sort_rows(self.view.rows)
        self.selected = 0
        self.scroll = 0
        self.visible_rows = 20
        self.prompt_kind: str | None = None
        self.prompt_text = ""
        self.pending_delete: str | None = None
        self.message = ""
        self.message_is_error = False
        self.show_help = False
        self.running = True
        if self.view.error is not None:
            self._set_message(str(self.view.error), error=True)
        self.registry = self._build_registry()

    @property
    def place_names(self) -> list[str]:
        return list(self.dispatcher.places)[:MAX_PLACE_SHORTCUTS]

    def _build_registry(self) -> KeyComboRegistry:
        registry = KeyComboRegistry()
        registry.register_bindings(
            KeyComboBinding(("j", "DOWN"), lambda: self.move_selection(1), "move down"),
            KeyComboBinding(("k", "UP"), lambda: self.move_selection(-1), "move up"),
            KeyComboBinding(("PAGE_DOWN", "CTRL_D"), lambda: self.move_selection(self.visible_rows)),
            KeyComboBinding(("PAGE_UP", "CTRL_U"), lambda: self.move_selection(-self.visible_rows)),
            KeyComboBinding(("g", "HOME"), lambda: self.move_selection(-len(self.rows))),
            KeyComboBinding(("G", "END"), lambda: self.move_selection(len(self.rows))),
            KeyComboBinding(("ENTER", "l", "RIGHT"), self.activate_selection, "open folder"),
            KeyComboBinding(("BACKSPACE", "h", "LEFT", "u"), self.go_up, "parent folder"),
            KeyComboBinding(("ALT_LEFT",), lambda: self.apply(GoBack()), "back"),
            KeyComboBinding(("ALT_RIGHT",), lambda: self.apply(GoForward()), "forward"),
            KeyComboBinding(("CTRL_H", "."), lambda: self.apply(ToggleHidden()), "toggle hidden files"),
            KeyComboBinding(("r", "CTRL_L"), lambda: self.apply(Refresh()), "refresh"),
            KeyComboBinding((":",), lambda: self.open_prompt(PROMPT_PATH, str(self.view.path)), "edit path"),
            KeyComboBinding(("n",), lambda: self.open_prompt(PROMPT_NEW_FOLDER), "new folder"),
            KeyComboBinding(("d", "DELETE"), self.confirm_delete, "delete selected"),
            KeyComboBinding(("/",), lambda: self.open_prompt(PROMPT_FIND), "find by name"),
            KeyComboBinding(("b",), self.bookmark_current, "bookmark this folder"),
            KeyComboBinding(("t",), self.cycle_theme, "next color theme"),
            KeyComboBinding(("?",), self.toggle_help, "help"),
            KeyComboBinding(("q",), self.quit, "quit"),
        )
        for idx, name in enumerate(self.place_names, start=1):
            registry.register_binding(
                KeyComboBinding((str(idx),), lambda name=name: self.apply(OpenPlace(name)), f"{name}")
            )
        return registry

    def help_lines(self) -> list[tuple[str, str]]:
        return self.registry.help_lines()

    def _set_message(self, text: str, *, error: bool = False) -> None:
        self.message = text
        self.message_is_error = error

    def _publish(self, view: BrowserView, focus_name: str | None = None) -> None:
        previous_name = self.selected_row().name if self.selected_row() is not None else None
        same_directory = view.path == self.view.path
        self.view = view
        self.rows = sort_rows(view.rows)
        target = focus_name if focus_name is not None else (previous_name if same_directory else None)
        self.selected = 0
        if target is not None:
            for idx, row in enumerate(self.rows):
                if row.name == target:
                    self.selected = idx
                    break
        if not same_directory:
            self.scroll = 0
        self._clamp()

    def apply(self, command: Command, *, focus_name: str | None = None) -> bool:
        """Dispatch one command and publish its resulting view."""
        result = self.dispatcher.dispatch(command)
        self._publish(result.view, focus_name)
        if result.error is not None:
            self._set_message(str(result.error), error=True)
        else:
            self._set_message("")
        return result.ok

    def selected_row(self) -> ListingRow | None:
        if 0 <= self.selected < len(self.rows):
            return self.rows[self.selected]
        return None

    def _clamp(self) -> None:
        if not self.rows:
            self.selected = 0
            self.scroll = 0
            return
        self.selected = max(0, min(self.selected, len(self.rows) - 1))
        self.scroll = clamp_scroll(self.selected, self.scroll, self.visible_rows, len(self.rows))

    def move_selection(self, delta: int) -> bool:
        self.selected += delta
        self._clamp()
        return True

    def activate_selection(self) -> bool:
        row = self.selected_row()
        if row is None or not row.is_dir:
            return False
        return self.apply(ActivateEntry(row.name))

    def go_up(self) -> bool:
        child_name = self.view.path.name or None
        return self.apply(NavigateUp(), focus_name=child_name)

    def bookmark_current(self) -> bool:
        """Add the current directory to the places table and persist it."""
        path = self.view.path
        name = path.name or ROOT_PLACE
        existing = self.dispatcher.places.get(name)
        if existing == path:
            self._set_message(f"Already a place: {name}")
            return False
        if existing is not None:
            self._set_message(f"Place name already used: {name}", error=True)
            return False
        self.dispatcher.places = with_bookmark(self.dispatcher.places, name, path)
        save_bookmark(name, path)
        self.registry = self._build_registry()
        logger.info("bookmarked %s as %s", path, name)
        self._set_message(f"Bookmarked {name}")
        return True

    def cycle_theme(self) -> bool:
        """Switch to the next color theme and remember it for later sessions."""
        if self.theme.name == PLAIN_THEME.name:
            self._set_message("Colors are disabled")
            return False
        names = available_theme_names()
        idx = names.index(self.theme.name) if self.theme.name in names else -1
        self.theme = resolve_theme(names[(idx + 1) % len(names)])
        save_theme_name(self.theme.name)
        self._set_message(f"Theme: {self.theme.name}")
        return True

    def toggle_help(self) -> bool:
        self.show_help = not self.show_help
        return True

    def quit(self) -> bool:
        self.running = False
        return True

    def open_prompt(self, kind: str, initial: str = "") -> bool:
        self.prompt_kind = kind
        self.prompt_text = initial
        self._set_message("")
        return True

    def close_prompt(self) -> None:
        self.prompt_kind = None
        self.prompt_text = ""
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        row = self.selected_row()
        if row is None:
            return False
        self.prompt_kind = PROMPT_DELETE
        self.prompt_text = ""
        self.pending_delete = row.name
        return True

    def _jump_to_match(self, query: str) -> None:
        needle = query.lower()
        if not needle:
            return
        for idx, row in enumerate(self.rows):
            if needle in row.name.lower():
                self.selected = idx
                self._clamp()
                return

    def _submit_prompt(self) -> None:
        kind = self.prompt_kind
        text = self.prompt_text
        pending = self.pending_delete
        self.close_prompt()
        if kind == PROMPT_PATH:
            self.apply(NavigateTo(text.strip()))
        elif kind == PROMPT_NEW_FOLDER:
            self.apply(CreateFolder(text), focus_name=text)
        elif kind == PROMPT_DELETE and pending is not None:
            if self.apply(DeleteEntry(pending)):
                self._set_message(f"Deleted {pending}")

    def _handle_prompt_key(self, key: str) -> None:
        if self.prompt_kind == PROMPT_DELETE:
            if key in {"y", "Y"}:
                self._submit_prompt()
            else:
                self.close_prompt()
            return

        if key == "ESC":
            self.close_prompt()
            return
        if key == "ENTER":
            if self.prompt_kind == PROMPT_FIND:
                self.close_prompt()
            else:
                self._submit_prompt()
            return
        if key == "BACKSPACE" or key == "CTRL_H":
            self.prompt_text = self.prompt_text[:-1]
        elif key == "CTRL_U":
            self.prompt_text = ""
        elif len(key) == 1 and key.isprintable():
            self.prompt_text += key
        else:
            return
        if self.prompt_kind == PROMPT_FIND:
            self._jump_to_match(self.prompt_text)

    def handle_key(self, key: str) -> bool:
        """Handle one key token; returns ``False`` once the session should end."""
        if not key:
            return self.running
        if self.prompt_kind is not None:
            self._handle_prompt_key(key)
            return self.running
        if self.show_help and key in {"ESC", "?", "q"}:
            self.show_help = False
            return self.running
        self.registry.dispatch(key)
        return self.running

    def current_prompt(self) -> Prompt | None:
        if self.prompt_kind is None:
            return None
        if self.prompt_kind == PROMPT_DELETE:
            return Prompt(label=f"Delete '{self.pending_delete}'? [y/N] ")
        return Prompt(label=_PROMPT_LABELS[self.prompt_kind], text=self.prompt_text)

    def frame(self, width: int, height: int) -> list[str]:
        """Compose the screen for a terminal of ``width`` x ``height`` cells."""
        self.visible_rows = listing_rows_visible(height)
        self._clamp()
        context = RenderContext(
            view=self.view,
            rows=self.rows,
            selected=self.selected,
            scroll=self.scroll,
            width=width,
            height=height,
            theme=self.theme,
            prompt=self.current_prompt(),
            message=self.message,
            message_is_error=self.message_is_error,
            show_help=self.show_help,
            help_lines=self.help_lines(),
        )
        return render_frame(context)


def build_dispatcher(
    start_path: str | Path | None,
    show_hidden: bool = False,
    bookmarks: Mapping[str, str] | None = None,
) -> CommandDispatcher:
    """Create the navigation state and its dispatcher with the places table."""
    state = NavigationState(start_path, show_hidden=show_hidden)
    places = build_places(home_directory(), bookmarks)
    return CommandDispatcher(state, places)


def run_browser(
    start_path: str | Path | None,
    theme: UITheme,
    show_hidden: bool = False,
) -> None:
    """Run the interactive browser until the user quits."""
    dispatcher = build_dispatcher(start_path, show_hidden=show_hidden, bookmarks=load_bookmarks())
    app = BrowserApp(dispatcher, theme=theme)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.info("session started at %s", dispatcher.state.current_path)

    last_size: os.terminal_size | None = None
    dirty = True
    with terminal.raw_mode():
        while app.running:
            size = shutil.get_terminal_size((80, 24))
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                terminal.write_frame(app.frame(size.columns, max(4, size.lines)))
                dirty = False
            key = read_key(stdin_fd, timeout_ms=INPUT_POLL_MS)
            if not key:
                continue
            app.handle_key(key)
            dirty = True
    logger.info("session ended at %s", dispatcher.state.current_path)


__all__ = ["BrowserApp", "build_dispatcher", "run_browser"]
