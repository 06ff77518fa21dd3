"""Command-line front door for lazyfm.

Parses CLI options, validates the start directory, and configures logging.
Then either prints a one-shot listing or launches the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .listing import ResolutionError, resolve_directory
from .navigation import NavigationState
from .render import format_row_plain, sort_rows
from .runtime import run_browser
from .runtime.config import load_log_level, load_theme_name
from .runtime.logs import configure_logging
from .ui_theme import available_theme_names, resolve_theme

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def render_listing(path: Path, show_hidden: bool, max_cols: int) -> str:
    """Return the sorted plain-text listing of ``path`` plus its status line."""
    state = NavigationState(path, show_hidden=show_hidden)
    view = state.view
    out: list[str] = []
    for row in sort_rows(view.rows):
        out.append(format_row_plain(row, max_cols).rstrip())
    if view.error is not None:
        out.append(str(view.error))
    out.append(view.status_text)
    return "\n".join(out) + "\n"


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazyfm on a directory.

    ``default_path`` is primarily for tests; when omitted the browser starts
    in the home directory (or ``/``).
    """
    parser = argparse.ArgumentParser(description="Browse directories in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to home.")
    parser.add_argument("--show-hidden", action="store_true", help="Start with hidden files shown.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print the listing and status, then exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --list output (default: terminal width).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help="Log level for the session log file.",
    )
    args = parser.parse_args()

    configure_logging(args.log_level or load_log_level())

    raw_path = args.path if args.path is not None else default_path
    start_path: Path | None = None
    if raw_path is not None:
        try:
            start_path = resolve_directory(raw_path)
        except ResolutionError as exc:
            raise SystemExit(str(exc)) from exc

    if args.list:
        target = start_path if start_path is not None else NavigationState().current_path
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_listing(target, args.show_hidden, max_cols))
        return

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    logging.getLogger(__name__).debug("starting browser at %s", start_path)
    run_browser(start_path, theme, show_hidden=args.show_hidden)


if __name__ == "__main__":
    main()
