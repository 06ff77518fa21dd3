"""Frame composition for the terminal browser.

Turns a published ``BrowserView`` plus UI-only state (selection, scroll,
prompt, message) into screen lines. Rendering never touches the filesystem
and never mutates navigation state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .ansi import clip_ansi_line, display_width, fit_cell, sanitize_name
from .listing import ListingRow
from .navigation import BrowserView
from .ui_theme import DEFAULT_THEME, UITheme

SIZE_COLUMN_WIDTH = 10
MODIFIED_COLUMN_WIDTH = 16
TYPE_COLUMN_WIDTH = 14
MIN_NAME_COLUMN_WIDTH = 12
CHROME_ROWS = 3
HELP_HINT = "? help"


@dataclass(frozen=True)
class Prompt:
    """Single-line input shown in place of the path bar."""

    label: str
    text: str = ""


@dataclass
class RenderContext:
    view: BrowserView
    rows: Sequence[ListingRow]
    selected: int
    scroll: int
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME
    prompt: Prompt | None = None
    message: str = ""
    message_is_error: bool = False
    show_help: bool = False
    help_lines: Sequence[tuple[str, str]] = field(default_factory=tuple)


def sort_rows(rows: Sequence[ListingRow]) -> list[ListingRow]:
    """Directories first, then case-insensitive name order."""
    return sorted(rows, key=lambda row: (not row.is_dir, row.name.lower(), row.name))


def listing_rows_visible(height: int) -> int:
    """Number of listing rows that fit between the chrome rows."""
    return max(1, height - CHROME_ROWS)


def clamp_scroll(selected: int, scroll: int, visible_rows: int, row_count: int) -> int:
    """Return a scroll offset that keeps ``selected`` on screen."""
    max_scroll = max(0, row_count - visible_rows)
    if selected < scroll:
        scroll = selected
    elif selected >= scroll + visible_rows:
        scroll = selected - visible_rows + 1
    return max(0, min(scroll, max_scroll))


def _column_widths(width: int) -> tuple[int, int, int, int]:
    fixed = SIZE_COLUMN_WIDTH + MODIFIED_COLUMN_WIDTH + TYPE_COLUMN_WIDTH + 3
    name_width = width - fixed - 1
    if name_width < MIN_NAME_COLUMN_WIDTH:
        return max(1, width - 1), 0, 0, 0
    return name_width, SIZE_COLUMN_WIDTH, MODIFIED_COLUMN_WIDTH, TYPE_COLUMN_WIDTH


def _styled(theme: UITheme, style: str, text: str) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def format_row_plain(row: ListingRow, width: int) -> str:
    """Return the uncolored, column-aligned text for one listing row."""
    name_w, size_w, modified_w, type_w = _column_widths(width)
    name = sanitize_name(row.name) + ("/" if row.is_dir else "")
    cells = [fit_cell(name, name_w)]
    if size_w:
        cells.append(fit_cell(row.size_text, size_w, align_right=True))
        cells.append(fit_cell(row.modified_text, modified_w))
        cells.append(fit_cell(row.type_label, type_w))
    return " ".join(cells)


def _format_row(row: ListingRow, width: int, theme: UITheme, selected: bool) -> str:
    if selected:
        return _styled(theme, theme.reverse, format_row_plain(row, width))

    name_w, size_w, modified_w, type_w = _column_widths(width)
    if row.is_dir:
        name_style = theme.row_dir
    elif row.entry.is_hidden:
        name_style = theme.row_hidden
    else:
        name_style = theme.row_file
    name = sanitize_name(row.name) + ("/" if row.is_dir else "")
    cells = [_styled(theme, name_style, fit_cell(name, name_w))]
    if size_w:
        cells.append(_styled(theme, theme.size, fit_cell(row.size_text, size_w, align_right=True)))
        cells.append(_styled(theme, theme.modified, fit_cell(row.modified_text, modified_w)))
        cells.append(_styled(theme, theme.type_label, fit_cell(row.type_label, type_w)))
    return " ".join(cells)


def _header_line(width: int, theme: UITheme) -> str:
    name_w, size_w, modified_w, type_w = _column_widths(width)
    cells = [fit_cell("Name", name_w)]
    if size_w:
        cells.append(fit_cell("Size", size_w, align_right=True))
        cells.append(fit_cell("Modified", modified_w))
        cells.append(fit_cell("Type", type_w))
    return _styled(theme, theme.header, " ".join(cells))


def build_status_line(left_text: str, width: int, right_text: str = HELP_HINT) -> str:
    """Compose a status row with ``right_text`` pinned to the right edge."""
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _path_bar(context: RenderContext) -> str:
    theme = context.theme
    if context.prompt is not None:
        text = f"{context.prompt.label}{sanitize_name(context.prompt.text)}_"
        return _styled(theme, theme.path_bar_editing, clip_ansi_line(text, context.width - 1))
    hidden_flag = "[hidden shown]" if context.view.show_hidden else ""
    path_text = sanitize_name(str(context.view.path))
    usable = max(1, context.width - 1)
    if hidden_flag and display_width(path_text) + len(hidden_flag) + 1 <= usable:
        gap = " " * (usable - display_width(path_text) - len(hidden_flag))
        return _styled(theme, theme.path_bar, path_text) + gap + _styled(theme, theme.status, hidden_flag)
    return _styled(theme, theme.path_bar, clip_ansi_line(path_text, usable))


def _help_body(context: RenderContext, rows: int) -> list[str]:
    theme = context.theme
    lines: list[str] = []
    key_width = max((len(keys) for keys, _ in context.help_lines), default=0)
    for keys, description in context.help_lines:
        text = _styled(theme, theme.help_key, keys.ljust(key_width)) + "  " + description
        lines.append(clip_ansi_line(text, context.width - 1))
    lines.append(_styled(theme, theme.help_dim, "press ? or Esc to close"))
    return lines[:rows]


def render_frame(context: RenderContext) -> list[str]:
    """Compose exactly ``context.height`` screen lines (at least four)."""
    theme = context.theme
    width = max(1, context.width)
    body_rows = listing_rows_visible(context.height)

    lines = [_path_bar(context), _header_line(width, theme)]

    if context.show_help:
        body = _help_body(context, body_rows)
    elif not context.rows:
        if context.view.error is not None:
            body = [_styled(theme, theme.status_error, clip_ansi_line(str(context.view.error), width - 1))]
        else:
            body = [_styled(theme, theme.status, "(empty)")]
    else:
        body = []
        end = min(len(context.rows), context.scroll + body_rows)
        for idx in range(context.scroll, end):
            body.append(_format_row(context.rows[idx], width, theme, idx == context.selected))
    body.extend([""] * (body_rows - len(body)))
    lines.extend(body)

    left = context.message or context.view.status_text
    style = theme.status_error if context.message_is_error else theme.status
    lines.append(_styled(theme, style, build_status_line(left, width)))
    return lines


__all__ = [
    "Prompt",
    "RenderContext",
    "sort_rows",
    "listing_rows_visible",
    "clamp_scroll",
    "format_row_plain",
    "build_status_line",
    "render_frame",
]
