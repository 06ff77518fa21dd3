"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the path bar, listing columns, and status row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    path_bar: str
    path_bar_editing: str
    header: str
    row_dir: str
    row_file: str
    row_hidden: str
    size: str
    modified: str
    type_label: str
    status: str
    status_error: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    path_bar="\033[1;38;5;81m",
    path_bar_editing="\033[1;38;5;229m",
    header="\033[2;4m",
    row_dir="\033[1;34m",
    row_file="\033[38;5;252m",
    row_hidden="\033[2;38;5;250m",
    size="\033[38;5;109m",
    modified="\033[38;5;250m",
    type_label="\033[38;5;110m",
    status="\033[2m",
    status_error="\033[1;38;5;203m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    path_bar="\033[1;38;5;45m",
    path_bar_editing="\033[1;38;5;153m",
    header="\033[2;38;5;31;4m",
    row_dir="\033[1;38;5;45m",
    row_file="\033[38;5;252m",
    row_hidden="\033[2;38;5;110m",
    size="\033[38;5;73m",
    modified="\033[38;5;153m",
    type_label="\033[38;5;117m",
    status="\033[2;38;5;110m",
    status_error="\033[1;38;5;215m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="\033[7m",
    path_bar="",
    path_bar_editing="",
    header="",
    row_dir="",
    row_file="",
    row_hidden="",
    size="",
    modified="",
    type_label="",
    status="",
    status_error="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
