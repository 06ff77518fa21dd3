"""Persistent JSON config helpers.

Stores the UI theme, user bookmarks, and log level.
All access is defensive: malformed or missing config falls back safely.
The hidden-file toggle is deliberately not stored; it resets every run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_bookmarks() -> dict[str, str]:
    """Load named bookmark paths, dropping non-string or empty items."""
    value = load_config().get("bookmarks")
    if not isinstance(value, dict):
        return {}

    bookmarks: dict[str, str] = {}
    for name, raw_path in value.items():
        if not isinstance(name, str) or not name.strip():
            continue
        if not isinstance(raw_path, str) or not raw_path.strip():
            continue
        bookmarks[name.strip()] = raw_path.strip()
    return bookmarks


def save_bookmark(name: str, path: Path) -> None:
    """Add or replace one bookmark, keeping the others."""
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    bookmarks = load_bookmarks()
    bookmarks[stripped] = str(path)
    config["bookmarks"] = bookmarks
    save_config(config)


def load_log_level() -> str:
    """Return a valid ``logging`` level name, defaulting to ``WARNING``."""
    value = load_config().get("log_level")
    if isinstance(value, str):
        candidate = value.strip().upper()
        if isinstance(logging.getLevelName(candidate), int):
            return candidate
    return DEFAULT_LOG_LEVEL
