"""Rotating file logging for the terminal session.

The TUI owns the terminal, so log records go to a file under the user log
directory instead of stderr.
"""

from __future__ import annotations

import logging
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))
LOG_FILENAME = "lazyfm.log"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3


class ShortFormatter(logging.Formatter):
    """One-line records with a short timestamp and padded level."""

    def format(self, record: logging.LogRecord) -> str:
        ts = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
        line = f"{ts} {record.levelname.ljust(7)} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "WARNING", log_dir: Path | None = None) -> Path | None:
    """Attach a rotating file handler to the ``lazyfm`` logger.

    Returns the log file path, or ``None`` when the directory cannot be
    created (logging then stays unconfigured). Calling again replaces the
    previous handler.
    """
    target_dir = log_dir if log_dir is not None else LOG_DIR
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None

    log_path = target_dir / LOG_FILENAME
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(ShortFormatter())

    root = logging.getLogger(APP_NAME)
    for existing in list(root.handlers):
        if isinstance(existing, RotatingFileHandler):
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False
    return log_path
