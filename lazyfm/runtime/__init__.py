"""Public runtime entry points.

This package groups the interactive browser bootstrap (`run_browser`) with
config and logging helpers used by the CLI.
"""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the browser entrypoint to keep terminal modules off the import path."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = ["run_browser"]
