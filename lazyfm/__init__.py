"""Public package surface for lazyfm.

Exports ``main`` for programmatic CLI invocation.
The navigation engine lives in ``lazyfm.listing`` and ``lazyfm.navigation``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
