"""ANSI-aware text measurement and column fitting.

Clipping and padding preserve escape sequences so colored cells stay aligned
when file names contain wide characters.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two. Control characters are shown as one cell.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible width of ``text`` ignoring ANSI escape sequences."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def sanitize_name(name: str) -> str:
    """Replace control characters so file names cannot inject escapes."""
    return "".join("?" if unicodedata.category(ch) == "Cc" else ch for ch in name)


def fit_cell(text: str, width: int, *, align_right: bool = False) -> str:
    """Clip or pad plain ``text`` to exactly ``width`` columns.

    Clipped text ends with ``~`` so truncated names are recognizable.
    """
    if width <= 0:
        return ""
    current = display_width(text)
    if current > width:
        clipped = clip_ansi_line(text, max(0, width - 1)) + "~"
        current = display_width(clipped)
        return clipped + " " * (width - current)
    padding = " " * (width - current)
    return padding + text if align_right else text + padding


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
    "sanitize_name",
    "fit_cell",
]
