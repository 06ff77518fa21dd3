"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and the modifier combos the browser binds.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x08": "CTRL_H",
    b"\x7f": "BACKSPACE",
    b"\t": "TAB",
    b"\x15": "CTRL_U",
    b"\x04": "CTRL_D",
    b"\x0c": "CTRL_L",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_TILDE_KEYS: dict[bytes, str] = {
    b"3": "DELETE",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; returns ``""`` on timeout or EOF."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _CONTROL_KEYS.get(ch)
    if named is not None:
        return named

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in {b"b", b"B"}:
        return "ALT_LEFT"
    if seq in {b"f", b"F"}:
        return "ALT_RIGHT"
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    if seq == b"H":
        return "HOME"
    if seq == b"F":
        return "END"
    if seq in _TILDE_KEYS:
        terminator = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if terminator == b"~":
            return _TILDE_KEYS[seq]
        return "ESC"
    if seq == b"1":
        seq2 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq2 != b";":
            return "ESC"
        seq3 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        seq4 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq3 is None or seq4 is None:
            return "ESC"
        if seq3 in {b"3", b"9"} and seq4 == b"C":
            return "ALT_RIGHT"
        if seq3 in {b"3", b"9"} and seq4 == b"D":
            return "ALT_LEFT"
        return "ESC"
    return "ESC"


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_key"]
