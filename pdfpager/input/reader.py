"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key tokens: named keys
such as ``UP`` or ``ENTER``, or a single decoded character.
"""

from __future__ import annotations

import os
import select

from ..errors import TerminalSurfaceError

ESC_SEQUENCE_TIMEOUT_MS = 25
# Token for escape sequences with no binding; never dispatched as text.
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
}

# Final byte of ``ESC [ <final>`` and ``ESC O <final>`` sequences.
_CSI_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# Numeric ``ESC [ <n> ~`` sequences.
_CSI_TILDE_KEYS = {
    "1": "HOME",
    "7": "HOME",
    "4": "END",
    "8": "END",
    "3": "DELETE",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_char(fd: int, lead: bytes) -> str:
    """Decode one UTF-8 character whose first byte is ``lead``."""
    data = bytearray(lead)
    for _ in range(_utf8_length(lead[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_escape_sequence(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    # Past the introducer anything unrecognized or truncated is UNKNOWN, never ESC.
    introducer = seq
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return UNKNOWN_KEY
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    if introducer == b"[" and seq.isdigit():
        digits = seq.decode("ascii")
        while True:
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return UNKNOWN_KEY
            if part == b"~":
                return _CSI_TILDE_KEYS.get(digits, UNKNOWN_KEY)
            if not (part.isdigit() or part == b";") or len(digits) > 16:
                # Modified keys (``ESC [ 1 ; 5 C``) collapse to their base key.
                return _CSI_FINAL_KEYS.get(part, UNKNOWN_KEY)
            digits += part.decode("ascii")
    return UNKNOWN_KEY


def read_key(fd: int) -> str:
    """Block until one key is available on ``fd`` and return its token.

    Raises :class:`TerminalSurfaceError` when the input stream is closed.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        ch = os.read(fd, 1)
        if not ch:
            raise TerminalSurfaceError("terminal input closed")

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch == b"\x1b":
        return _read_escape_sequence(fd)
    return _decode_char(fd, ch)
