"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD slide tiles; a few letters drive the session. Reads
raw bytes via tty/termios on macOS / Linux and msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "i": "image",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string (letters are case-blind)."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def _read_escape(read_more) -> str:
    """Finish an ``ESC [ A`` arrow sequence; a bare Escape means quit."""
    ch2 = read_more()
    if ch2 is None:
        return "quit"
    if ch2 != "[":
        return "quit"
    ch3 = read_more()
    return _ARROW_MAP.get(ch3 or "", "")


def get_key_timeout(timeout: float) -> str | None:
    """Read one keypress, waiting at most *timeout* seconds.

    Returns an action string (``"up"``, ``"quit"``, ``"image"`` ...), the
    raw printable character for unmapped keys, ``""`` for unrecognised
    keys, or ``None`` if nothing was pressed in time.
    """
    if os.name == "nt":
        return _get_key_timeout_windows(timeout)

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_more() -> str | None:
        ready, _, _ = select.select([fd], [], [], 0.1)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b":
            return _read_escape(read_more)
        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _get_key_timeout_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return {"H": "up", "P": "down", "M": "right", "K": "left"}.get(
                    msvcrt.getwch(), ""
                )
            if ch == "\x1b":
                return "quit"
            return _resolve(ch)
        time.sleep(0.02)
    return None


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    while True:
        key = get_key_timeout(3600.0)
        if key is not None:
            return key
