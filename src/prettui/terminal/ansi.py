"""ANSI terminal backend: raw-mode key reading and relative cursor addressing."""

from __future__ import annotations

import codecs
import logging
import os
import sys
from typing import Callable, Optional, TextIO

from ..errors import IoFailureError, TerminalUnavailableError
from ..models import Key, KeyEvent
from ..utils.colors import Color, Style, fg_code

logger = logging.getLogger(__name__)

ESC = "\x1b"
SAVE_CURSOR = ESC + "7"
RESTORE_CURSOR = ESC + "8"
HIDE_CURSOR = ESC + "[?25l"
SHOW_CURSOR = ESC + "[?25h"

# Seconds to wait for the rest of an escape sequence before treating ESC as a key.
ESCAPE_TIMEOUT = 0.05

# Sequences that follow ESC on POSIX terminals.
_ESCAPE_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
    "[5~": Key.PAGE_UP,
    "[6~": Key.PAGE_DOWN,
}

# Second character after the "\xe0" / "\x00" prefix from msvcrt.getwch().
_WINDOWS_SCANCODES = {
    "H": Key.UP,
    "P": Key.DOWN,
    "K": Key.LEFT,
    "M": Key.RIGHT,
    "I": Key.PAGE_UP,
    "Q": Key.PAGE_DOWN,
}


def decode_escape(seq: str) -> KeyEvent:
    """Decode what followed an ESC byte. An empty tail is a bare Escape press."""
    if not seq:
        return KeyEvent(Key.ESCAPE)
    return KeyEvent(_ESCAPE_SEQUENCES.get(seq, Key.OTHER))


def decode_char(ch: str) -> KeyEvent:
    """Decode a single non-escape character."""
    if ch == "\x03":  # CTRL+C
        raise KeyboardInterrupt
    if ch in ("\r", "\n"):
        return KeyEvent(Key.ENTER)
    if ch in ("\x7f", "\x08"):
        return KeyEvent(Key.BACKSPACE)
    if ch.isprintable():
        return KeyEvent.of_char(ch)
    return KeyEvent(Key.OTHER)


def _sequence_complete(seq: str) -> bool:
    """True once seq holds a whole CSI ("[...final") or SS3 ("O" + char) tail."""
    if not seq:
        return False
    if seq[0] == "O":
        return len(seq) >= 2
    if seq[0] == "[":
        return len(seq) >= 2 and "@" <= seq[-1] <= "~"
    return True


class AnsiTerminal:
    """
    Drives a VT100-compatible terminal.

    All drawing is relative to an anchor saved by reserve_rows(), so the widget
    renders inline below whatever was printed before it.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._saved_attrs = None
        self._fd: Optional[int] = None
        self._active = False
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._read_char: Callable[[Optional[float]], Optional[str]] = self._read_char_posix

    # ---------- mode ----------
    def enter_interactive_mode(self) -> None:
        if self._active:
            raise TerminalUnavailableError("terminal is already in interactive mode")
        try:
            if not (self.stdin.isatty() and self.stdout.isatty()):
                raise TerminalUnavailableError("stdin/stdout is not a terminal")
        except ValueError as e:  # closed stream
            raise TerminalUnavailableError(str(e)) from e

        if os.name != "nt":
            import termios
            import tty

            try:
                self._fd = self.stdin.fileno()
                self._saved_attrs = termios.tcgetattr(self._fd)
                tty.setraw(self._fd)
            except (termios.error, OSError, ValueError) as e:
                self._saved_attrs = None
                raise TerminalUnavailableError(f"cannot enter raw mode: {e}") from e
        else:
            try:
                import msvcrt  # noqa: F401
            except ImportError as e:
                raise TerminalUnavailableError("msvcrt unavailable") from e
            self._read_char = self._read_char_windows

        self._active = True
        logger.debug("entered interactive mode (fd=%s)", self._fd)
        self._write(HIDE_CURSOR)

    def leave_interactive_mode(self) -> None:
        """Restore the saved tty attributes. Safe to call when not in interactive mode."""
        if not self._active and self._saved_attrs is None:
            return
        try:
            self._write(RESTORE_CURSOR + SHOW_CURSOR + Style.RESET_ALL)
            self.flush()
        finally:
            if self._saved_attrs is not None:
                import termios

                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None
            self._active = False
            logger.debug("left interactive mode")

    def reserve_rows(self, count: int) -> None:
        """Make sure count rows are free below the cursor and anchor the widget there."""
        # Newlines scroll the screen when the cursor is near the bottom.
        down = max(0, count - 1)
        seq = "\r"
        if down:
            seq += "\n" * down + f"{ESC}[{down}A"
        self._write(seq + SAVE_CURSOR)
        self.flush()
        logger.debug("reserved %d rows", count)

    # ---------- output ----------
    def _write(self, text: str) -> None:
        try:
            self.stdout.write(text)
        except (OSError, ValueError) as e:
            raise IoFailureError(f"write failed: {e}") from e

    def flush(self) -> None:
        try:
            self.stdout.flush()
        except (OSError, ValueError) as e:
            raise IoFailureError(f"flush failed: {e}") from e

    def _move(self, x: int, y: int) -> str:
        seq = RESTORE_CURSOR
        if y > 0:
            seq += f"{ESC}[{y}B"
        if x > 0:
            seq += f"{ESC}[{x}C"
        return seq

    def write_colored(self, x: int, y: int, text: str, color: Color) -> None:
        self._write(self._move(x, y) + fg_code(color) + text + Style.RESET_ALL)

    def clear_region(self, x: int, y: int, w: int, h: int) -> None:
        blank = " " * w
        self._write("".join(self._move(x, y + row) + blank for row in range(h)))

    # ---------- input ----------
    def read_key(self) -> KeyEvent:
        ch = self._read_char(None)
        if ch is None:
            raise IoFailureError("stdin closed")
        if ch == ESC:
            if os.name == "nt":
                return KeyEvent(Key.ESCAPE)
            seq = ""
            while not _sequence_complete(seq):
                nxt = self._read_char(ESCAPE_TIMEOUT)
                if nxt is None:
                    break
                seq += nxt
            return decode_escape(seq)
        if os.name == "nt" and ch in ("\xe0", "\x00"):
            code = self._read_char(None)
            return KeyEvent(_WINDOWS_SCANCODES.get(code or "", Key.OTHER))
        return decode_char(ch)

    def _read_char_posix(self, timeout: Optional[float]) -> Optional[str]:
        """Read one character, or None on EOF / timeout."""
        import select

        try:
            while True:
                if timeout is not None:
                    ready, _, _ = select.select([self._fd], [], [], timeout)
                    if not ready:
                        return None
                data = os.read(self._fd, 1)
                if not data:
                    return None
                ch = self._decoder.decode(data)
                if ch:
                    return ch
        except OSError as e:
            raise IoFailureError(f"key read failed: {e}") from e

    def _read_char_windows(self, timeout: Optional[float]) -> Optional[str]:
        import msvcrt  # type: ignore

        try:
            return msvcrt.getwch()  # type: ignore[attr-defined]
        except OSError as e:
            raise IoFailureError(f"key read failed: {e}") from e
