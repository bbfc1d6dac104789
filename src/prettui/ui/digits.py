"""Numeric input buffer: typed digits that jump straight to an item."""

from __future__ import annotations

from typing import Optional


class DigitBuffer:
    """
    Digits typed so far, read as a 1-based item number.

    The buffer never holds a number larger than the list: a digit that would
    overflow starts a new number instead, and a lone digit that already
    overflows (e.g. "7" on a 5-item list) leaves the buffer empty.
    """

    def __init__(self, total: int):
        self.total = total
        self.digits: str = ""

    def __bool__(self) -> bool:
        return bool(self.digits)

    def __str__(self) -> str:
        return self.digits

    def __repr__(self) -> str:
        return f"DigitBuffer({self.digits!r}, total={self.total})"

    @property
    def value(self) -> Optional[int]:
        return int(self.digits) if self.digits else None

    def push(self, digit: str) -> None:
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Not a decimal digit: {digit!r}")
        candidate = self.digits + digit
        # Leading zeros count toward the width, so "000" cannot grow forever.
        if len(candidate) <= len(str(self.total)) and int(candidate) <= self.total:
            self.digits = candidate
        elif int(digit) <= self.total:
            self.digits = digit
        else:
            self.digits = ""

    def backspace(self) -> None:
        self.digits = self.digits[:-1]

    def clear(self) -> None:
        self.digits = ""

    def target_index(self) -> Optional[int]:
        """0-based index the buffer names, or None if it names no item ("", "0", "00")."""
        n = self.value
        if n is None or not 1 <= n <= self.total:
            return None
        return n - 1
