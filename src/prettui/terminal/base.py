"""The terminal capability the list chooser draws through."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import KeyEvent
from ..utils.colors import Color


@runtime_checkable
class Terminal(Protocol):
    """
    Coordinates are relative to the widget's top-left cell, which is fixed
    by reserve_rows(). x is the column, y the row.
    """

    def enter_interactive_mode(self) -> None: ...

    def leave_interactive_mode(self) -> None: ...

    def reserve_rows(self, count: int) -> None: ...

    def read_key(self) -> KeyEvent: ...

    def write_colored(self, x: int, y: int, text: str, color: Color) -> None: ...

    def clear_region(self, x: int, y: int, w: int, h: int) -> None: ...

    def flush(self) -> None: ...
