"""Key events consumed by the list chooser."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    CHAR = "char"    # printable character, see KeyEvent.char
    OTHER = "other"  # anything the chooser does not understand


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: Optional[str] = None

    @classmethod
    def of_char(cls, ch: str) -> "KeyEvent":
        return cls(Key.CHAR, ch)

    @property
    def is_digit(self) -> bool:
        return self.key is Key.CHAR and self.char is not None and len(self.char) == 1 and self.char in "0123456789"
