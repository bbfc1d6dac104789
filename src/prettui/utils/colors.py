"""Color utilities: the named color vocabulary and its terminal codes."""

from __future__ import annotations

import re
from enum import Enum

import colorama
from colorama import Fore, Style

colorama.just_fix_windows_console()


class Color(Enum):
    """Named foreground colors understood by every terminal backend."""
    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    GREY = "grey"
    WHITE = "white"

    @classmethod
    def parse(cls, name: str) -> "Color":
        """Look up a color by name: 'dark-grey', 'DarkGrey' and 'dark_grey' all work."""
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name.strip()).replace("-", "_")
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown color: {name!r}") from None


# "DARK_" names are the standard ANSI colors, plain names the bright ones.
_FG_CODES = {
    Color.RESET: Fore.RESET,
    Color.BLACK: Fore.BLACK,
    Color.DARK_GREY: Fore.LIGHTBLACK_EX,
    Color.RED: Fore.LIGHTRED_EX,
    Color.DARK_RED: Fore.RED,
    Color.GREEN: Fore.LIGHTGREEN_EX,
    Color.DARK_GREEN: Fore.GREEN,
    Color.YELLOW: Fore.LIGHTYELLOW_EX,
    Color.DARK_YELLOW: Fore.YELLOW,
    Color.BLUE: Fore.LIGHTBLUE_EX,
    Color.DARK_BLUE: Fore.BLUE,
    Color.MAGENTA: Fore.LIGHTMAGENTA_EX,
    Color.DARK_MAGENTA: Fore.MAGENTA,
    Color.CYAN: Fore.LIGHTCYAN_EX,
    Color.DARK_CYAN: Fore.CYAN,
    Color.GREY: Fore.WHITE,
    Color.WHITE: Fore.LIGHTWHITE_EX,
}


def fg_code(color: Color) -> str:
    """Return the escape sequence that switches the foreground to color."""
    return _FG_CODES[color]


def paint(text: str, color: Color) -> str:
    """Wrap text in color, resetting all attributes afterwards."""
    return fg_code(color) + text + Style.RESET_ALL


__all__ = ["Color", "Fore", "Style", "fg_code", "paint"]
