"""Terminal backends for the list chooser."""

from .ansi import AnsiTerminal
from .base import Terminal

__all__ = ["AnsiTerminal", "Terminal"]
