"""List chooser widget."""

from .chooser import ChooserState, ListChooser
from .renderer import ListRenderer
from .selector import choose_by_number, choose_from_list, interactive_session

__all__ = [
    "ChooserState",
    "ListChooser",
    "ListRenderer",
    "choose_by_number",
    "choose_from_list",
    "interactive_session",
]
