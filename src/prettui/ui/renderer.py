"""Draws the current page of the list and the numeric-entry status line."""

from __future__ import annotations

from typing import List

from ..models import Item, ListConfig
from ..terminal.base import Terminal
from . import geometry
from .chooser import ChooserState

STATUS_LABEL = "Input: "
CARET = "_"


def fit_cell(text: str, width: int) -> str:
    """Clip or pad text to exactly width columns."""
    return text[:width].ljust(width)


def cell_text(item: Item, width: int) -> str:
    """' 7. Item 7' fitted to the cell."""
    return fit_cell(f"{item.number:>2}. {item.label}", width)


def status_text(digits: str) -> str:
    return f"{STATUS_LABEL}{digits}{CARET}" if digits else ""


class ListRenderer:
    """Full redraw of the widget region on each call to draw()."""

    def __init__(self, terminal: Terminal, items: List[Item], config: ListConfig):
        self.term = terminal
        self.items = items
        self.cfg = config

    def erase(self) -> None:
        self.term.clear_region(0, 0, self.cfg.grid_width, self.cfg.region_height)
        self.term.flush()

    def draw(self, state: ChooserState) -> None:
        cfg = self.cfg
        per_row, rows = cfg.items_per_row, cfg.rows_per_page
        total = len(self.items)

        # Pages near the end hold fewer items; wipe everything first.
        self.term.clear_region(0, 0, cfg.grid_width, cfg.region_height)

        page = state.current_page
        for row in range(rows):
            for col in range(per_row):
                idx = geometry.cell_index(geometry.GridPosition(page, row, col), per_row, rows)
                if not geometry.in_range(idx, total):
                    continue
                color = cfg.highlight_fg if idx == state.selected_index else cfg.normal_fg
                self.term.write_colored(col * cfg.cell_width, row, cell_text(self.items[idx], cfg.cell_width), color)

        status = status_text(state.pending_digits)
        if status:
            self.term.write_colored(0, rows, status[: cfg.grid_width], cfg.status_fg)
        self.term.flush()
