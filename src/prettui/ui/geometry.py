"""Page/grid geometry for the list chooser.

Items are laid out row-major, page after page:

    page   = index // page_size
    row    = (index % page_size) // items_per_row
    column = (index % page_size) %  items_per_row

Everything here is pure arithmetic so it can be tested without a terminal.
"""

from __future__ import annotations

from typing import NamedTuple


class GridPosition(NamedTuple):
    page: int
    row: int
    col: int


def page_size(items_per_row: int, rows_per_page: int) -> int:
    return items_per_row * rows_per_page


def page_count(total: int, items_per_row: int, rows_per_page: int) -> int:
    """Number of pages needed for total items (0 for an empty list)."""
    size = page_size(items_per_row, rows_per_page)
    return -(-total // size)


def page_of(index: int, items_per_row: int, rows_per_page: int) -> int:
    return index // page_size(items_per_row, rows_per_page)


def page_start(page: int, items_per_row: int, rows_per_page: int) -> int:
    return page * page_size(items_per_row, rows_per_page)


def position_of(index: int, items_per_row: int, rows_per_page: int) -> GridPosition:
    """Map a flat index to its (page, row, column) cell."""
    size = page_size(items_per_row, rows_per_page)
    page, within = divmod(index, size)
    row, col = divmod(within, items_per_row)
    return GridPosition(page, row, col)


def cell_index(pos: GridPosition, items_per_row: int, rows_per_page: int) -> int:
    """Flat index of a cell, unclamped. May point past the end of the list."""
    return page_start(pos.page, items_per_row, rows_per_page) + pos.row * items_per_row + pos.col


def index_at(pos: GridPosition, items_per_row: int, rows_per_page: int, total: int) -> int:
    """Flat index of a cell clamped to [0, total)."""
    if total <= 0:
        raise ValueError("index_at needs a non-empty list")
    return max(0, min(total - 1, cell_index(pos, items_per_row, rows_per_page)))


def in_range(index: int, total: int) -> bool:
    return 0 <= index < total
