"""Configuration models for the list widget and the styled I/O helpers."""

from dataclasses import dataclass, replace
from typing import Optional

from ..errors import ConfigError
from ..utils.colors import Color


@dataclass(frozen=True)
class ListConfig:
    """Layout and colors for one list chooser invocation."""
    items_per_row: int = 3
    rows_per_page: int = 5
    cell_width: int = 20
    normal_fg: Color = Color.WHITE
    highlight_fg: Color = Color.YELLOW
    status_fg: Color = Color.WHITE

    @property
    def page_size(self) -> int:
        return self.items_per_row * self.rows_per_page

    @property
    def grid_width(self) -> int:
        return self.items_per_row * self.cell_width

    @property
    def region_height(self) -> int:
        """Grid rows plus the status line."""
        return self.rows_per_page + 1

    def validate(self) -> "ListConfig":
        """Raise ConfigError if the grid cannot be laid out."""
        for name in ("items_per_row", "rows_per_page", "cell_width"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        return self

    def with_items_per_row(self, val: int) -> "ListConfig":
        return replace(self, items_per_row=val)

    def with_rows_per_page(self, val: int) -> "ListConfig":
        return replace(self, rows_per_page=val)

    def with_cell_width(self, val: int) -> "ListConfig":
        return replace(self, cell_width=val)

    def with_normal_fg(self, color: Color) -> "ListConfig":
        return replace(self, normal_fg=color)

    def with_highlight_fg(self, color: Color) -> "ListConfig":
        return replace(self, highlight_fg=color)


@dataclass
class InputConfig:
    """Appearance of a styled input prompt."""
    prefix: str = ""
    prompt: str = ">> "
    prefix_color: Color = Color.BLUE
    prompt_color: Color = Color.WHITE
    input_text_color: Color = Color.WHITE
    max_chars_per_line: int = 80
    indent_level: int = 0


@dataclass
class OutputConfig:
    """Appearance of styled, wrapped output lines."""
    prefix: str = ""
    prefix_color: Color = Color.GREEN
    text_color: Color = Color.WHITE
    log_level: Optional[str] = None
    indent_level: int = 0
    max_chars_per_line: int = 80


@dataclass
class ConfirmConfig:
    """Yes/no prompt behavior. default=None means an answer is required."""
    default: Optional[bool] = None
    case_sensitive: bool = False


@dataclass
class RegexConfig:
    error_message: Optional[str] = None
    max_attempts: Optional[int] = 3  # None = unlimited
    show_pattern: bool = False


@dataclass
class NumberConfig:
    min: Optional[int] = None
    max: Optional[int] = None
    error_message: Optional[str] = None
    max_attempts: Optional[int] = 3  # None = unlimited
