"""Styled, wrapped console output."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..models import OutputConfig
from ..utils.colors import paint
from .input import wrap_text


def write_output(cfg: OutputConfig, message: str, stream: Optional[TextIO] = None) -> None:
    """
    Print message wrapped at cfg.max_chars_per_line. Each line gets the
    indent, the prefix and the optional [LEVEL] tag (both in prefix_color),
    then the text in text_color.
    """
    stream = stream or sys.stdout
    head = " " * cfg.indent_level
    if cfg.prefix:
        head += paint(cfg.prefix, cfg.prefix_color)
    if cfg.log_level:
        head += paint(f"[{cfg.log_level}] ", cfg.prefix_color)

    for line in wrap_text(message, cfg.max_chars_per_line):
        stream.write(head + paint(line, cfg.text_color) + "\n")
    stream.flush()
