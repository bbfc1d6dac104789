"""Styled line input and word wrapping."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from ..models import InputConfig
from ..utils.colors import Style, fg_code, paint


def _prompt_prefix(cfg: InputConfig) -> str:
    """Indent plus colored prefix, shared by every prompt."""
    out = " " * cfg.indent_level
    if cfg.prefix:
        out += paint(cfg.prefix, cfg.prefix_color)
    return out


def read_input(cfg: InputConfig, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """
    Read one line using the configured prompt styling.
    Raises EOFError if the stream is exhausted before a line arrives.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(_prompt_prefix(cfg) + paint(cfg.prompt, cfg.prompt_color))
    # Typed text is echoed in input_text_color.
    stdout.write(fg_code(cfg.input_text_color))
    stdout.flush()
    try:
        line = stdin.readline()
    finally:
        stdout.write(Style.RESET_ALL)
        stdout.flush()
    if not line:
        raise EOFError("EOF while reading input")
    return line.rstrip("\n").rstrip("\r")


def read_multiline_input(
    cfg: InputConfig,
    terminator: str = ".",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """Read lines until one equals terminator (or EOF). The prompt is shown once."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    header = f"{cfg.prompt} (end with '{terminator}' on new line)"
    stdout.write(_prompt_prefix(cfg) + paint(header, cfg.prompt_color) + "\n")
    stdout.flush()

    lines: List[str] = []
    for raw in stdin:
        text = raw.rstrip("\n").rstrip("\r")
        if text.strip() == terminator:
            break
        lines.append(text)
    return "\n".join(lines)


def wrap_text(text: str, max_width: int) -> List[str]:
    """Greedy word wrap; a single word longer than max_width gets its own line."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > max_width:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines
