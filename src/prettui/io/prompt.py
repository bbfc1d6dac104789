"""Interactive prompts: yes/no confirmation, regex-validated text, bounded numbers."""

from __future__ import annotations

import re
import sys
from typing import Optional, Pattern, TextIO, Union

from ..errors import PromptError
from ..models import ConfirmConfig, InputConfig, NumberConfig, RegexConfig
from ..utils.colors import paint


def _ask(text: str, cfg: InputConfig, stdin: TextIO, stdout: TextIO) -> str:
    """Print a styled prompt and return the stripped reply. EOF raises EOFError."""
    prompt = " " * cfg.indent_level + cfg.prefix + text
    stdout.write(paint(prompt, cfg.prompt_color))
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("EOF while reading input")
    return line.strip()


def _print_error(message: str, cfg: InputConfig, stderr: TextIO) -> None:
    stderr.write(paint(f"Error: {message}", cfg.input_text_color) + "\n")
    stderr.flush()


def confirm(
    message: str,
    cfg: Optional[ConfirmConfig] = None,
    input_cfg: Optional[InputConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> bool:
    """Ask a yes/no question until answered. Empty input takes cfg.default if set."""
    cfg = cfg or ConfirmConfig()
    input_cfg = input_cfg or InputConfig()
    stdin, stdout, stderr = stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr

    indicator = {True: "[Y/n]", False: "[y/N]", None: "[y/n]"}[cfg.default]
    while True:
        reply = _ask(f"{message} {indicator}: ", input_cfg, stdin, stdout)
        if not reply and cfg.default is not None:
            return cfg.default
        val = reply if cfg.case_sensitive else reply.lower()
        if val in ("y", "yes"):
            return True
        if val in ("n", "no"):
            return False
        _print_error("Please enter 'y' or 'n'", input_cfg, stderr)


def read_matching(
    message: str,
    pattern: Union[str, Pattern[str]],
    cfg: Optional[RegexConfig] = None,
    input_cfg: Optional[InputConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> str:
    """Read a line containing a match for pattern. Raises PromptError after cfg.max_attempts misses."""
    cfg = cfg or RegexConfig()
    input_cfg = input_cfg or InputConfig()
    stdin, stdout, stderr = stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    hint = f" (pattern: {regex.pattern})" if cfg.show_pattern else ""
    attempts = 0
    while True:
        reply = _ask(f"{message}{hint}: ", input_cfg, stdin, stdout)
        if regex.search(reply):
            return reply
        attempts += 1
        if cfg.max_attempts is not None and attempts >= cfg.max_attempts:
            raise PromptError(cfg.error_message or "Invalid input")
        _print_error(cfg.error_message or "Input does not match pattern", input_cfg, stderr)


def _range_hint(lo: Optional[int], hi: Optional[int]) -> str:
    if lo is not None and hi is not None:
        return f" ({lo}-{hi})"
    if lo is not None:
        return f" (>= {lo})"
    if hi is not None:
        return f" (<= {hi})"
    return ""


def read_number(
    message: str,
    cfg: Optional[NumberConfig] = None,
    input_cfg: Optional[InputConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Read an integer within [cfg.min, cfg.max]. Raises PromptError after cfg.max_attempts misses."""
    cfg = cfg or NumberConfig()
    input_cfg = input_cfg or InputConfig()
    stdin, stdout, stderr = stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr

    hint = _range_hint(cfg.min, cfg.max)
    attempts = 0
    while True:
        reply = _ask(f"{message}{hint}: ", input_cfg, stdin, stdout)
        try:
            num = int(reply)
        except ValueError:
            num = None
        if num is not None and (cfg.min is None or num >= cfg.min) and (cfg.max is None or num <= cfg.max):
            return num
        attempts += 1
        if cfg.max_attempts is not None and attempts >= cfg.max_attempts:
            raise PromptError(cfg.error_message or "Invalid number input")
        _print_error(cfg.error_message or "Invalid number", input_cfg, stderr)
