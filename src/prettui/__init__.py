"""
prettui - pretty terminal UI helpers

A paginated, keyboard-driven list chooser plus a few styled input/output
helpers for command-line tools.
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    EmptyListError,
    IoFailureError,
    PrettuiError,
    PromptError,
    TerminalError,
    TerminalUnavailableError,
)
from .io import confirm, read_input, read_matching, read_multiline_input, read_number, write_output
from .models import ConfirmConfig, InputConfig, ListConfig, NumberConfig, OutputConfig, RegexConfig
from .ui import choose_from_list
from .utils.colors import Color

__all__ = [
    "Color",
    "ConfigError",
    "ConfirmConfig",
    "EmptyListError",
    "InputConfig",
    "IoFailureError",
    "ListConfig",
    "NumberConfig",
    "OutputConfig",
    "PrettuiError",
    "PromptError",
    "RegexConfig",
    "TerminalError",
    "TerminalUnavailableError",
    "choose_from_list",
    "confirm",
    "read_input",
    "read_matching",
    "read_multiline_input",
    "read_number",
    "write_output",
]
