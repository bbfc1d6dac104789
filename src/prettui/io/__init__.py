"""Styled console input/output helpers."""

from .input import read_input, read_multiline_input, wrap_text
from .output import write_output
from .prompt import confirm, read_matching, read_number

__all__ = [
    "confirm",
    "read_input",
    "read_matching",
    "read_multiline_input",
    "read_number",
    "wrap_text",
    "write_output",
]
