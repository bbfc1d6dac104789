"""Interactive selector widget for choosing from lists."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, TextIO

from ..errors import EmptyListError
from ..models import ListConfig, items_from, outcome_index
from ..terminal.base import Terminal
from .chooser import ListChooser
from .renderer import ListRenderer


@contextmanager
def interactive_session(terminal: Terminal, config: ListConfig) -> Iterator[Terminal]:
    """
    Hold the terminal in interactive mode for the body of the with-block.

    The terminal is handed back on every way out: confirm, cancel, an I/O
    error, or CTRL+C. Restoration is attempted even if entering failed halfway.
    """
    try:
        terminal.enter_interactive_mode()
        terminal.reserve_rows(config.region_height)
        yield terminal
    finally:
        terminal.leave_interactive_mode()


def choose_from_list(
    items: Sequence[object],
    config: Optional[ListConfig] = None,
    terminal: Optional[Terminal] = None,
) -> Optional[int]:
    """
    Show items as a paginated grid and let the user pick one.

      - ←/→/↑/↓ move within the grid, PgUp/PgDn jump a page
      - typing digits jumps to that 1-based item number on Enter
      - Enter confirms, Esc cancels

    Returns the chosen index into items, or None if cancelled. Raises
    EmptyListError for an empty list (before touching the terminal) and
    TerminalError subclasses when the terminal cannot be driven.
    """
    entries = items_from(items)
    if not entries:
        raise EmptyListError()
    config = (config or ListConfig()).validate()
    chooser = ListChooser(len(entries), config)

    if terminal is None:
        from ..terminal.ansi import AnsiTerminal

        terminal = AnsiTerminal()

    with interactive_session(terminal, config) as term:
        renderer = ListRenderer(term, entries, config)
        renderer.draw(chooser.state)
        outcome = None
        while outcome is None:
            outcome = chooser.handle(term.read_key())
            if outcome is None:
                renderer.draw(chooser.state)
        renderer.erase()

    return outcome_index(outcome)


def choose_by_number(
    items: Sequence[object],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[int]:
    """
    Non-interactive fallback: print a numbered list and read a number.
    Empty input, EOF, or an out-of-range number cancel.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    entries = items_from(items)
    if not entries:
        raise EmptyListError()

    for item in entries:
        stdout.write(f"{item.number}. {item.label}\n")
    stdout.write("Select by number (Enter to cancel): ")
    stdout.flush()

    line = stdin.readline()
    if not line:
        stdout.write("\n")
        return None
    sel = line.strip()
    if not sel:
        return None
    if not sel.isdigit():
        stdout.write("Invalid selection.\n")
        return None
    n = int(sel)
    return n - 1 if 1 <= n <= len(entries) else None
