"""List chooser state machine: one key event in, next state (or an outcome) out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import EmptyListError
from ..models import Cancelled, Chosen, Key, KeyEvent, ListConfig, Outcome
from . import geometry
from .digits import DigitBuffer


@dataclass
class ChooserState:
    """Browsing state. pending is None unless numeric entry is in progress."""
    total: int
    config: ListConfig
    selected_index: int = 0
    pending: Optional[DigitBuffer] = None

    @property
    def current_page(self) -> int:
        return geometry.page_of(self.selected_index, self.config.items_per_row, self.config.rows_per_page)

    @property
    def pending_digits(self) -> str:
        return str(self.pending) if self.pending else ""


class ListChooser:
    """Owns a ChooserState and applies key events to it until an Outcome is reached."""

    def __init__(self, total: int, config: ListConfig, selected_index: int = 0):
        if total <= 0:
            raise EmptyListError()
        config.validate()
        if not geometry.in_range(selected_index, total):
            raise ValueError(f"selected_index {selected_index} outside [0, {total})")
        self.state = ChooserState(total=total, config=config, selected_index=selected_index)
        self.outcome: Optional[Outcome] = None

    @property
    def done(self) -> bool:
        return self.outcome is not None

    def handle(self, event: KeyEvent) -> Optional[Outcome]:
        """
        Apply one key. Returns the Outcome once the interaction is over.

        Enter on a typed number that names no item ("0", "00") clears the
        buffer and keeps browsing rather than cancelling.
        """
        if self.done:
            raise RuntimeError("chooser already finished")
        s = self.state

        if event.is_digit:
            if s.pending is None:
                s.pending = DigitBuffer(s.total)
            s.pending.push(event.char)
            if not s.pending:
                s.pending = None
            return None

        if s.pending is not None:
            if event.key is Key.BACKSPACE:
                s.pending.backspace()
                if not s.pending:
                    s.pending = None
                return None
            if event.key is Key.ENTER:
                target = s.pending.target_index()
                s.pending = None
                if target is None:
                    return None
                s.selected_index = target
                return self._finish(Chosen(target))
            # Any other key abandons numeric entry, then is handled normally.
            s.pending = None

        if event.key is Key.ENTER:
            return self._finish(Chosen(s.selected_index))
        if event.key is Key.ESCAPE:
            return self._finish(Cancelled())

        self._navigate(event.key)
        return None

    def _navigate(self, key: Key) -> None:
        s = self.state
        per_row = s.config.items_per_row
        last = s.total - 1
        idx = s.selected_index
        col = idx % per_row

        if key is Key.UP:
            idx = max(0, idx - per_row)
        elif key is Key.DOWN:
            idx = min(last, idx + per_row)
        elif key is Key.LEFT:
            if col > 0:
                idx -= 1
        elif key is Key.RIGHT:
            if col < per_row - 1 and idx < last:
                idx += 1
        elif key is Key.PAGE_UP:
            idx = max(0, idx - s.config.page_size)
        elif key is Key.PAGE_DOWN:
            idx = min(last, idx + s.config.page_size)
        # Anything else is ignored.
        s.selected_index = idx

    def _finish(self, outcome: Outcome) -> Outcome:
        self.outcome = outcome
        return outcome
