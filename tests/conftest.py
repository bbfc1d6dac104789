"""Shared fixtures: a scripted, recording stand-in for the terminal."""

from typing import Dict, Iterable, List, Tuple, Union

import pytest

from prettui.models import Key, KeyEvent
from prettui.utils.colors import Color

KeySpec = Union[Key, str, KeyEvent, BaseException]


def to_event(spec):
    if isinstance(spec, KeyEvent):
        return spec
    if isinstance(spec, Key):
        return KeyEvent(spec)
    return KeyEvent.of_char(spec)


class FakeTerminal:
    """
    Plays back a list of keys and keeps a character grid of what was drawn.
    An exception in the key script is raised from read_key().
    """

    def __init__(self, keys: Iterable[KeySpec] = (), fail_on_enter: Exception = None):
        self.keys: List[KeySpec] = list(keys)
        self.fail_on_enter = fail_on_enter
        self.entered = 0
        self.left = 0
        self.interactive = False
        self.reserved: List[int] = []
        self.reads = 0
        self.flushes = 0
        self.screen: Dict[Tuple[int, int], Tuple[str, Color]] = {}
        self.writes: List[Tuple[int, int, str, Color]] = []
        self.clears: List[Tuple[int, int, int, int]] = []
        # Number of flushes seen at each read; proves a redraw happened in between.
        self.flushes_at_read: List[int] = []

    def enter_interactive_mode(self):
        self.entered += 1
        if self.fail_on_enter is not None:
            raise self.fail_on_enter
        self.interactive = True

    def leave_interactive_mode(self):
        self.left += 1
        self.interactive = False

    def reserve_rows(self, count):
        self.reserved.append(count)

    def read_key(self):
        self.reads += 1
        self.flushes_at_read.append(self.flushes)
        if not self.keys:
            raise AssertionError("key script exhausted")
        spec = self.keys.pop(0)
        if isinstance(spec, BaseException):
            raise spec
        return to_event(spec)

    def write_colored(self, x, y, text, color):
        self.writes.append((x, y, text, color))
        for i, ch in enumerate(text):
            self.screen[(x + i, y)] = (ch, color)

    def clear_region(self, x, y, w, h):
        self.clears.append((x, y, w, h))
        for row in range(y, y + h):
            for col in range(x, x + w):
                self.screen.pop((col, row), None)

    def flush(self):
        self.flushes += 1

    # ---------- inspection helpers ----------
    def line(self, y: int, width: int) -> str:
        return "".join(self.screen.get((x, y), (" ", None))[0] for x in range(width)).rstrip()

    def color_at(self, x: int, y: int):
        return self.screen.get((x, y), (" ", None))[1]


@pytest.fixture
def make_terminal():
    def factory(keys=(), **kwargs):
        return FakeTerminal(keys, **kwargs)

    return factory


@pytest.fixture
def labels():
    def factory(n):
        return [f"Item {i}" for i in range(1, n + 1)]

    return factory
