"""Tests for choose_from_list driven through a scripted terminal."""

import io

import pytest

from prettui.errors import EmptyListError, IoFailureError, TerminalUnavailableError
from prettui.models import Key, ListConfig
from prettui.ui import choose_by_number, choose_from_list
from prettui.utils.colors import Color

CFG = ListConfig(items_per_row=3, rows_per_page=2, cell_width=12)


def test_confirm_returns_index_and_restores_terminal(make_terminal, labels):
    term = make_terminal([Key.DOWN, Key.RIGHT, Key.ENTER])
    assert choose_from_list(labels(14), CFG, terminal=term) == 4
    assert term.entered == 1
    assert term.left == 1
    assert not term.interactive
    assert term.reserved == [CFG.rows_per_page + 1]


def test_cancel_returns_none_and_restores_terminal(make_terminal, labels):
    term = make_terminal(["4", Key.ESCAPE])
    assert choose_from_list(labels(14), CFG, terminal=term) is None
    assert term.left == 1


def test_numeric_entry_on_25_items(make_terminal, labels):
    term = make_terminal(["1", "2", Key.ENTER])
    assert choose_from_list(labels(25), ListConfig(), terminal=term) == 11


def test_empty_list_never_touches_terminal(make_terminal):
    term = make_terminal([Key.ENTER])
    with pytest.raises(EmptyListError):
        choose_from_list([], CFG, terminal=term)
    assert term.entered == 0
    assert term.left == 0


def test_read_failure_propagates_and_restores_terminal(make_terminal, labels):
    term = make_terminal([Key.DOWN, IoFailureError("boom")])
    with pytest.raises(IoFailureError):
        choose_from_list(labels(14), CFG, terminal=term)
    assert term.left == 1
    assert not term.interactive


def test_keyboard_interrupt_restores_terminal(make_terminal, labels):
    term = make_terminal([KeyboardInterrupt()])
    with pytest.raises(KeyboardInterrupt):
        choose_from_list(labels(3), CFG, terminal=term)
    assert term.left == 1


def test_enter_failure_still_attempts_restore(make_terminal, labels):
    term = make_terminal([Key.ENTER], fail_on_enter=TerminalUnavailableError("no tty"))
    with pytest.raises(TerminalUnavailableError):
        choose_from_list(labels(3), CFG, terminal=term)
    assert term.left == 1
    assert term.reads == 0


def test_every_read_follows_a_redraw(make_terminal, labels):
    term = make_terminal([Key.DOWN, "1", Key.BACKSPACE, Key.PAGE_DOWN, Key.ENTER])
    choose_from_list(labels(14), CFG, terminal=term)
    seen = term.flushes_at_read
    assert seen[0] >= 1
    assert all(later > earlier for earlier, later in zip(seen, seen[1:]))


def test_region_is_erased_after_confirm(make_terminal, labels):
    term = make_terminal([Key.ENTER])
    choose_from_list(labels(14), CFG, terminal=term)
    assert term.screen == {}


def test_highlight_follows_selection(make_terminal, labels):
    term = make_terminal([Key.RIGHT, KeyboardInterrupt()])
    cfg = CFG.with_normal_fg(Color.DARK_GREY).with_highlight_fg(Color.GREEN)
    with pytest.raises(KeyboardInterrupt):
        choose_from_list(labels(14), cfg, terminal=term)
    # interrupted before erasing: the last frame is still on the fake screen
    assert term.color_at(0, 0) == Color.DARK_GREY
    assert term.color_at(12, 0) == Color.GREEN
    assert term.line(0, 36) == " 1. Item 1   2. Item 2   3. Item 3"


def test_default_config_is_used(make_terminal, labels):
    term = make_terminal([Key.DOWN, Key.ENTER])
    assert choose_from_list(labels(10), terminal=term) == 3
    assert term.reserved == [6]


def test_choose_by_number():
    out = io.StringIO()
    assert choose_by_number(["a", "b", "c"], stdin=io.StringIO("2\n"), stdout=out) == 1
    assert "1. a\n2. b\n3. c\n" in out.getvalue()


@pytest.mark.parametrize("reply", ["", "\n", "x\n", "9\n", "0\n"])
def test_choose_by_number_cancels(reply):
    assert choose_by_number(["a", "b"], stdin=io.StringIO(reply), stdout=io.StringIO()) is None
