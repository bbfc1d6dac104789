"""Tests for the numeric input buffer."""

import pytest

from prettui.ui.digits import DigitBuffer


def type_digits(buf, digits):
    for d in digits:
        buf.push(d)
    return buf


def test_accumulates_in_range_digits():
    buf = type_digits(DigitBuffer(25), "12")
    assert str(buf) == "12"
    assert buf.target_index() == 11


def test_overflow_restarts_with_latest_digit():
    buf = type_digits(DigitBuffer(25), "3")
    buf.push("7")  # 37 > 25
    assert str(buf) == "7"


def test_leading_zero_then_overflow():
    buf = type_digits(DigitBuffer(5), "09")
    # "0" is kept as a prefix, "09" overflows, "9" alone overflows too
    assert str(buf) == ""
    assert not buf


def test_leading_zero_kept_as_prefix():
    buf = type_digits(DigitBuffer(25), "05")
    assert str(buf) == "05"
    assert buf.target_index() == 4


def test_lone_overflowing_digit_leaves_buffer_empty():
    buf = type_digits(DigitBuffer(5), "7")
    assert not buf
    assert buf.target_index() is None


def test_zero_names_no_item():
    buf = type_digits(DigitBuffer(5), "0")
    assert buf
    assert buf.target_index() is None


def test_backspace():
    buf = type_digits(DigitBuffer(200), "123")
    buf.backspace()
    assert str(buf) == "12"
    buf.backspace()
    buf.backspace()
    assert not buf
    buf.backspace()  # no-op on empty
    assert str(buf) == ""


def test_push_rejects_non_digits():
    with pytest.raises(ValueError):
        DigitBuffer(5).push("a")


def test_leading_zeros_are_capped_at_the_width_of_total():
    buf = type_digits(DigitBuffer(25), "0000000")
    assert len(str(buf)) <= 2
    assert str(buf) == "0"


def test_zero_run_on_single_digit_list():
    buf = type_digits(DigitBuffer(5), "000")
    assert str(buf) == "0"
    buf.push("4")
    assert str(buf) == "4"
