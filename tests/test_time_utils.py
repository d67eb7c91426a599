"""Tests for minute and slot label formatting."""

import pytest

from soccer_rotation.utils import fmt_slot_heading, format_interval, format_minute


@pytest.mark.parametrize(
    "minute,label",
    [(0, "Q1 - 0:00"), (5, "Q1 - 5:00"), (10, "Q2 - 0:00"), (15, "Q2 - 5:00"),
     (35, "Q4 - 5:00"), (40, "End")],
)
def test_format_minute(minute, label):
    assert format_minute(minute) == label


def test_format_minute_custom_game_length():
    assert format_minute(40, 60) == "Q5 - 0:00"
    assert format_minute(60, 60) == "End"


@pytest.mark.parametrize("minute", [-5, 45])
def test_format_minute_outside_game(minute):
    with pytest.raises(ValueError):
        format_minute(minute)


def test_format_interval():
    assert format_interval(0, 5) == "Q1 - 0:00 - Q1 - 5:00"
    assert format_interval(30, 40) == "Q4 - 0:00 - End"


def test_slot_heading():
    assert fmt_slot_heading(0, 5) == "Quarter 1 (0-5 min)"
    assert fmt_slot_heading(15, 20) == "Quarter 2 (5-10 min)"
    assert fmt_slot_heading(35, 40) == "Quarter 4 (5-10 min)"
