"""Tests for the Duration record and millisecond composition."""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from millisecond import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR, Duration


def test_step_constants():
    """Test the per-step millisecond multipliers."""
    assert SECOND == 1_000
    assert MINUTE == 60_000
    assert HOUR == 3_600_000
    assert DAY == 86_400_000
    assert WEEK == 604_800_000
    assert MONTH == 2_592_000_000
    assert YEAR == 31_557_600_000


def test_items_yield_set_steps_coarsest_first():
    """Test that items() skips unset steps and keeps the fixed order."""
    duration = Duration(second=3, year=1, hour=-2.5)

    assert list(duration.items()) == [("year", 1), ("hour", -2.5), ("second", 3)]


def test_empty_duration_is_zero():
    """Test that a Duration with no steps set composes to zero."""
    assert Duration().to_milliseconds() == 0
    assert list(Duration().items()) == []


def test_to_milliseconds_sums_every_step():
    """Test composition across all eight steps."""
    duration = Duration(
        year=1,
        month=1,
        week=1,
        day=1,
        hour=1,
        minute=1,
        second=1,
        millisecond=1,
    )

    expected = YEAR + MONTH + WEEK + DAY + HOUR + MINUTE + SECOND + 1
    assert duration.to_milliseconds() == expected
    assert isinstance(duration.to_milliseconds(), int)


def test_to_milliseconds_promotes_to_float():
    """Test that one fractional quantity makes the total a float."""
    total = Duration(hour=1, minute=0.5).to_milliseconds()

    assert total == 3_630_000
    assert isinstance(total, float)


def test_zero_quantity_counts_as_set():
    """Test that a zero quantity is still a present step."""
    duration = Duration(hour=0, second=5)

    assert list(duration.items()) == [("hour", 0), ("second", 5)]
    assert duration.to_milliseconds() == 5_000


def test_to_timedelta():
    """Test conversion to a standard timedelta."""
    assert Duration(day=1, hour=1).to_timedelta() == timedelta(days=1, hours=1)
    assert Duration(millisecond=-250).to_timedelta() == timedelta(milliseconds=-250)


def test_duration_is_immutable():
    """Test that a Duration cannot be modified after construction."""
    duration = Duration(hour=1)

    with pytest.raises(FrozenInstanceError):
        duration.hour = 2  # type: ignore[misc]


def test_duration_requires_keywords():
    """Test that steps must be passed by name."""
    with pytest.raises(TypeError):
        Duration(1)  # type: ignore[misc]
