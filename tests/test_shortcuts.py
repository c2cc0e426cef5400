"""Tests for convenience accessors."""

from datetime import date, datetime, timezone

import pytest

import reltime
from reltime import FixedClock, set_default_clock


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    fixed = FixedClock(utc(2013, 9, 3, 17, 31, 19))
    previous = set_default_clock(fixed)
    yield fixed
    set_default_clock(previous)


def test_now_and_today(clock):
    assert reltime.now() == utc(2013, 9, 3, 17, 31, 19)
    assert reltime.today() == date(2013, 9, 3)


@pytest.mark.parametrize(
    "accessor, expected",
    [
        ("yesterday", utc(2013, 9, 2, 17, 31, 19)),
        ("tomorrow", utc(2013, 9, 4, 17, 31, 19)),
        ("last_week", utc(2013, 8, 27, 17, 31, 19)),
        ("next_week", utc(2013, 9, 10, 17, 31, 19)),
        ("last_month", utc(2013, 8, 3, 17, 31, 19)),
        ("next_month", utc(2013, 10, 3, 17, 31, 19)),
        ("last_year", utc(2012, 9, 3, 17, 31, 19)),
        ("next_year", utc(2014, 9, 3, 17, 31, 19)),
    ],
)
def test_relative_accessors(clock, accessor, expected):
    assert getattr(reltime, accessor)() == expected


def test_accessors_accept_explicit_clock(clock):
    """Test that an explicit clock wins over the default one."""
    other = FixedClock(utc(2016, 3, 31, 9, 0, 0))

    assert reltime.now(clock=other) == utc(2016, 3, 31, 9, 0, 0)
    assert reltime.today(clock=other) == date(2016, 3, 31)
    assert reltime.last_month(clock=other) == utc(2016, 2, 29, 9, 0, 0)
    assert reltime.next_year(clock=other) == utc(2017, 3, 31, 9, 0, 0)


class FalsyClock(FixedClock):
    """Clock whose truth value is False, to check clocks are not tested for truth."""

    def __bool__(self) -> bool:
        return False


def test_explicit_clock_is_used_regardless_of_truthiness(clock):
    other = FalsyClock(utc(2016, 3, 31, 9, 0, 0))

    assert reltime.now(clock=other) == utc(2016, 3, 31, 9, 0, 0)
    assert reltime.today(clock=other) == date(2016, 3, 31)
