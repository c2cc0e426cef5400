"""Tests for duration builders."""

import pytest

from reltime import Duration, Kind, days, hours, minutes, months, seconds, weeks, years


@pytest.mark.parametrize("n", [0, 1, 7, 25, 1000])
def test_linear_units_normalize_to_seconds(n):
    """Test that sub-month units are sums of seconds."""
    assert seconds(n) == Duration(kind=Kind.SECONDS, amount=n)
    assert minutes(n) == seconds(n * 60)
    assert hours(n) == seconds(n * 3600)
    assert days(n) == seconds(n * 86400)
    assert weeks(n) == seconds(n * 604800)


@pytest.mark.parametrize("n", [0, 1, 3, 40])
def test_calendar_units_normalize_to_months(n):
    """Test that months and years share the months kind."""
    assert months(n) == Duration(kind=Kind.MONTHS, amount=n)
    assert years(n) == months(n * 12)


def test_durations_are_immutable():
    """Test that a built duration cannot be changed in place."""
    d = minutes(5)
    with pytest.raises(AttributeError):
        d.amount = 10  # type: ignore[misc]


def test_negative_amount_is_rejected():
    """Test that negative magnitudes fail fast."""
    with pytest.raises(ValueError, match="non-negative"):
        minutes(-10)

    with pytest.raises(ValueError, match="must be >= 0"):
        Duration(kind=Kind.MONTHS, amount=-1)


def test_non_integer_amount_is_rejected():
    """Test that floats, strings and bools are not accepted."""
    with pytest.raises(TypeError, match="non-negative int"):
        hours(1.5)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="non-negative int"):
        days("3")  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="non-negative int"):
        years(True)


def test_same_kind_durations_add():
    """Test that durations of one kind combine into a single duration."""
    assert hours(1) + minutes(30) == seconds(5400)
    assert years(1) + months(6) == months(18)


def test_mixed_kind_durations_do_not_add():
    """Test that months and seconds cannot be combined."""
    with pytest.raises(TypeError, match="do not commute"):
        months(1) + days(3)

    with pytest.raises(TypeError):
        hours(1) + 5  # type: ignore[operator]


def test_duration_str():
    """Test the human-friendly string form."""
    assert str(hours(1) + minutes(30)) == "Duration(5400s)"
    assert str(years(1) + months(6)) == "Duration(18mo)"
