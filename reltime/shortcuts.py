"""Convenience accessors for common relative dates.

Each accessor is a fixed composition of a builder and an end-point, and
accepts an optional ``clock`` like the end-points do.
"""

from datetime import date, datetime

from reltime.builders import days, months, weeks, years
from reltime.clock import Clock, get_default_clock
from reltime.core import ago, from_now


def now(*, clock: Clock | None = None) -> datetime:
    """Answer the current date-time."""
    if clock is None:
        clock = get_default_clock()
    return clock.now()


def today(*, clock: Clock | None = None) -> date:
    """Answer the current date."""
    return now(clock=clock).date()


def yesterday(*, clock: Clock | None = None) -> datetime:
    """Answer yesterday's date-time."""
    return ago(days(1), clock=clock)


def tomorrow(*, clock: Clock | None = None) -> datetime:
    """Answer tomorrow's date-time."""
    return from_now(days(1), clock=clock)


def last_week(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a week ago."""
    return ago(weeks(1), clock=clock)


def next_week(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a week henceforth."""
    return from_now(weeks(1), clock=clock)


def last_month(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a month ago."""
    return ago(months(1), clock=clock)


def next_month(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a month henceforth."""
    return from_now(months(1), clock=clock)


def last_year(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a year ago."""
    return ago(years(1), clock=clock)


def next_year(*, clock: Clock | None = None) -> datetime:
    """Answer the date-time of a year henceforth."""
    return from_now(years(1), clock=clock)
