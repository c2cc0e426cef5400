from .builders import days, hours, minutes, months, seconds, weeks, years
from .clock import Clock, FixedClock, SystemClock, get_default_clock, set_default_clock
from .core import Adjustment, Direction, adjust, after, ago, before, from_, from_now
from .duration import Duration, Kind
from .gregorian import clamp_day, days_in_month, is_leap_year
from .shortcuts import (
    last_month,
    last_week,
    last_year,
    next_month,
    next_week,
    next_year,
    now,
    today,
    tomorrow,
    yesterday,
)

__all__ = [
    "Duration",
    "Kind",
    "Direction",
    "Adjustment",
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "adjust",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
    "ago",
    "from_now",
    "before",
    "from_",
    "after",
    "is_leap_year",
    "days_in_month",
    "clamp_day",
    "now",
    "today",
    "yesterday",
    "tomorrow",
    "last_week",
    "next_week",
    "last_month",
    "next_month",
    "last_year",
    "next_year",
]
