"""Gregorian calendar rules used by month arithmetic."""

# Months with 30 days; every other month except February has 31
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the Gregorian calendar."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if not (1 <= month <= 12):
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def clamp_day(day: int, year: int, month: int) -> int:
    """Map the day-of-month ``day`` onto the last valid day of the target month.

    Days up to 28 exist in every month and pass through. Later days are
    pulled back to the end of a shorter target month, so the mapping is
    lossy: Aug 31 -> Feb 29 -> Aug 29.
    """
    if not (1 <= day <= 31):
        raise ValueError(f"day must be 1-31, got {day}")
    if day <= 28:
        return day
    return min(day, days_in_month(year, month))


def month_index(year: int, month: int) -> int:
    """Return the absolute month count ``year * 12 + month``."""
    return year * 12 + month


def from_month_index(index: int) -> tuple[int, int]:
    """Inverse of :func:`month_index`, with months numbered 1-12."""
    year, month = divmod(index, 12)
    if month == 0:
        # A remainder of 0 is December of the previous year
        return year - 1, 12
    return year, month
