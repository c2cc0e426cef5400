"""Duration builders.

Each builder takes a non-negative integer magnitude and normalizes it to
either seconds or months:

- seconds, minutes, hours, days, weeks --> seconds
- months, years --> months
"""

from reltime.duration import Duration, Kind
from reltime.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR


def _magnitude(n: int, unit: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(
            f"{unit}() expects a non-negative int.\n"
            f"Got {type(n).__name__!r}: {n!r}\n"
            f"Hint: Convert fractional amounts to a smaller unit:\n"
            f"  minutes(90)  # instead of hours(1.5)"
        )
    if n < 0:
        raise ValueError(
            f"{unit}() expects a non-negative int, got {n}.\n"
            f"Hint: Pick the direction with the end-point instead:\n"
            f"  ago({unit}({-n}))  # or before({unit}({-n}), reference)"
        )
    return n


def seconds(n: int) -> Duration:
    """Answer ``n`` seconds."""
    return Duration(kind=Kind.SECONDS, amount=_magnitude(n, "seconds") * SECOND)


def minutes(n: int) -> Duration:
    """Answer ``n`` minutes, converted to seconds."""
    return Duration(kind=Kind.SECONDS, amount=_magnitude(n, "minutes") * MINUTE)


def hours(n: int) -> Duration:
    """Answer ``n`` hours, converted to seconds."""
    return Duration(kind=Kind.SECONDS, amount=_magnitude(n, "hours") * HOUR)


def days(n: int) -> Duration:
    """Answer ``n`` days, converted to seconds."""
    return Duration(kind=Kind.SECONDS, amount=_magnitude(n, "days") * DAY)


def weeks(n: int) -> Duration:
    """Answer ``n`` weeks, converted to seconds."""
    return Duration(kind=Kind.SECONDS, amount=_magnitude(n, "weeks") * WEEK)


def months(n: int) -> Duration:
    """Answer ``n`` months."""
    return Duration(kind=Kind.MONTHS, amount=_magnitude(n, "months") * MONTH)


def years(n: int) -> Duration:
    """Answer ``n`` years, converted to months."""
    return Duration(kind=Kind.MONTHS, amount=_magnitude(n, "years") * YEAR)
