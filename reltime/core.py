import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Any

from dateutil import tz as dateutil_tz

from reltime.clock import Clock, get_default_clock
from reltime.duration import Duration, Kind
from reltime.gregorian import clamp_day, from_month_index, month_index

logger = logging.getLogger(__name__)

Reference = datetime | date | tuple[Any, ...]


class Direction(Enum):
    """Whether a duration is subtracted from or added to the reference."""

    PAST = -1
    FUTURE = 1


@dataclass(frozen=True)
class Adjustment:
    """Parameters of a single adjustment.

    Attributes:
        direction: Past subtracts the duration, future adds it
        reference: Date-time or date to adjust from; None means "now"
    """

    direction: Direction
    reference: Reference | None = None


def adjust(
    duration: Duration, adjustment: Adjustment, clock: Clock | None = None
) -> datetime:
    """Apply ``duration`` to the adjustment's reference.

    Seconds-kind durations move the reference by elapsed time: the
    reference is turned into an absolute instant, shifted, and converted
    back with the zone rules in force at the result. Minute, hour, day,
    month and year boundaries roll over naturally.

    Months-kind durations move the calendar month and leave the time of
    day untouched. A day-of-month missing from the target month is
    clamped to that month's last day, so month arithmetic is not
    invertible:

        >>> before(months(6), datetime(2016, 8, 31))
        datetime.datetime(2016, 2, 29, 0, 0)
        >>> from_(months(6), datetime(2016, 2, 29))
        datetime.datetime(2016, 8, 29, 0, 0)

    Args:
        duration: Normalized duration from one of the builders
        adjustment: Direction and optional reference
        clock: Source of "now" and of the local zone for naive references;
            defaults to :func:`reltime.clock.get_default_clock`

    Returns:
        A new datetime. Naive references give naive results, aware
        references keep their tzinfo, and the clock-supplied "now" is aware.

    Raises:
        TypeError: If the duration or reference has an unsupported type
        ValueError: If the reference is malformed or the result falls
            outside years 1-9999
    """
    if not isinstance(duration, Duration):
        raise TypeError(
            f"Expected a Duration, got {type(duration).__name__!r}: {duration!r}\n"
            f"Hint: Build one first:\n"
            f"  ago(minutes(10))  # not ago(10)"
        )
    if clock is None:
        clock = get_default_clock()

    reference = _coerce_reference(adjustment.reference, clock)
    sign = adjustment.direction.value

    try:
        if duration.kind is Kind.SECONDS:
            result = _shift_seconds(reference, sign * duration.amount, clock.zone)
        else:
            result = _shift_months(reference, sign * duration.amount)
    except OverflowError as exc:
        raise ValueError(
            f"{duration} {adjustment.direction.name.lower()} {reference.isoformat()} "
            f"falls outside years {MINYEAR}-{MAXYEAR}"
        ) from exc

    logger.debug(
        "adjusted %s %s by %s -> %s",
        reference.isoformat(),
        adjustment.direction.name,
        duration,
        result.isoformat(),
    )
    return result


def _coerce_reference(reference: Reference | None, clock: Clock) -> datetime:
    """Convert a reference into a datetime, reading the clock at most once.

    Accepts:
    - None: The clock's current date-time
    - datetime: Passed through as-is (naive or aware)
    - date: Combined with the clock's current time of day
    - ((year, month, day), (hour, minute, second)): A date-time tuple
    - (year, month, day): A date tuple, treated like a date

    Raises:
        TypeError: If reference is an unsupported type
        ValueError: If a tuple does not name a valid date-time
    """
    if reference is None:
        return clock.now()
    if isinstance(reference, datetime):
        return reference
    if isinstance(reference, date):
        return datetime.combine(reference, clock.now().timetz())
    if isinstance(reference, tuple):
        try:
            if len(reference) == 2:
                (year, month, day), (hour, minute, second) = reference
                return datetime(year, month, day, hour, minute, second)
            if len(reference) == 3:
                return datetime.combine(date(*reference), clock.now().timetz())
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid reference tuple {reference!r}: {exc}\n"
                f"Hint: Use ((year, month, day), (hour, minute, second)) "
                f"or (year, month, day)"
            ) from exc
        raise ValueError(
            f"Reference tuple must have 2 or 3 items, got {len(reference)}: "
            f"{reference!r}"
        )
    raise TypeError(
        f"Reference must be a datetime, date, tuple, or None.\n"
        f"Got {type(reference).__name__!r}: {reference!r}\n"
        f"Examples:\n"
        f"  before(days(3), datetime(2013, 9, 4, 10, 37, 45))\n"
        f"  before(days(3), date(2013, 9, 4))\n"
        f"  before(days(3), ((2013, 9, 4), (10, 37, 45)))"
    )


def _resolve_gap(dt: datetime) -> datetime:
    """Move a wall time skipped by a DST gap forward past the gap."""
    # Naive and fixed-offset date-times have no gaps
    if dt.tzinfo is None or isinstance(dt.tzinfo, timezone):
        return dt
    return dateutil_tz.resolve_imaginary(dt)


def _shift_seconds(reference: datetime, delta: int, zone: tzinfo) -> datetime:
    naive = reference.tzinfo is None
    local = reference.replace(tzinfo=zone) if naive else reference

    try:
        local = _resolve_gap(local)
        instant = local.astimezone(timezone.utc) + timedelta(seconds=delta)
        result = instant.astimezone(local.tzinfo)
    except OverflowError:
        # The UTC instant is outside the datetime range even though the
        # local result may not be; shift the wall time under the
        # reference's offset instead. Raises again if the result overflows.
        result = local + timedelta(seconds=delta)
    return result.replace(tzinfo=None) if naive else result


def _shift_months(reference: datetime, delta: int) -> datetime:
    year, month = from_month_index(month_index(reference.year, reference.month) + delta)
    if not (MINYEAR <= year <= MAXYEAR):
        raise OverflowError(f"year {year} is out of range")

    day = clamp_day(reference.day, year, month)
    return _resolve_gap(reference.replace(year=year, month=month, day=day))


def ago(duration: Duration, *, clock: Clock | None = None) -> datetime:
    """Answer the date-time ``duration`` before now."""
    return adjust(duration, Adjustment(Direction.PAST), clock)


def from_now(duration: Duration, *, clock: Clock | None = None) -> datetime:
    """Answer the date-time ``duration`` after now."""
    return adjust(duration, Adjustment(Direction.FUTURE), clock)


def before(
    duration: Duration, reference: Reference, *, clock: Clock | None = None
) -> datetime:
    """Answer the date-time ``duration`` before ``reference``.

    A date-only reference takes the current time of day from the clock.
    """
    return adjust(duration, Adjustment(Direction.PAST, reference), clock)


def from_(
    duration: Duration, reference: Reference, *, clock: Clock | None = None
) -> datetime:
    """Answer the date-time ``duration`` after ``reference``.

    Named with a trailing underscore since ``from`` is a keyword; also
    available as :func:`after`.
    """
    return adjust(duration, Adjustment(Direction.FUTURE, reference), clock)


after = from_
