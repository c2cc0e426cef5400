"""Clock collaborators supplying the ambient "current local date-time".

Every end-point accepts an explicit ``clock``; when none is given the
process-wide default (a :class:`SystemClock` in the machine's local zone)
is used. Replacing the default is for application start-up and tests only.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from dateutil import tz as dateutil_tz
from typing_extensions import override


class Clock(ABC):

    @property
    @abstractmethod
    def zone(self) -> tzinfo:
        """Zone that naive reference date-times are interpreted in."""
        pass

    @abstractmethod
    def now(self) -> datetime:
        """Return the current date-time, timezone-aware, in :attr:`zone`."""
        pass


class SystemClock(Clock):
    """Wall clock of the running machine."""

    def __init__(self, tz: str | None = None):
        """
        Initialize a system clock.

        Args:
            tz: IANA timezone name (e.g., "UTC", "US/Pacific"). When None,
                the machine's local zone is used.
        """
        self._zone: tzinfo = dateutil_tz.tzlocal() if tz is None else ZoneInfo(tz)

    @property
    @override
    def zone(self) -> tzinfo:
        return self._zone

    @override
    def now(self) -> datetime:
        return datetime.now(self._zone)

    @override
    def __repr__(self) -> str:
        return f"SystemClock({self._zone!r})"


class FixedClock(Clock):
    """Clock stuck at a given instant, for deterministic callers and tests."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"FixedClock needs a timezone-aware instant to report as now.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: Pin the clock in the zone naive references should use:\n"
                f"  FixedClock(datetime(2013, 9, 3, 17, 31, tzinfo=timezone.utc))\n"
                f"  FixedClock(SystemClock('Europe/Berlin').now())"
            )
        self.instant: datetime = instant

    @property
    @override
    def zone(self) -> tzinfo:
        # tzinfo is set, checked in __init__
        return self.instant.tzinfo  # type: ignore[return-value]

    @override
    def now(self) -> datetime:
        return self.instant

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by ``delta`` (backward when negative)."""
        self.instant = self.instant + delta

    @override
    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Return the clock used when an operation is given none."""
    return _default_clock


def set_default_clock(clock: Clock) -> Clock:
    """Replace the default clock and return the previous one.

    This is process-wide state, meant for application start-up and for
    test fixtures. Library code should pass ``clock=`` to each operation
    instead of swapping the default.
    """
    global _default_clock
    if not isinstance(clock, Clock):
        raise TypeError(f"Expected a Clock, got {type(clock).__name__!r}")
    previous = _default_clock
    _default_clock = clock
    return previous
