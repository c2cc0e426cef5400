from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Arithmetic path a duration is applied with."""

    SECONDS = "seconds"
    MONTHS = "months"


_SUFFIX = {Kind.SECONDS: "s", Kind.MONTHS: "mo"}


@dataclass(frozen=True, kw_only=True)
class Duration:
    kind: Kind
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise TypeError(
                f"Duration kind must be a Kind, got {type(self.kind).__name__!r}"
            )
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(
                f"Duration amount must be an int.\n"
                f"Got {type(self.amount).__name__!r}: {self.amount!r}"
            )
        if self.amount < 0:
            raise ValueError(
                f"Duration amount must be >= 0, got {self.amount}.\n"
                f"Hint: Use a past end-point instead of a negative amount:\n"
                f"  ago(minutes(10))  # not from_now(minutes(-10))"
            )

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        if other.kind is not self.kind:
            raise TypeError(
                f"Cannot add a {other.kind.value} duration to a "
                f"{self.kind.value} duration.\n"
                f"Hint: Month arithmetic and second arithmetic do not commute; "
                f"apply them as separate steps:\n"
                f"  from_(months(2), from_now(days(3)))"
            )
        return Duration(kind=self.kind, amount=self.amount + other.amount)

    def __str__(self) -> str:
        """Human-friendly string showing amount and unit."""
        return f"Duration({self.amount}{_SUFFIX[self.kind]})"
