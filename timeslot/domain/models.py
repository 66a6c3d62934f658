"""
Domain model for time slots.

A time slot is a closed interval ``[start, finish]`` of naive date-time
values. See http://www.martinfowler.com/ap2/range.html for the pattern.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from pendulum import DateTime

from .datetimes import as_naive
from .exceptions import InvalidRangeError

# Label used when rendering a slot whose start equals its finish
EMPTY = "Empty time slot"


@dataclass(frozen=True, order=True)
class TimeSlot:
    """
    Represents an immutable period between two date-time values.

    Invariant: start must not be after finish. A slot whose start equals its
    finish is valid and considered empty.

    Equality, hashing and ordering are all derived from ``(start, finish)``,
    so sorting a list of slots orders them by start and then by finish.
    """
    start: DateTime
    finish: DateTime

    def __post_init__(self):
        start = as_naive(self.start, "start")
        finish = as_naive(self.finish, "finish")

        if start > finish:
            raise InvalidRangeError(start, finish)

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "finish", finish)

    def is_empty(self) -> bool:
        """Return True iff the slot covers a single instant."""
        return self.start == self.finish

    def includes(self, other: Union[datetime, "TimeSlot"]) -> bool:
        """
        Check whether a date-time or another slot lies within this slot.

        Both ends are inclusive. A slot is included when both of its
        endpoints are.
        """
        if isinstance(other, TimeSlot):
            return self.includes(other.start) and self.includes(other.finish)
        return self.start <= other <= self.finish

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check if this slot shares at least one instant with another."""
        return (
            other.includes(self.start)
            or other.includes(self.finish)
            or self.includes(other)
        )

    def starts_before(self, other: "TimeSlot") -> bool:
        return self.start < other.start

    def starts_after(self, other: "TimeSlot") -> bool:
        return self.start > other.start

    def ends_before(self, other: "TimeSlot") -> bool:
        return self.finish < other.finish

    def ends_after(self, other: "TimeSlot") -> bool:
        return self.finish > other.finish

    def strictly_includes(self, other: "TimeSlot") -> bool:
        """Check if the other slot lies inside this one with room on both sides."""
        return (
            self.includes(other)
            and self.starts_before(other)
            and self.ends_after(other)
        )

    def exactly_matches(self, other: "TimeSlot") -> bool:
        """Check if both slots share the same start and finish."""
        return (
            self.includes(other)
            and not self.starts_before(other)
            and not self.ends_after(other)
        )

    def compare_to(self, other: "TimeSlot") -> int:
        """
        Compare by start time first and by finish time when starts are equal.

        Returns:
            -1, 0 or +1 as this slot sorts before, equal to or after ``other``
        """
        mine = (self.start, self.finish)
        theirs = (other.start, other.finish)
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def duration_minutes(self) -> int:
        """Return the duration in whole minutes."""
        return int((self.finish - self.start).total_seconds() // 60)

    def __str__(self) -> str:
        if self.is_empty():
            return f"{EMPTY} ({self.start.format('DD.MM.YYYY HH:mm')})"
        if self.start.date() == self.finish.date():
            return f"{self.start.format('DD.MM.YYYY HH:mm')} - {self.finish.format('HH:mm')}"
        return f"{self.start.format('DD.MM.YYYY HH:mm')} - {self.finish.format('DD.MM.YYYY HH:mm')}"


def create_time_slot(start: datetime, finish: datetime) -> TimeSlot:
    """
    Construct a time slot from two date-time values.

    Raises:
        InvalidRangeError: If start is after finish
    """
    return TimeSlot(start=start, finish=finish)
