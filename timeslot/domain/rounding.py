"""
Rounding of date-time values down to a fixed granularity.
"""

from datetime import datetime
from enum import Enum

from pendulum import DateTime

from .datetimes import as_naive, now
from .exceptions import UnsupportedGranularityError

__all__ = ["Granularity", "round_down", "now"]


class Granularity(Enum):
    """Units a date-time can be rounded down to."""
    MINUTE = "minute"
    TEN_MINUTES = "ten_minutes"
    FIFTEEN_MINUTES = "fifteen_minutes"
    HOUR = "hour"
    DAY = "day"

    @classmethod
    def parse(cls, name: str) -> "Granularity":
        """
        Look up a granularity by name, ignoring case.

        Dashes and spaces are treated as underscores, so ``"fifteen-minutes"``
        and ``"FIFTEEN_MINUTES"`` both resolve to ``FIFTEEN_MINUTES``.

        Raises:
            UnsupportedGranularityError: If the name is unknown
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for granularity in cls:
            if granularity.value == key:
                return granularity

        supported = ", ".join(g.value for g in cls)
        raise UnsupportedGranularityError(
            f"Unknown granularity '{name}'. Supported: {supported}"
        )


def _fifteen_minute_bucket(minute: int) -> int:
    # 0 <= minute <= 59
    if minute <= 14:
        return 0
    if minute <= 29:
        return 15
    if minute <= 44:
        return 30
    return 45


def round_down(value: datetime, granularity: Granularity) -> DateTime:
    """
    Round a date-time down to the start of its enclosing period.

    Seconds and sub-second precision are always dropped first. The input is
    never modified.

    Args:
        value: A naive date-time
        granularity: The period size to round down to

    Returns:
        A new naive pendulum DateTime

    Raises:
        UnsupportedGranularityError: If granularity is not a Granularity member
    """
    truncated = as_naive(value).start_of("minute")

    if granularity is Granularity.MINUTE:
        return truncated

    if granularity is Granularity.TEN_MINUTES:
        return truncated.subtract(minutes=truncated.minute % 10)

    if granularity is Granularity.FIFTEEN_MINUTES:
        return truncated.set(minute=_fifteen_minute_bucket(truncated.minute))

    if granularity is Granularity.HOUR:
        return truncated.start_of("hour")

    if granularity is Granularity.DAY:
        return truncated.start_of("day")

    supported = ", ".join(g.name for g in Granularity)
    raise UnsupportedGranularityError(
        f"Cannot round to {granularity!r}. Supported: {supported}"
    )
