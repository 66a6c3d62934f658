"""
Helpers for normalising date-time values to naive pendulum instances.

All values handled by the library are local wall-clock times without a time
zone. Standard library ``datetime`` values are accepted and converted.
"""

from datetime import datetime

import pendulum
from pendulum import DateTime


def as_naive(value: datetime, name: str = "value") -> DateTime:
    """
    Return ``value`` as a naive pendulum ``DateTime``.

    Raises:
        TypeError: If ``value`` is not a datetime or carries a time zone
    """
    if not isinstance(value, datetime):
        raise TypeError(f"{name} must be a datetime, got {type(value).__name__}")

    if value.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive datetime (no tzinfo), got tzinfo={value.tzinfo!r}"
        )

    if isinstance(value, DateTime):
        return value

    return pendulum.naive(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def now() -> DateTime:
    """Return the current local date and time as a naive value."""
    return pendulum.now().naive()
