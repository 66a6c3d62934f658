"""
timeslot - Time slot value type and date-time rounding helpers.
"""

from .domain import (
    EMPTY,
    Granularity,
    InvalidRangeError,
    TimeSlot,
    TimeslotError,
    UnsupportedGranularityError,
    create_time_slot,
    now,
    round_down,
)

__version__ = "1.0.0"

__all__ = [
    "EMPTY",
    "Granularity",
    "InvalidRangeError",
    "TimeSlot",
    "TimeslotError",
    "UnsupportedGranularityError",
    "create_time_slot",
    "now",
    "round_down",
    "__version__",
]
