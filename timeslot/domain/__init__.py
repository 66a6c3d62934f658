"""
Domain layer - Pure value types and functions without external I/O.
"""

from .exceptions import InvalidRangeError, TimeslotError, UnsupportedGranularityError
from .models import EMPTY, TimeSlot, create_time_slot
from .rounding import Granularity, now, round_down

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
]
