"""
Domain-specific exception hierarchy for the timeslot library.
"""


class TimeslotError(Exception):
    """Base class for all library-level errors."""


class InvalidRangeError(TimeslotError, ValueError):
    """Raised when a time slot would finish before it starts."""

    def __init__(self, start, finish):
        self.start = start
        self.finish = finish
        super().__init__(
            f"Finish time {finish} of time slot cannot be before start time {start}"
        )


class UnsupportedGranularityError(TimeslotError, ValueError):
    """Raised when a rounding granularity is not one of the supported values."""
