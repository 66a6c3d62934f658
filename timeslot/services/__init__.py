"""
Service layer helpers built on top of the domain types.
"""

from .factory import DefaultTimeSlotFactory, RoundingTimeSlotFactory, TimeSlotFactory

__all__ = ["DefaultTimeSlotFactory", "RoundingTimeSlotFactory", "TimeSlotFactory"]
