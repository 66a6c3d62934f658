"""
Factories for constructing time slots.

Callers that want to swap the way slots are built (for example to snap
endpoints onto a grid) depend on the ``TimeSlotFactory`` protocol rather than
on a concrete class.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..domain.models import TimeSlot, create_time_slot
from ..domain.rounding import Granularity, round_down


class TimeSlotFactory(Protocol):
    """Protocol describing anything able to build a time slot."""

    def create_time_slot(self, start: datetime, finish: datetime) -> TimeSlot:
        """Return a slot spanning ``start`` to ``finish``."""


class DefaultTimeSlotFactory:
    """Builds plain ``TimeSlot`` values from the given endpoints."""

    def create_time_slot(self, start: datetime, finish: datetime) -> TimeSlot:
        return create_time_slot(start, finish)


class RoundingTimeSlotFactory:
    """
    Builds slots whose endpoints are first rounded down to a granularity.

    Both endpoints are rounded before validation, so a pair that is valid
    before rounding always stays valid after it.
    """

    def __init__(self, granularity: Granularity) -> None:
        self._granularity = granularity

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    def create_time_slot(self, start: datetime, finish: datetime) -> TimeSlot:
        return create_time_slot(
            round_down(start, self._granularity),
            round_down(finish, self._granularity),
        )
