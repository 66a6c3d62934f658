"""
Shared fixtures.
"""

import pytest

from timeslot.domain.rounding import Granularity
from timeslot.services.factory import DefaultTimeSlotFactory, RoundingTimeSlotFactory


@pytest.fixture(
    params=[
        DefaultTimeSlotFactory(),
        # Whole-minute endpoints are left untouched by minute rounding
        RoundingTimeSlotFactory(Granularity.MINUTE),
    ],
    ids=["default", "rounding-minute"],
)
def factory(request):
    """Every slot test runs once per factory implementation."""
    return request.param
