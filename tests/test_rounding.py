"""
Tests for rounding date-time values down to a granularity.
"""

from datetime import datetime

import pendulum
import pytest

from timeslot.domain.exceptions import UnsupportedGranularityError
from timeslot.domain.rounding import Granularity, now, round_down


class TestRoundToMinute:
    """Tests for MINUTE granularity."""

    def test_drops_seconds_and_microseconds(self):
        dt = pendulum.naive(2016, 11, 23, 9, 44, 31, 123456)

        rounded = round_down(dt, Granularity.MINUTE)

        assert rounded == pendulum.naive(2016, 11, 23, 9, 44)
        assert rounded.second == 0
        assert rounded.microsecond == 0

    def test_current_time(self):
        """Rounding never moves a value forward."""
        current = now()

        rounded = round_down(current, Granularity.MINUTE)

        assert rounded <= current
        assert rounded.second == 0
        assert rounded.microsecond == 0

    def test_does_not_modify_input(self):
        dt = pendulum.naive(2016, 11, 23, 9, 44, 31)

        round_down(dt, Granularity.MINUTE)

        assert dt == pendulum.naive(2016, 11, 23, 9, 44, 31)


class TestRoundToTenMinutes:
    """Tests for TEN_MINUTES granularity."""

    @pytest.mark.parametrize("minute", range(60))
    def test_every_minute(self, minute):
        dt = pendulum.naive(2016, 11, 23, 9, minute, 59)

        rounded = round_down(dt, Granularity.TEN_MINUTES)

        assert rounded == pendulum.naive(2016, 11, 23, 9, minute - minute % 10)

    def test_current_time(self):
        current = now()

        rounded = round_down(current, Granularity.TEN_MINUTES)

        assert rounded.second == 0
        assert rounded.minute in {0, 10, 20, 30, 40, 50}
        assert current.minute == rounded.minute + current.minute % 10


class TestRoundToFifteenMinutes:
    """Tests for FIFTEEN_MINUTES granularity at every bucket boundary."""

    @pytest.mark.parametrize(
        "minute, expected",
        [
            (0, 0), (1, 0), (14, 0),
            (15, 15), (16, 15), (29, 15),
            (30, 30), (31, 30), (44, 30),
            (45, 45), (46, 45), (59, 45),
        ],
    )
    def test_bucket_boundaries(self, minute, expected):
        dt = pendulum.naive(2016, 11, 23, 9, minute)

        rounded = round_down(dt, Granularity.FIFTEEN_MINUTES)

        assert rounded == pendulum.naive(2016, 11, 23, 9, expected)

    def test_keeps_hour_and_date(self):
        dt = pendulum.naive(2016, 12, 31, 23, 59, 59, 999999)

        rounded = round_down(dt, Granularity.FIFTEEN_MINUTES)

        assert rounded == pendulum.naive(2016, 12, 31, 23, 45)


class TestRoundToHourAndDay:
    """Tests for HOUR and DAY granularity."""

    def test_round_to_hour(self):
        dt = pendulum.naive(2016, 11, 23, 15, 34)

        assert round_down(dt, Granularity.HOUR) == pendulum.naive(2016, 11, 23, 15, 0)

    def test_round_to_day(self):
        dt = pendulum.naive(2016, 11, 23, 15, 34, 12)

        assert round_down(dt, Granularity.DAY) == pendulum.naive(2016, 11, 23, 0, 0)

    def test_minute_boundary_into_next_hour(self):
        """59 -> 0 boundary: 10:00 stays in its own hour."""
        assert round_down(pendulum.naive(2016, 11, 23, 9, 59), Granularity.HOUR) == pendulum.naive(2016, 11, 23, 9, 0)
        assert round_down(pendulum.naive(2016, 11, 23, 10, 0), Granularity.HOUR) == pendulum.naive(2016, 11, 23, 10, 0)


class TestRoundingProperties:
    """Cross-granularity properties."""

    @pytest.mark.parametrize("granularity", list(Granularity))
    def test_idempotent(self, granularity):
        dt = pendulum.naive(2016, 11, 23, 17, 38, 42, 5000)

        once = round_down(dt, granularity)

        assert round_down(once, granularity) == once

    @pytest.mark.parametrize("granularity", list(Granularity))
    def test_result_is_naive_and_not_after_input(self, granularity):
        dt = pendulum.naive(2016, 11, 23, 17, 38, 42)

        rounded = round_down(dt, granularity)

        assert rounded.tzinfo is None
        assert rounded <= dt

    def test_accepts_standard_library_datetime(self):
        rounded = round_down(datetime(2016, 11, 23, 9, 31, 5), Granularity.FIFTEEN_MINUTES)

        assert isinstance(rounded, pendulum.DateTime)
        assert rounded == datetime(2016, 11, 23, 9, 30)

    def test_rejects_time_zone_aware_values(self):
        dt = pendulum.datetime(2016, 11, 23, 9, 31, tz="Europe/Zurich")

        with pytest.raises(TypeError, match="naive"):
            round_down(dt, Granularity.HOUR)

    def test_unsupported_granularity(self):
        dt = pendulum.naive(2016, 11, 23, 9, 31)

        with pytest.raises(UnsupportedGranularityError):
            round_down(dt, "hour")


class TestGranularityParse:
    """Tests for looking up granularities by name."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("minute", Granularity.MINUTE),
            ("TEN_MINUTES", Granularity.TEN_MINUTES),
            ("fifteen-minutes", Granularity.FIFTEEN_MINUTES),
            (" Hour ", Granularity.HOUR),
            ("day", Granularity.DAY),
        ],
    )
    def test_parse(self, name, expected):
        assert Granularity.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnsupportedGranularityError, match="Unknown granularity 'week'"):
            Granularity.parse("week")
