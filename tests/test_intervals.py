"""Tests for interval key normalisation."""

from datetime import UTC, datetime, timedelta, timezone

import pandas as pd
import pytest

from gridfootprint.exceptions import IntervalKeyError
from gridfootprint.intervals import interval_key, parse_timestamp


class TestIntervalKey:
    """Test that keys align timestamps of different widths."""

    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-01T00:30Z",
            "2024-01-01T00:30:00Z",
            "2024-01-01T00:30:00.000Z",
            "2024-01-01T00:30:00+00:00",
            "2024-01-01T00:30",
        ],
    )
    def test_widths_share_key(self, value):
        """Test that the API timestamp formats produce the same key."""
        assert interval_key(value) == "2024-01-01T00:30"

    def test_offset_converted_to_utc(self):
        """Test that numeric offsets are converted before truncation."""
        assert interval_key("2024-06-01T01:30:00+01:00") == "2024-06-01T00:30"

    def test_seconds_are_floored(self):
        """Test that seconds are dropped, not rounded up."""
        assert interval_key("2024-01-01T00:29:59.999Z") == "2024-01-01T00:29"

    def test_datetime_and_timestamp_inputs(self):
        """Test datetime and pandas Timestamp inputs."""
        dt = datetime(2024, 3, 5, 13, 0, 42, tzinfo=UTC)
        assert interval_key(dt) == "2024-03-05T13:00"
        assert interval_key(pd.Timestamp(dt)) == "2024-03-05T13:00"

        local = datetime(2024, 3, 5, 14, 0, tzinfo=timezone(timedelta(hours=1)))
        assert interval_key(local) == "2024-03-05T13:00"

    def test_different_minutes_differ(self):
        """Test that distinct half-hours get distinct keys."""
        assert interval_key("2024-01-01T00:00Z") != interval_key("2024-01-01T00:30Z")


class TestParseTimestamp:
    """Test timestamp parsing."""

    def test_naive_is_utc(self):
        """Test naive timestamps are interpreted as UTC."""
        ts = parse_timestamp("2024-01-01T12:00")
        assert ts.tzinfo is not None
        assert ts.utcoffset() == timedelta(0)
        assert ts.hour == 12

    @pytest.mark.parametrize("value", ["not a date", "", None])
    def test_unparseable_rejected(self, value):
        """Test that garbage raises IntervalKeyError."""
        with pytest.raises(IntervalKeyError):
            parse_timestamp(value)

    def test_error_is_value_error(self):
        """Test the error can be handled as a ValueError."""
        with pytest.raises(ValueError):
            interval_key("2024-13-45T99:99")
