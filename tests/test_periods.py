"""Tests for billing period resolution."""

import pytest

from gridfootprint.exceptions import PeriodError
from gridfootprint.periods import resolve_period


class TestResolvePeriod:
    """Test date-range boundaries for each API."""

    def test_january(self):
        """Test the four boundaries for a 31-day month."""
        period = resolve_period("2024-01")

        assert period.consumption_start == "2024-01-01T00:00:00Z"
        assert period.consumption_end == "2024-01-31T23:30:00Z"
        assert period.intensity_start == "2024-01-01T00:30:00.000Z"
        assert period.intensity_end == "2024-02-01T00:00:00.000Z"

    def test_leap_february(self):
        """Test that February in a leap year ends on the 29th."""
        period = resolve_period("2024-02")
        assert period.consumption_end == "2024-02-29T23:30:00Z"
        assert period.intensity_end == "2024-03-01T00:00:00.000Z"
        assert period.days == 29

    def test_common_february(self):
        """Test that February in a common year ends on the 28th."""
        period = resolve_period("2023-02")
        assert period.consumption_end == "2023-02-28T23:30:00Z"
        assert period.days == 28

    def test_thirty_day_month(self):
        period = resolve_period("2023-04")
        assert period.consumption_end == "2023-04-30T23:30:00Z"

    def test_december_rolls_year(self):
        """Test that the intensity range ends in January of the next year."""
        period = resolve_period("2023-12")
        assert period.consumption_end == "2023-12-31T23:30:00Z"
        assert period.intensity_end == "2024-01-01T00:00:00.000Z"

    def test_label_and_expected_intervals(self):
        period = resolve_period(" 2024-02 ")
        assert period.label == "2024-02"
        assert period.expected_intervals == 29 * 48

    def test_period_is_frozen(self):
        period = resolve_period("2024-01")
        with pytest.raises(Exception):
            period.month = 2

    @pytest.mark.parametrize(
        "value", ["2024-13", "2024-00", "2024-1", "24-01", "2024/01", "January", "", None]
    )
    def test_malformed_rejected(self, value):
        """Test malformed periods raise PeriodError."""
        with pytest.raises(PeriodError):
            resolve_period(value)
