"""Resolve a billing month into the date ranges each API expects."""

import calendar
import re

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import PeriodError

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{2})$")


class BillingPeriod(BaseModel):
    """Date-range boundaries for one calendar month.

    The meter API labels half-hours by their start, so its range runs from
    00:00 on the 1st to 23:30 on the last day. The Carbon Intensity API
    labels by the preceding boundary, so its range starts at 00:30 on the 1st
    and ends at 00:00 on the 1st of the following month.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    consumption_start: str
    consumption_end: str
    intensity_start: str
    intensity_end: str

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def expected_intervals(self) -> int:
        """Number of half-hour intervals in the month."""
        return self.days * 48


def resolve_period(year_month: str) -> BillingPeriod:
    """Derive consumption and intensity ranges from a ``YYYY-MM`` string."""
    match = _YEAR_MONTH.match(year_month.strip()) if isinstance(year_month, str) else None
    if match is None:
        raise PeriodError(f"Period must be in YYYY-MM format, got {year_month!r}")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise PeriodError(f"Month must be between 01 and 12, got {month:02d}")
    if year < 1:
        raise PeriodError(f"Year must be positive, got {year:04d}")

    last_day = calendar.monthrange(year, month)[1]
    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)

    return BillingPeriod(
        year=year,
        month=month,
        consumption_start=f"{year:04d}-{month:02d}-01T00:00:00Z",
        consumption_end=f"{year:04d}-{month:02d}-{last_day:02d}T23:30:00Z",
        intensity_start=f"{year:04d}-{month:02d}-01T00:30:00.000Z",
        intensity_end=f"{next_year:04d}-{next_month:02d}-01T00:00:00.000Z",
    )
