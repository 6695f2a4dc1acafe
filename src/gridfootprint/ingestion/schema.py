"""Record schemas for the consumption, intensity and generation-mix series."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..intervals import interval_key, parse_timestamp


class _IntervalRecord(BaseModel):
    interval_start: datetime = Field(..., description="Interval start, UTC")

    @field_validator("interval_start", mode="before")
    @classmethod
    def ensure_utc(cls, v: Any) -> datetime:
        """Normalise any ISO-8601 form to a UTC-aware datetime."""
        return parse_timestamp(v)

    @property
    def key(self) -> str:
        return interval_key(self.interval_start)


class ConsumptionRecord(_IntervalRecord):
    """One half-hour of metered consumption."""

    consumption_kwh: float = Field(..., description="Energy consumed in kWh")


class IntensityRecord(_IntervalRecord):
    """Grid carbon intensity for one half-hour."""

    intensity_g_per_kwh: float = Field(..., ge=0, description="gCO2 per kWh")
    forecast_g_per_kwh: float | None = Field(default=None, ge=0)
    index: str | None = Field(default=None, description="Intensity band, e.g. 'low'")
    is_forecast: bool = Field(
        default=False, description="Intensity taken from the forecast, actual missing"
    )


class FuelShare(BaseModel):
    fuel: str
    percentage: float = Field(..., ge=0, le=100)


class GenerationMixRecord(_IntervalRecord):
    """Generation fuel mix for one half-hour.

    Percentages should sum to roughly 100 but this is not enforced.
    """

    mix: list[FuelShare] = Field(default_factory=list)
