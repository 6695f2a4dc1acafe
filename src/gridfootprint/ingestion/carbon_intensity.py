"""Source for GB grid carbon intensity and generation mix.

Both endpoints of the Carbon Intensity API return half-hourly items labelled
with ``from``/``to`` boundaries::

    GET /intensity/{from}/{to}   -> {"data": [{"from", "to", "intensity": {...}}]}
    GET /generation/{from}/{to}  -> {"data": [{"from", "to", "generationmix": [...]}]}
"""

from typing import Any

from .base import BaseSource
from .schema import FuelShare, GenerationMixRecord, IntensityRecord
from .utils import ApiSession

DEFAULT_CARBON_INTENSITY_URL = "https://api.carbonintensity.org.uk"


class CarbonIntensitySource(BaseSource):
    """Fetch national intensity and generation-mix series."""

    name = "carbon-intensity"

    def __init__(
        self,
        base_url: str = DEFAULT_CARBON_INTENSITY_URL,
        session: ApiSession | None = None,
    ):
        super().__init__(base_url, session)

    def transform_intensity(self, item: dict[str, Any]) -> IntensityRecord | None:
        """Map an intensity item, falling back to the forecast when actual is null."""
        intensity = item.get("intensity") or {}
        actual = intensity.get("actual")
        forecast = intensity.get("forecast")
        value = actual if actual is not None else forecast
        if value is None:
            self.logger.debug(f"No intensity value for {item.get('from')}")
            return None
        return IntensityRecord(
            interval_start=item["from"],
            intensity_g_per_kwh=float(value),
            forecast_g_per_kwh=None if forecast is None else float(forecast),
            index=intensity.get("index"),
            is_forecast=actual is None,
        )

    def transform_generation_mix(
        self, item: dict[str, Any]
    ) -> GenerationMixRecord | None:
        mix = item.get("generationmix")
        if mix is None:
            return None
        return GenerationMixRecord(
            interval_start=item["from"],
            mix=[FuelShare(fuel=m["fuel"], percentage=float(m["perc"])) for m in mix],
        )

    def fetch_intensity(self, start: str, end: str) -> list[IntensityRecord]:
        self.logger.info(f"Fetching carbon intensity: {start} → {end}")
        items = self.get_json(f"{self.base_url}/intensity/{start}/{end}")
        return self.transform_all(items, self.transform_intensity)

    def fetch_generation_mix(self, start: str, end: str) -> list[GenerationMixRecord]:
        self.logger.info(f"Fetching generation mix: {start} → {end}")
        items = self.get_json(f"{self.base_url}/generation/{start}/{end}")
        return self.transform_all(items, self.transform_generation_mix)
