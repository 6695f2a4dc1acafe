"""Source for metered half-hourly consumption (Openvolt interval-data API)."""

from typing import Any

from .base import BaseSource
from .schema import ConsumptionRecord
from .utils import ApiSession

DEFAULT_OPENVOLT_URL = "https://api.openvolt.com"


class OpenvoltSource(BaseSource):
    """Fetch half-hourly consumption for one meter.

    Authentication is a static API key sent as the ``x-api-key`` header.
    """

    name = "openvolt"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_OPENVOLT_URL,
        granularity: str = "hh",
        session: ApiSession | None = None,
    ):
        super().__init__(
            base_url, session or ApiSession(headers={"x-api-key": api_key})
        )
        self.granularity = granularity

    def transform_record(self, item: dict[str, Any]) -> ConsumptionRecord | None:
        """Map an interval-data item onto a consumption record."""
        consumption = item.get("consumption")
        if consumption is None or consumption == "":
            return None
        return ConsumptionRecord(
            interval_start=item["start_interval"],
            consumption_kwh=float(consumption),
        )

    def fetch(self, meter_id: str, start: str, end: str) -> list[ConsumptionRecord]:
        """Return consumption records for ``meter_id`` in the closed range."""
        params = {
            "meter_id": meter_id,
            "start_date": start,
            "end_date": end,
            "granularity": self.granularity,
        }
        self.logger.info(f"Fetching consumption for meter {meter_id}: {start} → {end}")
        items = self.get_json(f"{self.base_url}/v1/interval-data", params=params)
        return self.transform_all(items, self.transform_record)
