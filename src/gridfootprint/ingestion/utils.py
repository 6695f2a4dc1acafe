"""Utility functions for data ingestion."""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd
import requests

from .schema import ConsumptionRecord

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "gridfootprint/0.1.0"


def calculate_data_quality_metrics(
    records: Sequence[ConsumptionRecord], expected_intervals: int | None = None
) -> dict[str, Any]:
    """Calculate data quality metrics for a consumption series.

    Args:
        records: Consumption records as returned by the meter source
        expected_intervals: Number of half-hours the series should cover

    Returns:
        Dictionary with quality metrics
    """
    if not records:
        return {
            "records": 0,
            "coverage_pct": 0.0,
            "duplicates": 0,
            "gaps_count": 0,
            "negative_values": 0,
            "outliers_pct": 0.0,
        }

    data = pd.DataFrame(
        {
            "ts_utc": [r.interval_start for r in records],
            "energy_kwh": [r.consumption_kwh for r in records],
        }
    )
    data["ts_utc"] = pd.to_datetime(data["ts_utc"], utc=True)
    total_records = len(data)

    # Duplicate timestamps
    duplicates = data["ts_utc"].duplicated().sum()
    unique_intervals = total_records - int(duplicates)

    if expected_intervals:
        coverage_pct = min(unique_intervals / expected_intervals, 1.0) * 100.0
    else:
        coverage_pct = 100.0

    # Outliers (values beyond 3 sigma)
    if data["energy_kwh"].std() > 0:
        z_scores = np.abs(
            (data["energy_kwh"] - data["energy_kwh"].mean()) / data["energy_kwh"].std()
        )
        outliers_pct = ((z_scores > 3).sum() / total_records) * 100.0
    else:
        outliers_pct = 0.0

    # Gaps longer than one half-hour
    time_diffs = data["ts_utc"].sort_values().diff()
    gaps_count = (time_diffs > pd.Timedelta(minutes=30)).sum()

    # Negative values (should not exist for consumption)
    negative_values = (data["energy_kwh"] < 0).sum()

    return {
        "records": int(total_records),
        "coverage_pct": float(coverage_pct),
        "duplicates": int(duplicates),
        "gaps_count": int(gaps_count),
        "negative_values": int(negative_values),
        "outliers_pct": float(outliers_pct),
    }


class ApiSession:
    """HTTP session with default headers and a per-request timeout."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        if headers:
            self.session.headers.update(headers)

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Make a GET request with the session defaults."""
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"Making request to {url}")
        return self.session.get(url, params=params, **kwargs)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ApiSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
