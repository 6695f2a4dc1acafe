"""End-to-end monthly footprint: resolve period, fetch, index, aggregate."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from .aggregation import AggregateResult, aggregate, build_carbon_index
from .config import FootprintConfig
from .ingestion.carbon_intensity import CarbonIntensitySource
from .ingestion.openvolt import OpenvoltSource
from .ingestion.schema import ConsumptionRecord, GenerationMixRecord, IntensityRecord
from .ingestion.utils import ApiSession, calculate_data_quality_metrics
from .periods import BillingPeriod, resolve_period

logger = logging.getLogger(__name__)


@dataclass
class FootprintReport:
    meter_id: str
    period: BillingPeriod
    result: AggregateResult
    quality: dict[str, Any] = field(default_factory=dict)


def create_sources(
    config: FootprintConfig,
) -> tuple[OpenvoltSource, CarbonIntensitySource, CarbonIntensitySource]:
    """Build the meter, intensity and generation-mix sources from configuration.

    Each source gets its own session since the three fetches run in
    separate threads.
    """
    meter = OpenvoltSource(
        api_key=config.openvolt.api_key,
        base_url=config.openvolt.base_url,
        granularity=config.openvolt.granularity,
        session=ApiSession(
            timeout=config.http.timeout,
            headers={"x-api-key": config.openvolt.api_key},
            user_agent=config.http.user_agent,
        ),
    )
    intensity, generation = (
        CarbonIntensitySource(
            base_url=config.carbon_intensity.base_url,
            session=ApiSession(
                timeout=config.http.timeout, user_agent=config.http.user_agent
            ),
        )
        for _ in range(2)
    )
    return meter, intensity, generation


async def fetch_series(
    meter_id: str,
    period: BillingPeriod,
    consumption_source: OpenvoltSource,
    intensity_source: CarbonIntensitySource,
    generation_source: CarbonIntensitySource,
) -> tuple[list[ConsumptionRecord], list[IntensityRecord], list[GenerationMixRecord]]:
    """Fetch the three series concurrently.

    The first failure propagates immediately and no partial result is
    returned. Intensity and generation mix must come from distinct source
    instances.
    """
    if intensity_source is generation_source:
        raise ValueError("intensity and generation mix need separate sources")

    try:
        consumption, intensity, generation_mix = await asyncio.gather(
            asyncio.to_thread(
                consumption_source.fetch,
                meter_id,
                period.consumption_start,
                period.consumption_end,
            ),
            asyncio.to_thread(
                intensity_source.fetch_intensity,
                period.intensity_start,
                period.intensity_end,
            ),
            asyncio.to_thread(
                generation_source.fetch_generation_mix,
                period.intensity_start,
                period.intensity_end,
            ),
        )
    except Exception as e:
        logger.error(f"Fetching series for {period.label} failed: {e}")
        raise
    return consumption, intensity, generation_mix


async def compute_footprint(
    meter_id: str,
    year_month: str,
    config: FootprintConfig | None = None,
    *,
    consumption_source: OpenvoltSource | None = None,
    intensity_source: CarbonIntensitySource | None = None,
    generation_source: CarbonIntensitySource | None = None,
) -> FootprintReport:
    """Compute the carbon footprint of one meter over one calendar month.

    Sources not supplied by the caller are built from ``config`` and closed
    before returning.
    """
    period = resolve_period(year_month)

    owned = []
    if None in (consumption_source, intensity_source, generation_source):
        owned = list(create_sources(config or FootprintConfig()))
        meter, intensity_default, generation_default = owned
        consumption_source = consumption_source or meter
        intensity_source = intensity_source or intensity_default
        generation_source = generation_source or generation_default

    try:
        logger.info(f"Computing footprint for meter {meter_id}, {period.label}")
        consumption, intensity, generation_mix = await fetch_series(
            meter_id, period, consumption_source, intensity_source, generation_source
        )
    finally:
        for source in owned:
            source.close()

    index = build_carbon_index(intensity, generation_mix)
    result = aggregate(consumption, index)

    quality = calculate_data_quality_metrics(consumption, period.expected_intervals)
    quality["forecast_intervals"] = result.forecast_intervals
    if quality["coverage_pct"] < 100.0:
        logger.warning(
            f"Consumption covers {quality['coverage_pct']:.1f}% of {period.label}"
        )

    logger.info(
        f"{period.label}: {result.total_energy_kwh:.2f} kWh, "
        f"{result.total_emissions_kg:.2f} kgCO2"
    )
    return FootprintReport(
        meter_id=meter_id, period=period, result=result, quality=quality
    )


def run_footprint(
    meter_id: str,
    year_month: str,
    config: FootprintConfig | None = None,
    **kwargs,
) -> FootprintReport:
    """Synchronous wrapper around :func:`compute_footprint`."""
    return asyncio.run(compute_footprint(meter_id, year_month, config, **kwargs))
