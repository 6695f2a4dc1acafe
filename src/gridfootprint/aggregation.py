"""Carbon intensity index and monthly footprint aggregation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .ingestion.schema import (
    ConsumptionRecord,
    FuelShare,
    GenerationMixRecord,
    IntensityRecord,
)

logger = logging.getLogger(__name__)

ZERO_PERCENT = "0.00%"


@dataclass
class CarbonIndexEntry:
    intensity: float
    mix: list[FuelShare] | None = None
    is_forecast: bool = False


CarbonIndex = dict[str, CarbonIndexEntry]


def build_carbon_index(
    intensity: Iterable[IntensityRecord],
    generation_mix: Iterable[GenerationMixRecord],
) -> CarbonIndex:
    """Join the intensity and generation-mix series on interval key.

    The intensity series is authoritative: a mix record whose interval has no
    intensity is dropped, so every entry has an intensity and only some have
    a mix. A repeated intensity key overwrites the earlier value.
    """
    index: CarbonIndex = {}
    for record in intensity:
        key = record.key
        entry = index.get(key)
        if entry is None:
            index[key] = CarbonIndexEntry(
                intensity=record.intensity_g_per_kwh, is_forecast=record.is_forecast
            )
        else:
            entry.intensity = record.intensity_g_per_kwh
            entry.is_forecast = record.is_forecast

    dropped = 0
    for record in generation_mix:
        entry = index.get(record.key)
        if entry is None:
            dropped += 1
            continue
        entry.mix = list(record.mix)

    if dropped:
        logger.debug(f"Dropped {dropped} mix records with no matching intensity")
    return index


def format_percentage(value: float) -> str:
    return f"{value:.2f}%"


@dataclass
class AggregateResult:
    """Monthly energy, emissions and emissions-weighted fuel mix."""

    total_energy_kwh: float = 0.0
    total_emissions_kg: float = 0.0
    fuel_mix: dict[str, str] = field(default_factory=dict)
    fuel_emissions_kg: dict[str, float] = field(default_factory=dict)
    matched_intervals: int = 0
    unmatched_intervals: int = 0
    forecast_intervals: int = 0

    @property
    def has_emissions(self) -> bool:
        return self.total_emissions_kg != 0


def fuel_mix_percentages(
    fuel_emissions_kg: dict[str, float], total_emissions_kg: float
) -> dict[str, str]:
    """Convert per-fuel emissions into percentage strings of the total.

    With zero total emissions every fuel is reported as ``0.00%``. A negative
    total (net export) still divides normally.
    """
    if total_emissions_kg == 0:
        if fuel_emissions_kg:
            logger.warning("Total emissions is zero; reporting fuel mix as 0.00%")
        return {fuel: ZERO_PERCENT for fuel in fuel_emissions_kg}

    return {
        fuel: format_percentage(kg / total_emissions_kg * 100.0)
        for fuel, kg in fuel_emissions_kg.items()
    }


def aggregate(
    consumption: Iterable[ConsumptionRecord], index: CarbonIndex
) -> AggregateResult:
    """Fold a consumption series against the carbon index.

    Every record counts toward energy. Only records whose interval is in the
    index contribute emissions (kWh x gCO2/kWh / 1000 = kgCO2), and only
    those with a mix contribute to the fuel breakdown, weighted by the
    interval's emissions.
    """
    result = AggregateResult()
    fuel_kg: dict[str, float] = {}

    for record in consumption:
        result.total_energy_kwh += record.consumption_kwh

        entry = index.get(record.key)
        if entry is None:
            result.unmatched_intervals += 1
            continue

        result.matched_intervals += 1
        if entry.is_forecast:
            result.forecast_intervals += 1
        emissions_kg = record.consumption_kwh * entry.intensity / 1000.0
        result.total_emissions_kg += emissions_kg

        if entry.mix:
            for share in entry.mix:
                fuel_kg[share.fuel] = (
                    fuel_kg.get(share.fuel, 0.0)
                    + share.percentage / 100.0 * emissions_kg
                )

    result.fuel_emissions_kg = fuel_kg
    result.fuel_mix = fuel_mix_percentages(fuel_kg, result.total_emissions_kg)

    if result.unmatched_intervals:
        logger.info(
            f"{result.unmatched_intervals} consumption intervals had no intensity data"
        )
    if result.forecast_intervals:
        logger.info(
            f"{result.forecast_intervals} consumption intervals used forecast intensity"
        )
    return result
