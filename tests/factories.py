"""Record builders shared by the test modules."""

from gridfootprint.ingestion.schema import (
    ConsumptionRecord,
    FuelShare,
    GenerationMixRecord,
    IntensityRecord,
)


def consumption(start, kwh):
    return ConsumptionRecord(interval_start=start, consumption_kwh=kwh)


def intensity(start, value, is_forecast=False):
    return IntensityRecord(
        interval_start=start, intensity_g_per_kwh=value, is_forecast=is_forecast
    )


def generation_mix(start, **shares):
    return GenerationMixRecord(
        interval_start=start,
        mix=[FuelShare(fuel=fuel, percentage=pct) for fuel, pct in shares.items()],
    )
