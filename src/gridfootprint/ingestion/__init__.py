"""Data sources for consumption, intensity and generation-mix series."""

from .base import BaseSource
from .carbon_intensity import CarbonIntensitySource
from .openvolt import OpenvoltSource
from .schema import ConsumptionRecord, FuelShare, GenerationMixRecord, IntensityRecord

__all__ = [
    "BaseSource",
    "CarbonIntensitySource",
    "OpenvoltSource",
    "ConsumptionRecord",
    "FuelShare",
    "GenerationMixRecord",
    "IntensityRecord",
]
