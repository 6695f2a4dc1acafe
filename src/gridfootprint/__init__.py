"""Monthly carbon footprint from half-hourly meter and grid data."""

from .aggregation import (
    AggregateResult,
    CarbonIndexEntry,
    aggregate,
    build_carbon_index,
)
from .exceptions import (
    ConfigError,
    FootprintError,
    IntervalKeyError,
    NoDataError,
    PeriodError,
    SourceError,
    TransportError,
)
from .intervals import interval_key, parse_timestamp
from .periods import BillingPeriod, resolve_period
from .pipeline import FootprintReport, compute_footprint, run_footprint

__version__ = "0.1.0"

__all__ = [
    "AggregateResult",
    "BillingPeriod",
    "CarbonIndexEntry",
    "ConfigError",
    "FootprintError",
    "FootprintReport",
    "IntervalKeyError",
    "NoDataError",
    "PeriodError",
    "SourceError",
    "TransportError",
    "aggregate",
    "build_carbon_index",
    "compute_footprint",
    "interval_key",
    "parse_timestamp",
    "resolve_period",
    "run_footprint",
]
