"""Render a footprint result as nested key/value text."""

import json
from typing import Any

from .aggregation import AggregateResult


def format_report(result: AggregateResult) -> dict[str, Any]:
    return {
        "Monthly Energy Consumed (kWh)": f"{result.total_energy_kwh:.2f} kWh",
        "Monthly Carbon Emission (kgs)": f"{result.total_emissions_kg:.2f} kgs",
        "Monthly Fuel Mix (%)": dict(result.fuel_mix),
    }


def render_report(result: AggregateResult, indent: int = 4) -> str:
    """Return the report as indented JSON."""
    return json.dumps(format_report(result), indent=indent)
