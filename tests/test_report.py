"""Tests for report rendering."""

import json

from gridfootprint.aggregation import AggregateResult
from gridfootprint.report import format_report, render_report


def test_format_report():
    result = AggregateResult(
        total_energy_kwh=1234.5678,
        total_emissions_kg=210.004,
        fuel_mix={"gas": "61.20%", "wind": "38.80%"},
    )

    assert format_report(result) == {
        "Monthly Energy Consumed (kWh)": "1234.57 kWh",
        "Monthly Carbon Emission (kgs)": "210.00 kgs",
        "Monthly Fuel Mix (%)": {"gas": "61.20%", "wind": "38.80%"},
    }


def test_render_report_is_indented_json():
    result = AggregateResult(total_energy_kwh=10, total_emissions_kg=2)
    text = render_report(result)

    assert json.loads(text)["Monthly Carbon Emission (kgs)"] == "2.00 kgs"
    assert '\n    "Monthly Energy Consumed (kWh)"' in text
