"""Shared fixtures: raw API payloads."""

import pytest


@pytest.fixture
def intensity_payload():
    """Raw /intensity response covering two half-hours."""
    return {
        "data": [
            {
                "from": "2024-01-01T00:00Z",
                "to": "2024-01-01T00:30Z",
                "intensity": {"forecast": 190, "actual": 200, "index": "moderate"},
            },
            {
                "from": "2024-01-01T00:30Z",
                "to": "2024-01-01T01:00Z",
                "intensity": {"forecast": 100, "actual": None, "index": "low"},
            },
        ]
    }


@pytest.fixture
def generation_payload():
    """Raw /generation response covering two half-hours."""
    return {
        "data": [
            {
                "from": "2024-01-01T00:00Z",
                "to": "2024-01-01T00:30Z",
                "generationmix": [
                    {"fuel": "gas", "perc": 50},
                    {"fuel": "wind", "perc": 50},
                ],
            },
            {
                "from": "2024-01-01T00:30Z",
                "to": "2024-01-01T01:00Z",
                "generationmix": [
                    {"fuel": "gas", "perc": 20},
                    {"fuel": "wind", "perc": 80},
                ],
            },
        ]
    }


@pytest.fixture
def consumption_payload():
    """Raw interval-data response covering two half-hours."""
    return {
        "startInterval": "2024-01-01T00:00:00.000Z",
        "data": [
            {
                "start_interval": "2024-01-01T00:00:00.000Z",
                "meter_id": "meter-1",
                "consumption": "10",
                "consumption_units": "kWh",
            },
            {
                "start_interval": "2024-01-01T00:30:00.000Z",
                "meter_id": "meter-1",
                "consumption": "5",
                "consumption_units": "kWh",
            },
        ],
    }
