"""Shared test fixtures and sample upstream responses."""

from __future__ import annotations

import logging

import pytest

import weather_proxy.api_logging as api_logging

BASE_URL = "https://api.openweathermap.org/data/2.5"
WEATHER_URL = f"{BASE_URL}/weather"
API_KEY = "test-key"


MINIMAL_WEATHER = {
    "main": {"temp": 25.5},
    "weather": [{"description": "clear sky"}],
}

SAMPLE_WEATHER = {
    "coord": {"lon": 13.405, "lat": 52.52},
    "weather": [
        {"id": 500, "main": "Rain", "description": "light rain"},
        {"id": 701, "main": "Mist", "description": "mist"},
    ],
    "base": "stations",
    "main": {"temp": 284.2, "feels_like": 283.4, "humidity": 87},
    "name": "Berlin",
    "cod": 200,
}

SAMPLE_ALERTS = [
    {
        "sender_name": "Deutscher Wetterdienst",
        "event": "Frost",
        "start": 1700000000,
        "end": 1700030000,
        "description": "Ground frost expected overnight.",
        "tags": ["Extreme low temperature"],
    },
]

SAMPLE_WEATHER_WITH_ALERTS = {**SAMPLE_WEATHER, "alerts": SAMPLE_ALERTS}

EMPTY_CONDITIONS = {
    "main": {"temp": 12.0},
    "weather": [],
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Redirect the API call log into tmp_path for every test."""
    old_logger = api_logging._logger
    old_dir = api_logging._LOG_DIR
    old_file = api_logging._LOG_FILE

    named_logger = logging.getLogger("weather_proxy.api")
    named_logger.handlers.clear()

    api_logging._logger = None
    api_logging.configure_log_dir(str(tmp_path / "logs"))

    yield tmp_path / "logs"

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    api_logging._logger = old_logger
    api_logging._LOG_DIR = old_dir
    api_logging._LOG_FILE = old_file
