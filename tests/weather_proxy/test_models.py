"""Tests for Pydantic model deserialization and the outbound summary."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from weather_proxy.classifier import TemperatureType
from weather_proxy.models.summary import WeatherSummary
from weather_proxy.models.weather import Alert, WeatherResponse
from tests.conftest import MINIMAL_WEATHER, SAMPLE_ALERTS, SAMPLE_WEATHER_WITH_ALERTS


class TestWeatherResponseModel:
    def test_parse(self) -> None:
        weather = WeatherResponse.model_validate(SAMPLE_WEATHER_WITH_ALERTS)
        assert weather.coord is not None
        assert weather.coord.lat == 52.52
        assert [c.id for c in weather.weather] == [500, 701]
        assert weather.weather[0].main == "Rain"
        assert weather.main.temp == 284.2
        assert weather.alerts is not None
        assert weather.alerts[0].event == "Frost"

    def test_optional_fields(self) -> None:
        weather = WeatherResponse.model_validate(MINIMAL_WEATHER)
        assert weather.coord is None
        assert weather.weather[0].id is None
        assert weather.alerts is None

    def test_missing_weather_defaults_empty(self) -> None:
        weather = WeatherResponse.model_validate({"main": {"temp": 1.0}})
        assert weather.weather == []

    def test_main_required(self) -> None:
        with pytest.raises(Exception):
            WeatherResponse.model_validate({"weather": []})

    def test_frozen(self) -> None:
        weather = WeatherResponse.model_validate(MINIMAL_WEATHER)
        with pytest.raises(Exception):
            weather.alerts = []  # type: ignore[misc]


class TestAlertModel:
    def test_extra_keys_kept(self) -> None:
        alert = Alert.model_validate(SAMPLE_ALERTS[0])
        assert alert.model_dump() == SAMPLE_ALERTS[0]


class TestWeatherSummary:
    def _summary(self, alerts: list[Alert] | None) -> WeatherSummary:
        return WeatherSummary(
            weather_condition="clear sky",
            temperature="25.50",
            temperature_type=TemperatureType.MODERATE,
            alerts=alerts,
        )

    def test_payload_without_alerts(self) -> None:
        payload = self._summary(None).to_payload()
        assert payload == {
            "WeatherCondition": "clear sky",
            "Temperature": "25.50",
            "TemperatureType": "moderate",
        }
        assert list(payload) == ["WeatherCondition", "Temperature", "TemperatureType"]

    def test_empty_alerts_key_absent(self) -> None:
        assert "Alerts" not in self._summary([]).to_payload()

    def test_alerts_verbatim(self) -> None:
        alerts = [Alert.model_validate(a) for a in SAMPLE_ALERTS]
        payload = self._summary(alerts).to_payload()
        assert payload["Alerts"] == SAMPLE_ALERTS


class TestStrictDecoding:
    def test_integer_temperature_accepted(self) -> None:
        weather = WeatherResponse.model_validate({"main": {"temp": 25}})
        assert weather.main.temp == 25.0

    @pytest.mark.parametrize(
        "body",
        [
            {"main": {"temp": "25.5"}},
            {"main": {"temp": float("nan")}},
            {"main": {"temp": float("inf")}},
            {"main": {"temp": 1.0}, "weather": [{"description": 7}]},
            {"main": {"temp": 1.0}, "weather": [{"id": "500"}]},
            {"main": {"temp": 1.0}, "coord": {"lat": "52.5"}},
            {"main": {"temp": 1.0}, "alerts": [{"event": 1}]},
        ],
    )
    def test_mistyped_fields_rejected(self, body: dict) -> None:
        with pytest.raises(ValidationError):
            WeatherResponse.model_validate(body)
