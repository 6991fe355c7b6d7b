"""Outbound response model returned by the ``/weather`` endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from weather_proxy.classifier import TemperatureType
from weather_proxy.models.weather import Alert


class WeatherSummary(BaseModel):
    """Reshaped weather data.

    ``alerts`` is ``None`` when the upstream sent no alerts, and the key is
    left out of the serialized body in that case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    weather_condition: str = Field(alias="WeatherCondition")
    temperature: str = Field(alias="Temperature")
    temperature_type: TemperatureType = Field(alias="TemperatureType")
    alerts: list[Alert] | None = Field(default=None, alias="Alerts")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, dropping ``Alerts`` when there are none."""
        exclude = set() if self.alerts else {"alerts"}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
