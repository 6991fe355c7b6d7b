"""Public client classes for the OpenWeather current-weather endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weather_proxy._http import DEFAULT_BASE_URL, AsyncTransport, SyncTransport
from weather_proxy.api_logging import log_api_call
from weather_proxy.exceptions import DecodeError
from weather_proxy.models.weather import WeatherResponse

WEATHER_ENDPOINT = "/weather"


def build_query_params(lat: float, lon: float, api_key: str) -> list[tuple[str, str]]:
    """Build the upstream query string.

    Floats are rendered with ``str`` so no precision is dropped.
    """
    return [("lat", str(lat)), ("lon", str(lon)), ("appid", api_key)]


def _validate(data: Any) -> WeatherResponse:
    """Validate a decoded body against the upstream response model."""
    try:
        return WeatherResponse.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"Failed to validate weather response: {exc}") from exc


class WeatherClient:
    """Synchronous client for the OpenWeather API.

    Usage:
        with WeatherClient() as client:
            weather = client.current(52.52, 13.405, api_key="...")
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._transport = SyncTransport(base_url=base_url)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def current(self, lat: float, lon: float, *, api_key: str) -> WeatherResponse:
        """Get current weather for a coordinate pair."""
        data = self._transport.get(WEATHER_ENDPOINT, build_query_params(lat, lon, api_key))
        return _validate(data)


class AsyncWeatherClient:
    """Asynchronous client for the OpenWeather API.

    Usage:
        async with AsyncWeatherClient() as client:
            weather = await client.current(52.52, 13.405, api_key="...")
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._transport = AsyncTransport(base_url=base_url)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def current(self, lat: float, lon: float, *, api_key: str) -> WeatherResponse:
        """Get current weather for a coordinate pair."""
        data = await self._transport.get(
            WEATHER_ENDPOINT, build_query_params(lat, lon, api_key)
        )
        return _validate(data)
