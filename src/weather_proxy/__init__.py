"""weather_proxy — OpenWeather proxy with coarse temperature classification."""

from weather_proxy.classifier import TemperatureType, classify
from weather_proxy.client import AsyncWeatherClient, WeatherClient
from weather_proxy.exceptions import (
    DecodeError,
    InvalidCoordinateError,
    MissingAPIKeyError,
    SerializationError,
    UpstreamConnectionError,
    UpstreamShapeError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    WeatherProxyError,
)

__all__ = [
    "AsyncWeatherClient",
    "DecodeError",
    "InvalidCoordinateError",
    "MissingAPIKeyError",
    "SerializationError",
    "TemperatureType",
    "UpstreamConnectionError",
    "UpstreamShapeError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "WeatherClient",
    "WeatherProxyError",
    "classify",
]

__version__ = "0.1.0"
