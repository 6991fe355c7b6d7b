"""Custom exceptions for the weather proxy."""

from __future__ import annotations


class WeatherProxyError(Exception):
    """Base exception for all weather proxy errors."""


class MissingAPIKeyError(WeatherProxyError):
    """Raised when no OpenWeather API key is configured."""

    def __init__(self) -> None:
        super().__init__("Open Weather API key not set")


class InvalidCoordinateError(WeatherProxyError):
    """Raised when a latitude or longitude query parameter cannot be parsed."""

    def __init__(self, param: str, value: str) -> None:
        self.param = param
        self.value = value
        super().__init__(f"Invalid {param}")


class UpstreamConnectionError(WeatherProxyError):
    """Raised when the upstream API cannot be reached or the transfer fails."""


class UpstreamTimeoutError(UpstreamConnectionError):
    """Raised when a request to the upstream API times out."""


class UpstreamStatusError(WeatherProxyError):
    """Raised when the upstream API answers with a status other than 200."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP request failed with status code {status_code}")


class DecodeError(WeatherProxyError):
    """Raised when the upstream body is not JSON of the expected shape."""


class UpstreamShapeError(DecodeError):
    """Raised when a decoded upstream payload lacks data the proxy needs."""


class SerializationError(WeatherProxyError):
    """Raised when the outbound response cannot be encoded as JSON."""
