"""Weather proxy data models."""

from weather_proxy.models.summary import WeatherSummary
from weather_proxy.models.weather import Alert, Condition, Coord, MainBlock, WeatherResponse

__all__ = [
    "Alert",
    "Condition",
    "Coord",
    "MainBlock",
    "WeatherResponse",
    "WeatherSummary",
]
