"""Coarse temperature classification."""

from __future__ import annotations

from enum import Enum

COLD_BELOW = 0.0
HOT_ABOVE = 30.0


class TemperatureType(str, Enum):
    """Temperature categories reported in ``TemperatureType``."""

    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"


def classify(temperature: float) -> TemperatureType:
    """Map a temperature to cold, moderate or hot.

    The thresholds are compared against the raw upstream value, which is
    Kelvin by default. Both bounds are inclusive for ``moderate``.
    """
    if temperature < COLD_BELOW:
        return TemperatureType.COLD
    if temperature > HOT_ABOVE:
        return TemperatureType.HOT
    return TemperatureType.MODERATE
