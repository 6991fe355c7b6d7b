"""Upstream current-weather data models.

Scalar fields are strict: a string where a number belongs, or a non-finite
number, fails validation instead of being coerced.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class Coord(BaseModel):
    """Coordinates echoed back by the upstream API."""

    model_config = ConfigDict(frozen=True)

    lon: FiniteFloat | None = None
    lat: FiniteFloat | None = None


class Condition(BaseModel):
    """One entry of the upstream condition sequence."""

    model_config = ConfigDict(frozen=True)

    id: StrictInt | None = None
    main: StrictStr | None = None
    description: StrictStr = ""


class MainBlock(BaseModel):
    """Main measurement block. ``temp`` is Kelvin unless the caller asks otherwise."""

    model_config = ConfigDict(frozen=True)

    temp: FiniteFloat


class Alert(BaseModel):
    """Weather alert. Keys beyond ``event`` and ``description`` are kept as sent."""

    model_config = ConfigDict(frozen=True, extra="allow")

    event: StrictStr = ""
    description: StrictStr = ""


class WeatherResponse(BaseModel):
    """Decoded body of one upstream current-weather response."""

    model_config = ConfigDict(frozen=True)

    coord: Coord | None = None
    weather: list[Condition] = Field(default_factory=list)
    main: MainBlock
    alerts: list[Alert] | None = None
