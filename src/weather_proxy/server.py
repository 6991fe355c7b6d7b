"""HTTP front end: the ``/weather`` handler and server bootstrap."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from weather_proxy.api_logging import configure_log_dir, log_request_call
from weather_proxy.classifier import classify
from weather_proxy.client import AsyncWeatherClient
from weather_proxy.config import HOST, PORT, Settings, get_settings
from weather_proxy.exceptions import (
    InvalidCoordinateError,
    MissingAPIKeyError,
    SerializationError,
    UpstreamShapeError,
    WeatherProxyError,
)
from weather_proxy.models.summary import WeatherSummary
from weather_proxy.models.weather import WeatherResponse

logger = logging.getLogger(__name__)

# Plain decimal with optional exponent: no whitespace, no digit separators.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def require_api_key(settings: Settings) -> str:
    if not settings.openweather_api_key:
        raise MissingAPIKeyError()
    return settings.openweather_api_key


def parse_coordinate(raw: str, param: str) -> float:
    """Parse a query value as a finite float, naming ``param`` on failure."""
    if not _DECIMAL_RE.fullmatch(raw):
        raise InvalidCoordinateError(param, raw)
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidCoordinateError(param, raw) from exc
    if not math.isfinite(value):
        raise InvalidCoordinateError(param, raw)
    return value


def first_value(values: list[str]) -> str:
    """Return the first occurrence of a repeated query key, or ``""``."""
    return values[0] if values else ""


def headline_condition(weather: WeatherResponse) -> str:
    """Return the first condition description.

    Raises:
        UpstreamShapeError: If the upstream condition sequence is empty.
    """
    if not weather.weather:
        raise UpstreamShapeError("upstream returned no weather conditions")
    return weather.weather[0].description


def summarize(weather: WeatherResponse) -> WeatherSummary:
    """Reshape an upstream response into the outbound summary."""
    temp = weather.main.temp
    return WeatherSummary(
        weather_condition=headline_condition(weather),
        temperature=f"{temp:.2f}",
        temperature_type=classify(temp),
        alerts=weather.alerts or None,
    )


def render_summary(summary: WeatherSummary) -> JSONResponse:
    try:
        return JSONResponse(summary.to_payload(), status_code=200)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def create_app(
    settings: Settings | None = None,
    client: AsyncWeatherClient | None = None,
) -> FastAPI:
    """Build the application with its settings and upstream client injected.

    A client passed in by the caller is left open on shutdown.
    """
    settings = settings or get_settings()
    configure_log_dir(settings.log_dir)
    owns_client = client is None
    upstream = client or AsyncWeatherClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_client:
            await upstream.close()

    app = FastAPI(title="Weather Proxy", version="0.1.0", lifespan=lifespan)

    @app.get("/weather", response_model=None)
    @log_request_call
    async def weather(
        lat: list[str] = Query(default=[]),
        lon: list[str] = Query(default=[]),
    ):
        try:
            api_key = require_api_key(settings)
        except MissingAPIKeyError as exc:
            return PlainTextResponse(str(exc), status_code=500)

        try:
            lat_value = parse_coordinate(first_value(lat), "latitude")
            lon_value = parse_coordinate(first_value(lon), "longitude")
        except InvalidCoordinateError as exc:
            return PlainTextResponse(str(exc), status_code=400)

        try:
            current = await upstream.current(lat_value, lon_value, api_key=api_key)
            summary = summarize(current)
        except WeatherProxyError as exc:
            return PlainTextResponse(
                f"Error fetching weather data: {exc}", status_code=500
            )

        try:
            return render_summary(summary)
        except SerializationError as exc:
            return PlainTextResponse(
                f"Error encoding JSON response: {exc}", status_code=500
            )

    return app


def main() -> None:
    """Load settings, then serve the app on the fixed port."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s"
    )
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server is listening on :%d...", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
