"""Process configuration, read once at startup."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HOST = "0.0.0.0"
PORT = 8080


class Settings(BaseSettings):
    """Environment-sourced settings.

    ``openweather_api_key`` may be empty: the server still starts and reports
    the missing key on each request.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    openweather_api_key: str = Field(default="", validation_alias="OPENWEATHER_API_KEY")
    log_dir: str = Field(default="logs", validation_alias="WEATHER_PROXY_LOG_DIR")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
