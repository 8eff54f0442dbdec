"""
Application settings.

Values come from environment variables prefixed ``HOURLY_SPARKLINES_`` or
from a ``.env`` file.  Windows are given as JSON, e.g.::

    HOURLY_SPARKLINES_WINDOWS='[{"name": "Commute", "start_hour": 7, "end_hour": 9}]'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hourly_sparklines.schemas import HighlightStyle, TimeWindow


def _default_windows() -> list[TimeWindow]:
    return [
        TimeWindow(name="Morning commute", start_hour=7, end_hour=9),
        TimeWindow(
            name="Evening commute", start_hour=17, end_hour=19, style=HighlightStyle.WARNING
        ),
    ]


class Settings(BaseSettings):
    """Location, display and time window configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HOURLY_SPARKLINES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "hourly-sparklines"
    app_env: str = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Location (default: Portland, OR)
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)
    timezone: str = "auto"
    temperature_unit: Literal["celsius", "fahrenheit"] = "celsius"

    windows: list[TimeWindow] = Field(default_factory=_default_windows)
    color: bool = True


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
