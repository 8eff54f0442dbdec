"""Open-Meteo weather data source.

Fetches today's hourly forecast from Open-Meteo (free, no API key).

Public API:
  - hourly: fetch_hourly_forecast, parse_hourly_forecast, validate_coordinates
  - models: HourlySample, ForecastError
  - client: API URL, requested hourly variables
"""

from hourly_sparklines.datasources.weather.client import HOURLY_VARS, OPEN_METEO_API
from hourly_sparklines.datasources.weather.hourly import (
    fetch_hourly_forecast,
    parse_hourly_forecast,
    validate_coordinates,
)
from hourly_sparklines.datasources.weather.models import ForecastError, HourlySample

__all__ = [
    "HOURLY_VARS",
    "OPEN_METEO_API",
    "ForecastError",
    "HourlySample",
    "fetch_hourly_forecast",
    "parse_hourly_forecast",
    "validate_coordinates",
]
