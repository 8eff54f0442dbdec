"""Hourly weather data models."""

from __future__ import annotations

from dataclasses import dataclass


class ForecastError(Exception):
    """Upstream forecast data is missing or malformed."""


@dataclass(frozen=True)
class HourlySample:
    """A single forecasted hour.

    ``hour`` is already local to the forecast location (0-23).
    """

    hour: int
    temperature: float
    precipitation_probability: float
    precipitation: float
    weather_code: int

    @property
    def is_wet(self) -> bool:
        """Whether there is any chance of precipitation this hour."""
        return self.precipitation_probability > 0
