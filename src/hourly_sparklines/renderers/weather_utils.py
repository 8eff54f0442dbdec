"""Weather code lookup for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherCodeInfo:
    """Display glyph and description for a WMO weather code."""

    glyph: str
    description: str


UNKNOWN_CONDITION = WeatherCodeInfo("?", "Unknown")

# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs).
# Codes are ordered by severity: a higher code is a worse condition.
WMO_CONDITIONS: dict[int, WeatherCodeInfo] = {
    0: WeatherCodeInfo("☀", "Clear"),
    1: WeatherCodeInfo("\U0001f324", "Mostly Clear"),
    2: WeatherCodeInfo("⛅", "Partly Cloudy"),
    3: WeatherCodeInfo("☁", "Overcast"),
    45: WeatherCodeInfo("\U0001f32b", "Fog"),
    48: WeatherCodeInfo("\U0001f32b", "Freezing Fog"),
    51: WeatherCodeInfo("\U0001f326", "Light Drizzle"),
    53: WeatherCodeInfo("\U0001f326", "Drizzle"),
    55: WeatherCodeInfo("\U0001f326", "Heavy Drizzle"),
    56: WeatherCodeInfo("\U0001f9ca", "Light Freezing Drizzle"),
    57: WeatherCodeInfo("\U0001f9ca", "Freezing Drizzle"),
    61: WeatherCodeInfo("\U0001f327", "Light Rain"),
    63: WeatherCodeInfo("\U0001f327", "Rain"),
    65: WeatherCodeInfo("\U0001f327", "Heavy Rain"),
    66: WeatherCodeInfo("\U0001f9ca", "Light Freezing Rain"),
    67: WeatherCodeInfo("\U0001f9ca", "Freezing Rain"),
    71: WeatherCodeInfo("\U0001f328", "Light Snow"),
    73: WeatherCodeInfo("\U0001f328", "Snow"),
    75: WeatherCodeInfo("\U0001f328", "Heavy Snow"),
    77: WeatherCodeInfo("\U0001f328", "Snow Grains"),
    80: WeatherCodeInfo("\U0001f326", "Light Showers"),
    81: WeatherCodeInfo("\U0001f327", "Showers"),
    82: WeatherCodeInfo("\U0001f327", "Heavy Showers"),
    85: WeatherCodeInfo("\U0001f328", "Light Snow Showers"),
    86: WeatherCodeInfo("\U0001f328", "Snow Showers"),
    95: WeatherCodeInfo("⛈", "Thunderstorm"),
    96: WeatherCodeInfo("⛈", "Thunderstorm w/ Hail"),
    99: WeatherCodeInfo("⛈", "Heavy Thunderstorm"),
}


def weather_code_info(code: int) -> WeatherCodeInfo:
    """Look up the glyph and description for a WMO weather code."""
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITION)


def worst_weather_code(codes: Iterable[int]) -> int | None:
    """Return the most severe code, or None if there are none."""
    return max(codes, default=None)
