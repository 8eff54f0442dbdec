"""Single-day hourly forecast from Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from hourly_sparklines.datasources.weather.client import (
    HOURLY_VARS,
    OPEN_METEO_API,
    REQUIRED_HOURLY_FIELDS,
)
from hourly_sparklines.datasources.weather.models import ForecastError, HourlySample
from hourly_sparklines.services.http import session

logger = logging.getLogger(__name__)


def validate_coordinates(lat: float, lon: float) -> None:
    """Raise ValueError if ``lat``/``lon`` are outside the valid ranges."""
    if not -90 <= lat <= 90:
        msg = f"Latitude must be between -90 and 90, got {lat}"
        raise ValueError(msg)
    if not -180 <= lon <= 180:
        msg = f"Longitude must be between -180 and 180, got {lon}"
        raise ValueError(msg)


def fetch_hourly_forecast(
    lat: float,
    lon: float,
    *,
    timezone: str = "auto",
    temperature_unit: str = "celsius",
) -> list[HourlySample]:
    """
    Fetch today's hourly forecast.

    Args:
        lat: Latitude (-90 to 90).
        lon: Longitude (-180 to 180).
        timezone: Timezone name for the returned hours ("auto" = location's own).
        temperature_unit: "celsius" or "fahrenheit".

    Returns:
        HourlySample list sorted by time (normally 24 entries).

    Raises:
        ValueError: Coordinates out of range.
        requests.HTTPError: Non-2xx response.
        ForecastError: Response is missing fields or malformed.
    """
    validate_coordinates(lat, lon)

    params: dict[str, str | int | float] = {
        "latitude": lat,
        "longitude": lon,
        "hourly": ",".join(HOURLY_VARS),
        "timezone": timezone,
        "temperature_unit": temperature_unit,
        "forecast_days": 1,
    }

    logger.debug("Requesting hourly forecast: %s", params)
    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()

    samples = parse_hourly_forecast(data)
    logger.info("Fetched %d hourly samples for (%s, %s)", len(samples), lat, lon)
    return samples


def parse_hourly_forecast(data: Any) -> list[HourlySample]:
    """
    Convert an Open-Meteo response into HourlySample objects.

    Either every sample is built or ForecastError is raised; partial
    results are never returned.
    """
    if not isinstance(data, dict):
        msg = f"Forecast response is not a JSON object: {type(data).__name__}"
        raise ForecastError(msg)

    hourly = data.get("hourly")
    if not isinstance(hourly, dict):
        msg = "Forecast response has no 'hourly' data"
        raise ForecastError(msg)

    missing = [name for name in REQUIRED_HOURLY_FIELDS if hourly.get(name) is None]
    if missing:
        msg = f"Forecast response is missing hourly fields: {', '.join(missing)}"
        raise ForecastError(msg)

    not_arrays = [
        name for name in REQUIRED_HOURLY_FIELDS if not isinstance(hourly[name], list)
    ]
    if not_arrays:
        msg = f"Forecast hourly fields are not arrays: {', '.join(not_arrays)}"
        raise ForecastError(msg)

    times = hourly["time"]
    lengths = {name: len(hourly[name]) for name in REQUIRED_HOURLY_FIELDS}
    if len(set(lengths.values())) != 1:
        msg = f"Forecast hourly arrays differ in length: {lengths}"
        raise ForecastError(msg)

    samples = []
    for i, time_str in enumerate(times):
        row = [hourly[name][i] for name in HOURLY_VARS]
        if None in row:
            msg = f"Forecast has null values at {time_str}"
            raise ForecastError(msg)
        try:
            hour = datetime.fromisoformat(time_str).hour
        except (TypeError, ValueError):
            msg = f"Forecast has an invalid timestamp: {time_str!r}"
            raise ForecastError(msg) from None

        temperature, precip_prob, precip, code = row
        try:
            sample = HourlySample(
                hour=hour,
                temperature=float(temperature),
                precipitation_probability=float(precip_prob),
                precipitation=float(precip),
                weather_code=int(code),
            )
        except (TypeError, ValueError):
            msg = f"Forecast has non-numeric values at {time_str}: {row!r}"
            raise ForecastError(msg) from None
        samples.append(sample)

    return samples
