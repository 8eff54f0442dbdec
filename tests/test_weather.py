"""
Tests for the Open-Meteo hourly forecast data source.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from hourly_sparklines.datasources import weather
from hourly_sparklines.datasources.weather import ForecastError, HourlySample


def make_payload(hours: int = 3) -> dict[str, Any]:
    return {
        "hourly": {
            "time": [f"2026-10-18T{h:02d}:00" for h in range(hours)],
            "temperature_2m": [10.5 + h for h in range(hours)],
            "precipitation_probability": [0, 20, 55][:hours],
            "precipitation": [0.0, 0.1, 1.4][:hours],
            "weather_code": [1, 61, 63][:hours],
        }
    }


class TestHourlySample:
    """Test HourlySample dataclass."""

    def test_is_wet(self) -> None:
        dry = HourlySample(
            hour=3, temperature=5.0, precipitation_probability=0, precipitation=0, weather_code=0
        )
        wet = HourlySample(
            hour=3, temperature=5.0, precipitation_probability=5, precipitation=0, weather_code=0
        )
        assert not dry.is_wet
        assert wet.is_wet


class TestParseHourlyForecast:
    """Test turning API responses into HourlySample lists."""

    def test_parses_samples(self) -> None:
        samples = weather.parse_hourly_forecast(make_payload())
        assert samples == [
            HourlySample(0, 10.5, 0.0, 0.0, 1),
            HourlySample(1, 11.5, 20.0, 0.1, 61),
            HourlySample(2, 12.5, 55.0, 1.4, 63),
        ]

    def test_hour_taken_from_timestamp(self) -> None:
        payload = make_payload(1)
        payload["hourly"]["time"] = ["2026-10-18T17:00"]
        assert weather.parse_hourly_forecast(payload)[0].hour == 17

    def test_empty_arrays(self) -> None:
        assert weather.parse_hourly_forecast(make_payload(0)) == []

    def test_missing_hourly(self) -> None:
        with pytest.raises(ForecastError, match="no 'hourly'"):
            weather.parse_hourly_forecast({})

    @pytest.mark.parametrize(
        "field",
        ["time", "temperature_2m", "precipitation_probability", "precipitation", "weather_code"],
    )
    def test_missing_field(self, field: str) -> None:
        payload = make_payload()
        del payload["hourly"][field]
        with pytest.raises(ForecastError, match=field):
            weather.parse_hourly_forecast(payload)

    def test_length_mismatch(self) -> None:
        payload = make_payload()
        payload["hourly"]["weather_code"] = [1]
        with pytest.raises(ForecastError, match="differ in length"):
            weather.parse_hourly_forecast(payload)

    def test_null_value(self) -> None:
        payload = make_payload()
        payload["hourly"]["temperature_2m"][1] = None
        with pytest.raises(ForecastError, match="null"):
            weather.parse_hourly_forecast(payload)

    def test_bad_timestamp(self) -> None:
        payload = make_payload()
        payload["hourly"]["time"][0] = "yesterday"
        with pytest.raises(ForecastError, match="invalid timestamp"):
            weather.parse_hourly_forecast(payload)

    def test_scalar_field(self) -> None:
        payload = make_payload()
        payload["hourly"]["precipitation"] = 0.0
        with pytest.raises(ForecastError, match="not arrays: precipitation"):
            weather.parse_hourly_forecast(payload)

    def test_payload_not_an_object(self) -> None:
        with pytest.raises(ForecastError, match="not a JSON object"):
            weather.parse_hourly_forecast([])

    def test_non_numeric_value(self) -> None:
        payload = make_payload()
        payload["hourly"]["temperature_2m"][2] = "warm"
        with pytest.raises(ForecastError, match="non-numeric"):
            weather.parse_hourly_forecast(payload)


class TestValidateCoordinates:
    @pytest.mark.parametrize(("lat", "lon"), [(0, 0), (90, 180), (-90, -180)])
    def test_valid(self, lat: float, lon: float) -> None:
        weather.validate_coordinates(lat, lon)

    @pytest.mark.parametrize(("lat", "lon"), [(90.1, 0), (-91, 0), (0, 180.5), (0, -181)])
    def test_invalid(self, lat: float, lon: float) -> None:
        with pytest.raises(ValueError):
            weather.validate_coordinates(lat, lon)


class TestFetchHourlyForecast:
    """Test the API call."""

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_fetch(self, mock_get: Mock) -> None:
        """Test fetching and parsing the hourly forecast."""
        mock_response = Mock()
        mock_response.json.return_value = make_payload()
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        samples = weather.fetch_hourly_forecast(lat=45.5, lon=-122.6)

        assert len(samples) == 3
        assert samples[2].weather_code == 63

        mock_get.assert_called_once()
        params = mock_get.call_args.kwargs["params"]
        assert params["latitude"] == 45.5
        assert params["longitude"] == -122.6
        assert params["forecast_days"] == 1
        assert params["hourly"] == (
            "temperature_2m,precipitation_probability,precipitation,weather_code"
        )
        assert params["timezone"] == "auto"
        assert params["temperature_unit"] == "celsius"

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_passes_options(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = make_payload()
        mock_get.return_value = mock_response

        weather.fetch_hourly_forecast(
            1.0, 2.0, timezone="Europe/Berlin", temperature_unit="fahrenheit"
        )

        params = mock_get.call_args.kwargs["params"]
        assert params["timezone"] == "Europe/Berlin"
        assert params["temperature_unit"] == "fahrenheit"

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_get.return_value = mock_response

        with pytest.raises(requests.HTTPError):
            weather.fetch_hourly_forecast(45.5, -122.6)

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_invalid_coordinates_skip_request(self, mock_get: Mock) -> None:
        with pytest.raises(ValueError):
            weather.fetch_hourly_forecast(100.0, 0.0)
        mock_get.assert_not_called()

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_malformed_response(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = {"hourly": {"time": []}}
        mock_get.return_value = mock_response

        with pytest.raises(ForecastError):
            weather.fetch_hourly_forecast(45.5, -122.6)

    @patch("hourly_sparklines.datasources.weather.hourly.session.get")
    def test_non_object_response(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = ["unexpected"]
        mock_get.return_value = mock_response

        with pytest.raises(ForecastError, match="not a JSON object"):
            weather.fetch_hourly_forecast(45.5, -122.6)
