"""Open-Meteo API client constants and shared configuration.

API docs:
  - Forecast: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Hourly variables we request from Open-Meteo
HOURLY_VARS = [
    "temperature_2m",
    "precipitation_probability",
    "precipitation",
    "weather_code",
]

# Every hourly array we need, including the timestamps
REQUIRED_HOURLY_FIELDS = ["time", *HOURLY_VARS]
