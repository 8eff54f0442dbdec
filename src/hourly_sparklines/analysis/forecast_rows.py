"""Assemble display rows from the hourly forecast and configured windows.

Row order is fixed: temperature first, precipitation second (only when any
hour has a chance of rain), then one row per window that matched at least
one hour, in configuration order.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from hourly_sparklines.analysis.windows import (
    ValidationReport,
    WindowProjection,
    merge_highlights,
    project_window,
    validate_windows,
)
from hourly_sparklines.datasources.weather.models import HourlySample
from hourly_sparklines.renderers.sparkline import render_sparkline
from hourly_sparklines.renderers.weather_utils import weather_code_info
from hourly_sparklines.schemas import DisplayRow, HighlightStyle, RowKind, TimeWindow

logger = logging.getLogger(__name__)

WINDOW_MARKER = "●"
RANGE_SEPARATOR = "–"

TEMPERATURE_UNITS = {
    "celsius": "°C",
    "fahrenheit": "°F",
}


@dataclass(frozen=True)
class ForecastStats:
    """Ranges and maxima over the whole forecast."""

    temp_min: float
    temp_max: float
    precip_prob_min: float
    precip_prob_max: float
    wet_worst_code: int | None  # worst code among hours with any rain chance

    @property
    def has_precipitation(self) -> bool:
        return self.wet_worst_code is not None


@dataclass(frozen=True)
class ForecastView:
    """Display rows plus the window diagnostics gathered while building them."""

    rows: tuple[DisplayRow, ...]
    report: ValidationReport


def compute_stats(samples: Sequence[HourlySample]) -> ForecastStats:
    """Single pass over ``samples`` (must be non-empty)."""
    first = samples[0]
    temp_min = temp_max = first.temperature
    pp_min = pp_max = first.precipitation_probability
    wet_worst: int | None = None

    for s in samples:
        temp_min = min(temp_min, s.temperature)
        temp_max = max(temp_max, s.temperature)
        pp_min = min(pp_min, s.precipitation_probability)
        pp_max = max(pp_max, s.precipitation_probability)
        if s.is_wet:
            wet_worst = s.weather_code if wet_worst is None else max(wet_worst, s.weather_code)

    return ForecastStats(temp_min, temp_max, pp_min, pp_max, wet_worst)


def find_hour_index(samples: Sequence[HourlySample], hour: int) -> int | None:
    """Position of the first sample for ``hour``, or None."""
    return next((i for i, s in enumerate(samples) if s.hour == hour), None)


def _log_diagnostics(report: ValidationReport) -> None:
    for invalid in report.invalid:
        logger.warning("Invalid time window %s", invalid)
    for overlap in report.overlaps:
        logger.warning("Overlapping time windows: %s", overlap)


def _temperature_row(
    samples: Sequence[HourlySample],
    stats: ForecastStats,
    highlights: dict[int, HighlightStyle],
    current_index: int | None,
    unit: str,
) -> DisplayRow:
    label = f"{math.floor(stats.temp_min)}{RANGE_SEPARATOR}{math.floor(stats.temp_max)}{unit}"
    glyphs = render_sparkline(
        [s.temperature for s in samples],
        highlights,
        current_index,
        bounds=(stats.temp_min, stats.temp_max),
    )
    return DisplayRow(kind=RowKind.TEMPERATURE, label=label, glyphs=tuple(glyphs))


def _precipitation_row(
    samples: Sequence[HourlySample],
    stats: ForecastStats,
    wet_code: int,
    highlights: dict[int, HighlightStyle],
    current_index: int | None,
) -> DisplayRow:
    info = weather_code_info(wet_code)
    label = f"{round(stats.precip_prob_max)}% {info.description}"
    glyphs = render_sparkline(
        [s.precipitation_probability for s in samples],
        highlights,
        current_index,
        bounds=(stats.precip_prob_min, stats.precip_prob_max),
    )
    return DisplayRow(kind=RowKind.PRECIPITATION, label=label, glyphs=tuple(glyphs))


def _window_row(projection: WindowProjection) -> DisplayRow | None:
    info = projection.worst
    if info is None:
        return None
    window = projection.window
    return DisplayRow(
        kind=RowKind.WINDOW,
        label=f"{WINDOW_MARKER} {window.name}",
        text=f"{info.glyph} {info.description.lower()}",
        style=window.style,
    )


def build_forecast(
    samples: Sequence[HourlySample],
    current_hour: int | None,
    windows: Sequence[TimeWindow],
    *,
    temperature_unit: str = "celsius",
) -> ForecastView:
    """
    Build all display rows for one forecast.

    Args:
        samples: Hourly forecast, ordered by time.
        current_hour: Hour to mark as "now" (no marker if no sample has it).
        windows: Configured windows, in configuration order.
        temperature_unit: "celsius" or "fahrenheit", for the range label.

    Returns:
        ForecastView with rows and the window validation report. Rows are
        empty when there are no samples.
    """
    report = validate_windows(windows)
    _log_diagnostics(report)

    if not samples:
        return ForecastView(rows=(), report=report)

    projections = [project_window(samples, w) for w in report.windows]
    highlights = merge_highlights(projections)
    stats = compute_stats(samples)
    current_index = find_hour_index(samples, current_hour) if current_hour is not None else None
    unit = TEMPERATURE_UNITS.get(temperature_unit, "°")

    rows = [_temperature_row(samples, stats, highlights, current_index, unit)]
    if stats.wet_worst_code is not None:
        rows.append(
            _precipitation_row(samples, stats, stats.wet_worst_code, highlights, current_index)
        )
    for projection in projections:
        row = _window_row(projection)
        if row is not None:
            rows.append(row)

    return ForecastView(rows=tuple(rows), report=report)


def build_rows(
    samples: Sequence[HourlySample],
    current_hour: int | None,
    windows: Sequence[TimeWindow],
    *,
    temperature_unit: str = "celsius",
) -> list[DisplayRow]:
    """Same as ``build_forecast`` but returns only the rows."""
    view = build_forecast(samples, current_hour, windows, temperature_unit=temperature_unit)
    return list(view.rows)
