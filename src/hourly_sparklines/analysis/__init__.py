"""Forecast projection: windows + hourly samples -> display rows.

Dependency rule: analysis/ imports datasource *models* only.
It never fetches data and never formats for a specific output.

Modules:
  - windows: validate_windows, project_window, merge_highlights
  - forecast_rows: build_forecast / build_rows (orchestrates the above
    and the sparkline renderer)
"""

from hourly_sparklines.analysis.forecast_rows import (
    ForecastStats,
    ForecastView,
    build_forecast,
    build_rows,
    compute_stats,
)
from hourly_sparklines.analysis.windows import (
    InvalidReason,
    InvalidWindow,
    ValidationReport,
    WindowOverlap,
    WindowProjection,
    merge_highlights,
    project_window,
    validate_windows,
)

__all__ = [
    "ForecastStats",
    "ForecastView",
    "InvalidReason",
    "InvalidWindow",
    "ValidationReport",
    "WindowOverlap",
    "WindowProjection",
    "build_forecast",
    "build_rows",
    "compute_stats",
    "merge_highlights",
    "project_window",
    "validate_windows",
]
