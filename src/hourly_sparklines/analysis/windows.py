"""Time window validation and projection onto the hourly forecast.

Validation is advisory: it reports inverted, out-of-range and overlapping
windows but never changes them.  Projection always uses each window's bounds
exactly as configured.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from itertools import combinations

from hourly_sparklines.datasources.weather.models import HourlySample
from hourly_sparklines.renderers.weather_utils import (
    WeatherCodeInfo,
    weather_code_info,
    worst_weather_code,
)
from hourly_sparklines.schemas import HighlightStyle, TimeWindow

MIN_HOUR = 0
MAX_HOUR = 23


class InvalidReason(StrEnum):
    """Why a window was flagged as invalid."""

    OUT_OF_RANGE = "out-of-range"
    INVALID_RANGE = "invalid-range"


@dataclass(frozen=True)
class InvalidWindow:
    name: str
    reason: InvalidReason

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


@dataclass(frozen=True)
class WindowOverlap:
    """Two windows share the hours ``[start, end)``."""

    first: str
    second: str
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.first} and {self.second} overlap {self.start}:00-{self.end}:00"


@dataclass(frozen=True)
class ValidationReport:
    """The windows as given, plus any diagnostics found in them."""

    windows: tuple[TimeWindow, ...]
    invalid: tuple[InvalidWindow, ...] = ()
    overlaps: tuple[WindowOverlap, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.invalid and not self.overlaps


@dataclass(frozen=True)
class WindowProjection:
    """Which samples a window covers and the worst weather among them."""

    window: TimeWindow
    matched_indices: tuple[int, ...] = ()
    highlights: dict[int, HighlightStyle] = field(default_factory=dict)
    worst_code: int | None = None

    @property
    def worst(self) -> WeatherCodeInfo | None:
        """Glyph and description of the worst code, None if nothing matched."""
        if self.worst_code is None:
            return None
        return weather_code_info(self.worst_code)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def check_window(window: TimeWindow) -> InvalidReason | None:
    """Return the first problem with a single window, or None if it is valid."""
    hours = (window.start_hour, window.end_hour)
    if any(h < MIN_HOUR or h > MAX_HOUR for h in hours):
        return InvalidReason.OUT_OF_RANGE
    if window.end_hour <= window.start_hour:
        return InvalidReason.INVALID_RANGE
    return None


def find_overlap(first: TimeWindow, second: TimeWindow) -> WindowOverlap | None:
    """Return the shared span of two windows, or None if they are disjoint."""
    start = max(first.start_hour, second.start_hour)
    end = min(first.end_hour, second.end_hour)
    if start < end:
        return WindowOverlap(first.name, second.name, start, end)
    return None


def validate_windows(windows: Sequence[TimeWindow]) -> ValidationReport:
    """
    Check configured windows for invalid bounds and pairwise overlaps.

    Args:
        windows: Windows in configuration order.

    Returns:
        ValidationReport carrying the unchanged windows and diagnostics.
        Pairs are reported in configuration order.
    """
    invalid = []
    for window in windows:
        reason = check_window(window)
        if reason is not None:
            invalid.append(InvalidWindow(window.name, reason))

    overlaps = []
    for first, second in combinations(windows, 2):
        overlap = find_overlap(first, second)
        if overlap is not None:
            overlaps.append(overlap)

    return ValidationReport(tuple(windows), tuple(invalid), tuple(overlaps))


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


def project_window(samples: Sequence[HourlySample], window: TimeWindow) -> WindowProjection:
    """
    Select the samples inside ``window`` and find the worst weather among them.

    Args:
        samples: Hourly forecast, ordered by time.
        window: Window to project, used with its literal bounds.

    Returns:
        WindowProjection. ``worst_code`` is None when no sample matched.
    """
    matched = tuple(i for i, s in enumerate(samples) if window.covers(s.hour))
    return WindowProjection(
        window=window,
        matched_indices=matched,
        highlights={i: window.style for i in matched},
        worst_code=worst_weather_code(samples[i].weather_code for i in matched),
    )


def merge_highlights(projections: Sequence[WindowProjection]) -> dict[int, HighlightStyle]:
    """Merge per-window highlights; the earliest window keeps a contested index."""
    merged: dict[int, HighlightStyle] = {}
    for projection in projections:
        for index, style in projection.highlights.items():
            merged.setdefault(index, style)
    return merged
