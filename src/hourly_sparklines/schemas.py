"""
Domain models for hourly sparklines.

Pydantic models for user configuration and display output.  The hourly
forecast itself is a plain dataclass (see ``datasources/weather/models.py``)
since it comes straight off the wire and is discarded after one render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Configuration
# =============================================================================


class HighlightStyle(StrEnum):
    """Symbolic highlight tags, resolved to colors by the presentation layer."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    ACCENT = "accent"


class TimeWindow(BaseModel):
    """A named, half-open ``[start_hour, end_hour)`` span of the day.

    Hours are not range-checked here: an out-of-range or inverted window is
    reported by ``analysis.windows.validate_windows`` but still used as written.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., description="Display label, also the window's identity")
    start_hour: int = Field(..., description="First hour covered (inclusive)")
    end_hour: int = Field(..., description="Hour the window stops at (exclusive)")
    style: HighlightStyle = HighlightStyle.SUCCESS

    def covers(self, hour: int) -> bool:
        """Whether ``hour`` falls inside the window."""
        return self.start_hour <= hour < self.end_hour


# =============================================================================
# Display output
# =============================================================================


class RowKind(StrEnum):
    """Which part of the forecast a display row summarizes."""

    TEMPERATURE = "temperature"
    PRECIPITATION = "precipitation"
    WINDOW = "window"


@dataclass(frozen=True)
class Glyph:
    """One sparkline position."""

    char: str
    style: HighlightStyle | None = None
    marker: str = ""

    @property
    def text(self) -> str:
        """The glyph with its "now" marker, if any."""
        return self.marker + self.char

    @property
    def is_current(self) -> bool:
        return bool(self.marker)


@dataclass(frozen=True)
class DisplayRow:
    """A (label, value) pair ready for a two-column table.

    ``glyphs`` is set for sparkline rows; ``text`` holds any plain text that
    precedes or replaces the sparkline.
    """

    kind: RowKind
    label: str
    text: str = ""
    glyphs: tuple[Glyph, ...] = field(default_factory=tuple)
    style: HighlightStyle | None = None

    @property
    def value(self) -> str:
        """Secondary column as plain text."""
        sparkline = "".join(g.text for g in self.glyphs)
        if self.text and sparkline:
            return f"{self.text} {sparkline}"
        return self.text or sparkline
