"""Hourly sparklines - today's forecast as compact trend graphs.

Architecture::

    datasources/   Open-Meteo hourly forecast -> HourlySample
    analysis/      Window validation, projection and row assembly
    renderers/     Sparkline glyphs, weather code table, text and HTML output
    services/      Shared HTTP client with retry
    config.py      Settings (location, units, time windows)

Data flow: datasources -> analysis (validate, project, aggregate)
-> renderers (sparklines) -> display rows -> text/HTML
"""

__version__ = "0.1.0"

from hourly_sparklines.config import Settings
from hourly_sparklines.schemas import DisplayRow, HighlightStyle, TimeWindow

__all__ = ["DisplayRow", "HighlightStyle", "Settings", "TimeWindow", "__version__"]
