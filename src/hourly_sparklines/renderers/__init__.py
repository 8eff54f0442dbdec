"""Pure rendering functions: numbers and display rows -> glyphs, text, HTML.

All renderers follow the same pattern:
  - Input: sequences, dataclasses or DisplayRow lists
  - Output: glyph lists or str
  - No side effects, no I/O

Public API:
  - sparkline: normalize, render_sparkline
  - weather_utils: WeatherCodeInfo, weather_code_info, worst_weather_code
  - text: format_rows (terminal table)
  - html: build_forecast_html (Jinja2 table fragment)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for HTML renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
