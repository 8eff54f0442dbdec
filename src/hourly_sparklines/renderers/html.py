"""HTML table fragment for the forecast rows."""

from __future__ import annotations

from collections.abc import Sequence

from hourly_sparklines.renderers import render_template
from hourly_sparklines.schemas import DisplayRow, Glyph


def _glyph_classes(glyph: Glyph) -> str:
    classes = ["spark"]
    if glyph.style is not None:
        classes.append(f"hl-{glyph.style}")
    if glyph.is_current:
        classes.append("now")
    return " ".join(classes)


def build_forecast_html(rows: Sequence[DisplayRow]) -> str:
    """Build an HTML table with one row per display row."""
    if not rows:
        return "<p>No forecast data available.</p>"

    table = []
    for row in rows:
        table.append(
            {
                "kind": str(row.kind),
                "label": row.label,
                "label_class": f"hl-{row.style}" if row.style is not None else "",
                "text": row.text,
                "glyphs": [
                    {"text": g.text, "classes": _glyph_classes(g)} for g in row.glyphs
                ],
            }
        )

    return render_template("forecast.html.j2", rows=table)
