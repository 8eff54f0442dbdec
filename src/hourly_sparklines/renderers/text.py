"""Terminal rendering of display rows as a two-column table."""

from __future__ import annotations

from collections.abc import Sequence

from hourly_sparklines.schemas import DisplayRow, Glyph, HighlightStyle

ANSI_RESET = "\x1b[0m"
ANSI_BOLD = "\x1b[1m"
ANSI_COLORS: dict[HighlightStyle, str] = {
    HighlightStyle.SUCCESS: "\x1b[32m",
    HighlightStyle.WARNING: "\x1b[33m",
    HighlightStyle.ERROR: "\x1b[31m",
    HighlightStyle.ACCENT: "\x1b[36m",
}


def _paint(text: str, style: HighlightStyle | None, *, color: bool) -> str:
    if not color or style is None:
        return text
    return f"{ANSI_COLORS[style]}{text}{ANSI_RESET}"


def _format_glyph(glyph: Glyph, *, color: bool) -> str:
    text = _paint(glyph.char, glyph.style, color=color)
    if glyph.is_current and color:
        text = f"{ANSI_BOLD}{text}{ANSI_RESET}"
    return glyph.marker + text


def format_value(row: DisplayRow, *, color: bool = True) -> str:
    """Secondary column of a row, optionally with ANSI colors."""
    sparkline = "".join(_format_glyph(g, color=color) for g in row.glyphs)
    parts = [p for p in (row.text, sparkline) if p]
    return " ".join(parts)


def format_rows(rows: Sequence[DisplayRow], *, color: bool = True) -> str:
    """
    Lay out rows as ``label  value`` lines with the labels left-aligned.

    Args:
        rows: Display rows in output order.
        color: Emit ANSI color codes for highlight styles.

    Returns:
        Multi-line string (no trailing newline). Empty if there are no rows.
    """
    if not rows:
        return ""

    width = max(len(row.label) for row in rows)
    lines = []
    for row in rows:
        label = _paint(row.label.ljust(width), row.style, color=color)
        lines.append(f"{label}  {format_value(row, color=color)}")
    return "\n".join(lines)
