"""Sparkline rendering: numeric series -> bounded-height glyphs.

Each value is normalized against its own series' min/max onto one of eight
levels, then mapped to a block character (lowest to highest).

Degenerate ranges:
  - all-zero series -> level 0 (nothing happening sits on the floor)
  - constant non-zero series -> level 4 (flat, but not empty)
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from hourly_sparklines.schemas import Glyph, HighlightStyle

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"
LEVELS = len(SPARK_BLOCKS)
FLAT_LEVEL = 4

# Narrow no-break space placed before the glyph for the current hour
NOW_MARKER = "\u202f"


def normalize(value: float, lo: float, hi: float) -> int:
    """Map ``value`` in ``[lo, hi]`` to a level in ``[0, 7]``.

    Args:
        value: A member of the series.
        lo: Series minimum.
        hi: Series maximum.

    Returns:
        Integer glyph level.
    """
    span = hi - lo
    if span == 0:
        return 0 if hi == 0 else FLAT_LEVEL
    return min(LEVELS - 1, math.floor(LEVELS * (value - lo) / span))


def render_sparkline(
    values: Sequence[float],
    highlights: Mapping[int, HighlightStyle] | None = None,
    current_index: int | None = None,
    bounds: tuple[float, float] | None = None,
) -> list[Glyph]:
    """
    Render a numeric series as styled glyphs, one per value.

    Args:
        values: Ordered samples.
        highlights: Index -> style for highlighted positions.
        current_index: Position to mark as "now", if any.
        bounds: Precomputed (min, max) of ``values``; computed here if omitted.

    Returns:
        List of Glyph, same length as ``values``. Empty for empty input.
    """
    if not values:
        return []

    highlights = highlights or {}
    lo, hi = bounds if bounds is not None else (min(values), max(values))

    return [
        Glyph(
            char=SPARK_BLOCKS[normalize(v, lo, hi)],
            style=highlights.get(i),
            marker=NOW_MARKER if i == current_index else "",
        )
        for i, v in enumerate(values)
    ]
