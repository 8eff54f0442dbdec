"""Tests for sparkline normalization and rendering."""

from __future__ import annotations

import pytest

from hourly_sparklines.renderers.sparkline import (
    NOW_MARKER,
    SPARK_BLOCKS,
    normalize,
    render_sparkline,
)
from hourly_sparklines.schemas import Glyph, HighlightStyle


class TestNormalize:
    """Test mapping values onto the eight glyph levels."""

    def test_min_is_lowest_level(self) -> None:
        assert normalize(2.0, 2.0, 10.0) == 0

    def test_max_is_highest_level(self) -> None:
        """Value equal to max is capped at level 7, not 8."""
        assert normalize(10.0, 2.0, 10.0) == 7

    def test_midpoint(self) -> None:
        assert normalize(5.0, 0.0, 10.0) == 4

    def test_floors_between_levels(self) -> None:
        # 8 * 1.9 / 10 = 1.52 -> 1
        assert normalize(1.9, 0.0, 10.0) == 1

    def test_negative_range(self) -> None:
        assert normalize(-10.0, -10.0, -2.0) == 0
        assert normalize(-2.0, -10.0, -2.0) == 7

    def test_all_zero_series_is_floor(self) -> None:
        assert normalize(0.0, 0.0, 0.0) == 0

    @pytest.mark.parametrize("value", [3.0, -4.5, 100.0])
    def test_constant_nonzero_series_is_mid(self, value: float) -> None:
        assert normalize(value, value, value) == 4

    def test_levels_are_monotonic(self) -> None:
        levels = [normalize(v / 10, 0.0, 10.0) for v in range(101)]
        assert levels == sorted(levels)
        assert set(levels) == set(range(8))


class TestRenderSparkline:
    """Test converting a series into glyphs."""

    def test_empty_input(self) -> None:
        assert render_sparkline([]) == []

    def test_length_matches_input(self) -> None:
        values = [float(v) for v in range(24)]
        assert len(render_sparkline(values)) == 24

    def test_glyph_characters(self) -> None:
        glyphs = render_sparkline([0.0, 5.0, 10.0])
        assert [g.char for g in glyphs] == [SPARK_BLOCKS[0], SPARK_BLOCKS[4], SPARK_BLOCKS[7]]

    def test_all_zero_series_renders_flat_floor(self) -> None:
        glyphs = render_sparkline([0.0] * 5)
        assert {g.char for g in glyphs} == {SPARK_BLOCKS[0]}

    def test_constant_series_renders_mid(self) -> None:
        glyphs = render_sparkline([12.5] * 5)
        assert {g.char for g in glyphs} == {SPARK_BLOCKS[4]}

    def test_unhighlighted_glyphs_have_no_style(self) -> None:
        glyphs = render_sparkline([1.0, 2.0, 3.0])
        assert all(g.style is None for g in glyphs)

    def test_highlights_applied_by_index(self) -> None:
        highlights = {1: HighlightStyle.WARNING, 2: HighlightStyle.SUCCESS}
        glyphs = render_sparkline([1.0, 2.0, 3.0, 4.0], highlights)
        assert [g.style for g in glyphs] == [
            None,
            HighlightStyle.WARNING,
            HighlightStyle.SUCCESS,
            None,
        ]

    def test_current_index_gets_marker(self) -> None:
        glyphs = render_sparkline([1.0, 2.0, 3.0], current_index=1)
        assert glyphs[1].marker == NOW_MARKER
        assert glyphs[1].text == NOW_MARKER + glyphs[1].char
        assert glyphs[1].is_current
        assert not glyphs[0].is_current
        assert not glyphs[2].is_current

    def test_current_index_out_of_range_is_ignored(self) -> None:
        glyphs = render_sparkline([1.0, 2.0], current_index=7)
        assert not any(g.is_current for g in glyphs)

    def test_is_pure(self) -> None:
        """Same input, same output."""
        values = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]
        highlights = {0: HighlightStyle.ACCENT}
        first = render_sparkline(values, highlights, 3)
        second = render_sparkline(values, highlights, 3)
        assert first == second
        assert highlights == {0: HighlightStyle.ACCENT}

    def test_explicit_bounds_match_computed(self) -> None:
        values = [2.0, 7.0, 4.0, 10.0]
        assert render_sparkline(values, bounds=(2.0, 10.0)) == render_sparkline(values)

    def test_explicit_bounds_used(self) -> None:
        glyphs = render_sparkline([5.0], bounds=(0.0, 10.0))
        assert glyphs[0].char == SPARK_BLOCKS[4]
        glyphs = render_sparkline([0.0, 0.0], bounds=(0.0, 0.0))
        assert {g.char for g in glyphs} == {SPARK_BLOCKS[0]}

    def test_returns_glyphs(self) -> None:
        glyphs = render_sparkline([1.0])
        assert glyphs == [Glyph(char=SPARK_BLOCKS[4])]
