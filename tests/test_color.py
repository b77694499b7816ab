"""Tests for ecosim.color module."""

from ecosim.color import lerp_color, pollution_level, sky_color_for_co2, tree_color_for_health
from ecosim.config.display import (
    SKY_CLEAN_COLOR,
    SKY_HEAVY_POLLUTION_COLOR,
    SKY_LIGHT_POLLUTION_COLOR,
    SKY_MODERATE_POLLUTION_COLOR,
    TREE_UNHEALTHY_COLOR,
    TREE_VIBRANT_COLOR,
    TREE_YELLOW_COLOR,
    TREE_YELLOW_GREEN_COLOR,
)


class TestTreeColor:
    def test_bands(self):
        assert tree_color_for_health(1.0) == TREE_VIBRANT_COLOR
        assert tree_color_for_health(0.7) == TREE_YELLOW_GREEN_COLOR
        assert tree_color_for_health(0.5) == TREE_YELLOW_COLOR
        assert tree_color_for_health(0.2) == TREE_UNHEALTHY_COLOR

    def test_band_edges_are_exclusive(self):
        assert tree_color_for_health(0.8) == TREE_YELLOW_GREEN_COLOR
        assert tree_color_for_health(0.6) == TREE_YELLOW_COLOR


class TestSkyColor:
    def test_pollution_level_spans_slider_range(self):
        assert pollution_level(350) == 0.0
        assert pollution_level(500) == 1.0

    def test_bands(self):
        assert sky_color_for_co2(350) == SKY_CLEAN_COLOR
        assert sky_color_for_co2(390) == SKY_LIGHT_POLLUTION_COLOR
        assert sky_color_for_co2(430) == SKY_MODERATE_POLLUTION_COLOR
        assert sky_color_for_co2(480) == SKY_HEAVY_POLLUTION_COLOR


def test_lerp_color_endpoints_and_clamp():
    start, end = (0, 0, 0), (200, 100, 50)
    assert lerp_color(start, end, 0.0) == start
    assert lerp_color(start, end, 1.0) == end
    assert lerp_color(start, end, 0.5) == (100, 50, 25)
    assert lerp_color(start, end, 2.0) == end
