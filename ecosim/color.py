"""Color selection utilities.

This module maps ecological conditions to the colors used by the renderer.
These are pure functions with no simulation or pygame dependencies, so they
can be tested in isolation.
"""

from typing import Tuple

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

RGB = Tuple[int, int, int]


def tree_color_for_health(health: float) -> RGB:
    """Pick a crown color: vibrant green when healthy, red when failing.

    Example:
        >>> tree_color_for_health(0.9)
        (34, 197, 94)
        >>> tree_color_for_health(0.1)
        (220, 38, 38)
    """
    if health > 0.8:
        return TREE_VIBRANT_COLOR
    if health > 0.6:
        return TREE_YELLOW_GREEN_COLOR
    if health > 0.4:
        return TREE_YELLOW_COLOR
    return TREE_UNHEALTHY_COLOR


def pollution_level(co2_levels: float) -> float:
    """Fraction of the CO2 slider range above its clean floor (350 ppm)."""
    return (co2_levels - 350) / 150


def sky_color_for_co2(co2_levels: float) -> RGB:
    """Top-of-sky color, shifting from clear blue toward smog gold."""
    pollution = pollution_level(co2_levels)
    if pollution > 0.7:
        return SKY_HEAVY_POLLUTION_COLOR
    if pollution > 0.4:
        return SKY_MODERATE_POLLUTION_COLOR
    if pollution > 0.2:
        return SKY_LIGHT_POLLUTION_COLOR
    return SKY_CLEAN_COLOR


def lerp_color(start: RGB, end: RGB, t: float) -> RGB:
    """Linearly interpolate between two colors, ``t`` clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    return (
        int(round(start[0] + (end[0] - start[0]) * t)),
        int(round(start[1] + (end[1] - start[1]) * t)),
        int(round(start[2] + (end[2] - start[2]) * t)),
    )
