"""Metrics engine: environmental state -> ecological scorecard.

Every function here is pure. The formulas are simple monotonic heuristics
tuned for how responsive they feel on the sliders, not for physical accuracy.
Inputs are assumed to be clamped by the caller; the only guards are the
floors and clamps inside the formulas themselves.
"""

from ecosim.config.environment import (
    AIR_QUALITY_GOOD_THRESHOLD,
    AIR_QUALITY_MODERATE_THRESHOLD,
    AIR_QUALITY_POOR_THRESHOLD,
    RENEWABLE_CO2_OFFSET,
    SPECIES_COUNT_BASE,
    SPECIES_COUNT_FLOOR,
)
from ecosim.math_utils import clamp, round_half_up, round_int
from ecosim.state import AirQuality, EcosystemMetrics, EnvironmentalState


def calculate_species_count(state: EnvironmentalState) -> int:
    co2_impact = (state.co2_levels - 350) * -2
    forest_impact = (state.forest_cover - 50) * 4
    temperature_impact = state.temperature * -100
    raw = SPECIES_COUNT_BASE + co2_impact + forest_impact + temperature_impact
    return round_int(max(SPECIES_COUNT_FLOOR, raw))


def classify_air_quality(co2_levels: float, renewable_energy: float) -> AirQuality:
    """Classify air quality from CO2 offset by the renewable share.

    Thresholds are strict and checked from the most restrictive band down.
    """
    adjusted_co2 = co2_levels - renewable_energy * RENEWABLE_CO2_OFFSET
    if adjusted_co2 > AIR_QUALITY_POOR_THRESHOLD:
        return AirQuality.POOR
    if adjusted_co2 > AIR_QUALITY_MODERATE_THRESHOLD:
        return AirQuality.MODERATE
    if adjusted_co2 > AIR_QUALITY_GOOD_THRESHOLD:
        return AirQuality.GOOD
    return AirQuality.EXCELLENT


def calculate_carbon_storage(state: EnvironmentalState) -> float:
    """Gigatons stored by forests minus industrial release, one decimal."""
    stored = (state.forest_cover / 100) * 3.5
    released = (state.industry_level / 100) * 1.2
    return round_half_up(max(0.0, stored - released), 1)


def calculate_biodiversity_index(state: EnvironmentalState) -> int:
    raw = (
        state.forest_cover * 0.6
        + (100 - state.co2_levels + 300) / 10
        + state.renewable_energy * 0.3
        - state.temperature * 5
        - state.industry_level * 0.2
    )
    return round_int(clamp(raw, 0, 100))


def calculate_sustainability_score(state: EnvironmentalState) -> int:
    raw = (
        state.renewable_energy * 0.4
        + state.forest_cover * 0.3
        + (100 - state.industry_level + 50) * 0.2
        + (450 - state.co2_levels) / 10
        - state.temperature * 3
    )
    return round_int(clamp(raw, 0, 100))


def compute_metrics(state: EnvironmentalState) -> EcosystemMetrics:
    """Compute the full scorecard for ``state``.

    Args:
        state: Current environmental parameters

    Returns:
        A new EcosystemMetrics; equal states always give equal metrics
    """
    return EcosystemMetrics(
        species_count=calculate_species_count(state),
        air_quality=classify_air_quality(state.co2_levels, state.renewable_energy),
        carbon_storage=calculate_carbon_storage(state),
        biodiversity_index=calculate_biodiversity_index(state),
        sustainability_score=calculate_sustainability_score(state),
    )
