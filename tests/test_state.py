import pytest

from ecosim.exceptions import UnknownParameterError
from ecosim.state import (
    INITIAL_DISPLAY_METRICS,
    AirQuality,
    EnvironmentalState,
    normalize_parameter_name,
)
from ecosim.metrics import compute_metrics


def test_defaults_match_classroom_scenario():
    state = EnvironmentalState()
    assert state.to_dict() == {
        "co2Levels": 410.0,
        "forestCover": 65.0,
        "temperature": 1.2,
        "renewableEnergy": 25.0,
        "population": 50.0,
        "industryLevel": 60.0,
    }


def test_from_dict_accepts_both_spellings():
    state = EnvironmentalState.from_dict({"co2Levels": 450, "forest_cover": 10})
    assert state.co2_levels == 450
    assert state.forest_cover == 10
    assert state.temperature == 1.2


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(UnknownParameterError):
        EnvironmentalState.from_dict({"salinity": 3})


def test_state_is_immutable():
    state = EnvironmentalState()
    with pytest.raises(AttributeError):
        state.co2_levels = 500
    changed = state.with_changes(co2_levels=500)
    assert state.co2_levels == 410
    assert changed.co2_levels == 500


def test_clamped_enforces_domains():
    state = EnvironmentalState(
        co2_levels=300, forest_cover=120, temperature=9, renewable_energy=-1, population=101, industry_level=50
    ).clamped()
    assert (state.co2_levels, state.forest_cover, state.temperature) == (350, 100, 5)
    assert (state.renewable_energy, state.population, state.industry_level) == (0, 100, 50)


def test_normalize_parameter_name():
    assert normalize_parameter_name("industryLevel") == "industry_level"
    assert normalize_parameter_name("temperature") == "temperature"
    with pytest.raises(KeyError):
        normalize_parameter_name("speciesCount")


def test_initial_display_metrics_are_a_static_placeholder():
    assert INITIAL_DISPLAY_METRICS.species_count == 1247
    assert INITIAL_DISPLAY_METRICS.air_quality is AirQuality.GOOD
    assert INITIAL_DISPLAY_METRICS != compute_metrics(EnvironmentalState())


def test_metrics_to_dict():
    data = compute_metrics(EnvironmentalState()).to_dict()
    assert data == {
        "speciesCount": 1320,
        "airQuality": "Excellent",
        "carbonStorage": 1.6,
        "biodiversityIndex": 28,
        "sustainabilityScore": 48,
    }
