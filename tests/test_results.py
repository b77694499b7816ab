"""Tests for results summaries and rewards."""

import pytest

from ecosim.results import action_reward, build_results_summary
from ecosim.state import AirQuality, EcosystemMetrics, EnvironmentalState


def make_metrics(sustainability=68, biodiversity=75):
    return EcosystemMetrics(
        species_count=1247,
        air_quality=AirQuality.GOOD,
        carbon_storage=2.3,
        biodiversity_index=biodiversity,
        sustainability_score=sustainability,
    )


def test_rewards_from_final_metrics():
    summary = build_results_summary(120, make_metrics(), EnvironmentalState())
    assert summary.xp_earned == 136
    assert summary.credits_earned == 38
    assert summary.economic_value == 68000
    assert summary.sustainability_index == 68


def test_reward_floors():
    summary = build_results_summary(5, make_metrics(sustainability=10, biodiversity=4), EnvironmentalState())
    assert summary.xp_earned == 50
    assert summary.credits_earned == 10


def test_deltas_against_baselines():
    state = EnvironmentalState(co2_levels=451, temperature=2.2)
    summary = build_results_summary(60, make_metrics(biodiversity=60), state)
    assert summary.biodiversity_change == -15
    assert summary.carbon_change == pytest.approx(10.0)
    assert summary.temperature_change == pytest.approx(1.0)


def test_baseline_state_has_no_deltas():
    summary = build_results_summary(60, make_metrics(), EnvironmentalState())
    assert summary.biodiversity_change == 0
    assert summary.carbon_change == 0
    assert summary.temperature_change == 0


def test_summary_is_immutable():
    summary = build_results_summary(1, make_metrics(), EnvironmentalState())
    with pytest.raises(AttributeError):
        summary.xp_earned = 1000


def test_to_dict_uses_ledger_keys():
    data = build_results_summary(42, make_metrics(), EnvironmentalState()).to_dict()
    assert data["timeElapsed"] == 42
    assert data["finalMetrics"]["airQuality"] == "Good"
    assert data["finalMetrics"]["sustainabilityScore"] == 68
    assert data["finalState"]["co2Levels"] == 410
    assert data["xpEarned"] == 136
    assert data["creditsEarned"] == 38


def test_action_reward_floors():
    reward = action_reward("Plant Trees", 2)
    assert reward.xp_earned == 25
    assert reward.credits_earned == 5
