"""Tests for the session controller."""

import pytest

from ecosim.actions import ConservationAction
from ecosim.entities import EntityKind
from ecosim.exceptions import SessionStateError, UnknownParameterError
from ecosim.metrics import compute_metrics
from ecosim.session import format_elapsed
from ecosim.state import AirQuality, EnvironmentalState


def test_new_session_starts_from_default_state(session):
    assert session.state == EnvironmentalState()
    assert session.metrics == compute_metrics(EnvironmentalState())
    assert not session.running
    assert len(session.simulator.entities) == 28


def test_set_parameter_recomputes_and_regenerates(session):
    metrics = session.set_parameter("forestCover", 100)
    assert session.state.forest_cover == 100
    assert metrics == compute_metrics(session.state)
    assert len(session.simulator.entities_of(EntityKind.FLORA)) == 30


def test_set_parameter_accepts_snake_case(session):
    session.set_parameter("renewable_energy", 100)
    assert session.metrics.air_quality is AirQuality.EXCELLENT
    assert len(session.simulator.entities_of(EntityKind.ENERGY_SOURCE)) == 8


def test_set_parameter_clamps_to_domain(session):
    session.set_parameter("co2Levels", 900)
    session.set_parameter("temperature", -10)
    assert session.state.co2_levels == 500
    assert session.state.temperature == -2


def test_population_is_stored_but_changes_nothing(session):
    before = session.metrics
    session.set_parameter("population", 90)
    assert session.state.population == 90
    assert session.metrics == before


def test_unknown_parameter_is_rejected(session):
    with pytest.raises(UnknownParameterError):
        session.set_parameter("oceanAcidity", 5)


def test_parameters_are_locked_while_running(session):
    session.start()
    with pytest.raises(SessionStateError):
        session.set_parameter("forestCover", 10)
    with pytest.raises(SessionStateError):
        session.reset()


def test_stop_builds_summary_from_final_state(session, fake_clock, manual_scheduler):
    session.start()
    manual_scheduler.run_frames(30)
    fake_clock.advance(75.4)
    summary = session.stop()

    assert not session.running
    assert not manual_scheduler.pending
    assert summary.elapsed_seconds == 75
    assert summary.final_metrics == session.metrics
    assert summary.final_state == session.state
    assert summary.sustainability_index == 48
    assert summary.xp_earned == 96
    assert summary.credits_earned == 14
    assert summary.economic_value == 48000
    assert summary.biodiversity_change == 28 - 75
    assert session.last_summary is summary


def test_elapsed_resets_between_sessions(session, fake_clock):
    session.start()
    fake_clock.advance(10)
    session.stop()
    assert session.elapsed_seconds == 0
    session.start()
    fake_clock.advance(3)
    assert session.elapsed_seconds == 3


def test_stop_while_idle_is_rejected(session):
    with pytest.raises(SessionStateError):
        session.stop()


def test_double_start_is_rejected(session):
    session.start()
    with pytest.raises(SessionStateError):
        session.start()


class TestConservationActions:
    def test_actions_require_a_running_session(self, session):
        with pytest.raises(SessionStateError):
            session.apply_action(ConservationAction.PLANT_TREES)

    def test_plant_trees(self, session):
        session.start()
        reward = session.apply_action(ConservationAction.PLANT_TREES)
        assert session.state.forest_cover == 70
        assert reward.xp_earned == 25
        assert reward.credits_earned == 10
        assert session.metrics == compute_metrics(session.state)

    def test_add_solar_caps_at_hundred(self, session):
        session.update_state(EnvironmentalState(renewable_energy=95))
        session.start()
        reward = session.apply_action(ConservationAction.ADD_SOLAR)
        assert session.state.renewable_energy == 100
        assert reward.xp_earned == 50
        assert reward.credits_earned == 20

    def test_wind_power_cuts_co2_with_floor(self, session):
        session.update_state(EnvironmentalState(co2_levels=360, renewable_energy=20))
        session.start()
        reward = session.apply_action(ConservationAction.WIND_POWER)
        assert session.state.renewable_energy == 28
        assert session.state.co2_levels == 350
        assert reward.xp_earned == 40
        assert reward.credits_earned == 16
        assert session.rewards == [reward]

    def test_reward_ledger_entry(self, session):
        session.start()
        entry = session.apply_action(ConservationAction.ADD_SOLAR).to_dict()
        assert entry["type"] == "simulation_action"
        assert entry["description"] == "Add Solar: Applied 10 unit impact in ecosystem simulation"


def test_reset_restores_defaults(session):
    session.set_parameter("industryLevel", 100)
    session.reset()
    assert session.state == EnvironmentalState()


def test_update_state_clamps_every_field(session):
    session.update_state(EnvironmentalState(forest_cover=150, industry_level=-5))
    assert session.state.forest_cover == 100
    assert session.state.industry_level == 0


@pytest.mark.parametrize("seconds, expected", [(0, "0:00"), (9, "0:09"), (75, "1:15"), (600, "10:00")])
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
