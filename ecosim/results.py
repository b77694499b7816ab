"""Session results and reward computation.

The summary is a plain immutable value. The caller hands it to the reward
and persistence collaborator; nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ecosim.config.environment import (
    ACTION_CREDITS_PER_IMPACT,
    ACTION_XP_PER_IMPACT,
    BASELINE_BIODIVERSITY,
    BASELINE_CO2,
    BASELINE_TEMPERATURE,
    ECONOMIC_VALUE_PER_POINT,
    MIN_ACTION_CREDITS,
    MIN_ACTION_XP,
    MIN_SESSION_CREDITS,
    MIN_SESSION_XP,
)
from ecosim.math_utils import round_int
from ecosim.state import EcosystemMetrics, EnvironmentalState


@dataclass(frozen=True)
class SimulationResultsSummary:
    """Outcome of one simulator session.

    Attributes:
        elapsed_seconds: Whole seconds the session spent running
        final_metrics: Scorecard at stop
        final_state: Parameters at stop
        biodiversity_change: Biodiversity index minus the baseline (75)
        carbon_change: Percent change of CO2 versus the 410 ppm baseline
        temperature_change: Degrees versus the +1.2 °C baseline
        sustainability_index: Final sustainability score
        economic_value: Sustainability score times 1000
        xp_earned: Experience awarded for the session
        credits_earned: Eco-credits awarded for the session
    """

    elapsed_seconds: int
    final_metrics: EcosystemMetrics
    final_state: EnvironmentalState
    biodiversity_change: int
    carbon_change: float
    temperature_change: float
    sustainability_index: int
    economic_value: int
    xp_earned: int
    credits_earned: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the keys the eco-action ledger expects."""
        return {
            "timeElapsed": self.elapsed_seconds,
            "finalMetrics": self.final_metrics.to_dict(),
            "finalState": self.final_state.to_dict(),
            "biodiversityChange": self.biodiversity_change,
            "carbonChange": self.carbon_change,
            "temperatureChange": self.temperature_change,
            "sustainabilityIndex": self.sustainability_index,
            "economicValue": self.economic_value,
            "xpEarned": self.xp_earned,
            "creditsEarned": self.credits_earned,
        }


def session_xp(metrics: EcosystemMetrics) -> int:
    return max(MIN_SESSION_XP, round_int(metrics.sustainability_score * 2))


def session_credits(metrics: EcosystemMetrics) -> int:
    return max(MIN_SESSION_CREDITS, round_int(metrics.biodiversity_index / 2))


def build_results_summary(
    elapsed_seconds: int,
    final_metrics: EcosystemMetrics,
    final_state: EnvironmentalState,
) -> SimulationResultsSummary:
    """Package a stopped session for the reward collaborator.

    Args:
        elapsed_seconds: Whole seconds spent running
        final_metrics: Metrics at stop
        final_state: Environmental state at stop

    Returns:
        The immutable results summary
    """
    return SimulationResultsSummary(
        elapsed_seconds=elapsed_seconds,
        final_metrics=final_metrics,
        final_state=final_state,
        biodiversity_change=final_metrics.biodiversity_index - BASELINE_BIODIVERSITY,
        carbon_change=(final_state.co2_levels - BASELINE_CO2) / (BASELINE_CO2 / 100),
        temperature_change=final_state.temperature - BASELINE_TEMPERATURE,
        sustainability_index=final_metrics.sustainability_score,
        economic_value=final_metrics.sustainability_score * ECONOMIC_VALUE_PER_POINT,
        xp_earned=session_xp(final_metrics),
        credits_earned=session_credits(final_metrics),
    )


@dataclass(frozen=True)
class ActionReward:
    """Ledger entry produced by a conservation action."""

    action: str
    impact: float
    xp_earned: int
    credits_earned: int

    @property
    def description(self) -> str:
        return f"{self.action}: Applied {self.impact:g} unit impact in ecosystem simulation"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "simulation_action",
            "description": self.description,
            "xpEarned": self.xp_earned,
            "creditsEarned": self.credits_earned,
        }


def action_reward(action: str, impact: float) -> ActionReward:
    """Reward for applying a conservation action of the given impact."""
    return ActionReward(
        action=action,
        impact=impact,
        xp_earned=max(MIN_ACTION_XP, round_int(impact * ACTION_XP_PER_IMPACT)),
        credits_earned=max(MIN_ACTION_CREDITS, round_int(impact * ACTION_CREDITS_PER_IMPACT)),
    )
