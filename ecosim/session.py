"""Session controller: owns the parameters and drives engine and simulator.

One SimulationSession is one run of the simulator from start to stop. Every
parameter change goes through the same pipeline: clamp to the slider
domains, recompute metrics, regenerate the population. At stop the session
packages elapsed time and the final scorecard into a results summary for the
reward collaborator.
"""

import logging
import random
import time
from typing import Callable, List, Optional

from ecosim.actions import ConservationAction
from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import SessionStateError
from ecosim.metrics import compute_metrics
from ecosim.results import ActionReward, SimulationResultsSummary, action_reward, build_results_summary
from ecosim.scheduler import TickScheduler
from ecosim.simulator import EcosystemSimulator, FrameRenderer
from ecosim.state import EcosystemMetrics, EnvironmentalState, normalize_parameter_name

logger = logging.getLogger(__name__)


def format_elapsed(seconds: int) -> str:
    """Format whole seconds as ``M:SS``."""
    minutes, remainder = divmod(int(seconds), 60)
    return f"{minutes}:{remainder:02d}"


class SimulationSession:
    """Explicit owner of one simulation's state.

    Attributes:
        state: Current environmental parameters (always clamped)
        metrics: Metrics computed from ``state``
        simulator: Entity/particle simulator fed by this session
        rewards: Conservation-action rewards issued during this session
        last_summary: Summary produced by the most recent ``stop()``
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        initial_state: Optional[EnvironmentalState] = None,
        scheduler: Optional[TickScheduler] = None,
        renderer: Optional[FrameRenderer] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or SimulationConfig.production()
        self.simulator = EcosystemSimulator(
            self.config, scheduler=scheduler, renderer=renderer, rng=rng, seed=seed
        )
        self._clock = clock
        self._started_at: Optional[float] = None
        self.rewards: List[ActionReward] = []
        self.last_summary: Optional[SimulationResultsSummary] = None

        self.state = EnvironmentalState()
        self.metrics: EcosystemMetrics = compute_metrics(self.state)
        self._apply_state(initial_state or EnvironmentalState())

    @property
    def running(self) -> bool:
        return self.simulator.running

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since ``start()``; 0 while idle."""
        if self._started_at is None:
            return 0
        return max(0, int(self._clock() - self._started_at))

    def _apply_state(self, state: EnvironmentalState) -> None:
        self.state = state.clamped()
        self.metrics = compute_metrics(self.state)
        self.simulator.regenerate(self.state, self.metrics)

    def _require_idle(self, operation: str) -> None:
        if self.running:
            raise SessionStateError(f"Cannot {operation} while the simulation is running")

    def set_parameter(self, name: str, value: float) -> EcosystemMetrics:
        """Change one parameter (snake_case or camelCase name).

        Args:
            name: Parameter name, e.g. ``"forest_cover"`` or ``"forestCover"``
            value: New value; clamped to the parameter's domain

        Returns:
            The recomputed metrics

        Raises:
            UnknownParameterError: If ``name`` is not a parameter
            SessionStateError: If the session is running
        """
        field_name = normalize_parameter_name(name)
        self._require_idle("change parameters")
        self._apply_state(self.state.with_changes(**{field_name: float(value)}))
        return self.metrics

    def update_state(self, state: EnvironmentalState) -> EcosystemMetrics:
        """Replace the whole parameter vector."""
        self._require_idle("change parameters")
        self._apply_state(state)
        return self.metrics

    def reset(self) -> None:
        """Restore the default environment."""
        self._require_idle("reset the environment")
        self.simulator.reset_particles()
        self._apply_state(EnvironmentalState())

    def apply_action(self, action: ConservationAction) -> ActionReward:
        """Apply a conservation action to the running session.

        Raises:
            SessionStateError: If the session is idle
        """
        if not self.running:
            raise SessionStateError("Conservation actions are only available while running")
        self._apply_state(action.apply(self.state))
        reward = action_reward(action.label, action.impact)
        self.rewards.append(reward)
        logger.info(
            "Applied %s: +%d XP, +%d credits", action.label, reward.xp_earned, reward.credits_earned
        )
        return reward

    def start(self) -> None:
        if self.running:
            raise SessionStateError("Simulation is already running")
        self._started_at = self._clock()
        self.rewards = []
        self.simulator.start()
        logger.info("Simulation session started with %s", self.state.to_dict())

    def stop(self) -> SimulationResultsSummary:
        """Stop the session and build its results summary.

        Raises:
            SessionStateError: If the session is not running
        """
        if not self.running:
            raise SessionStateError("Simulation is not running")
        elapsed = self.elapsed_seconds
        self.simulator.stop()
        self._started_at = None

        summary = build_results_summary(elapsed, self.metrics, self.state)
        self.last_summary = summary
        logger.info(
            "Simulation session stopped after %s: sustainability=%d, +%d XP, +%d credits",
            format_elapsed(elapsed),
            summary.sustainability_index,
            summary.xp_earned,
            summary.credits_earned,
        )
        return summary
