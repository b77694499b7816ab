"""Frame-driven ecosystem simulator.

The simulator owns the entity population and the particle pool. It has two
states:

- Idle: entities may exist but nothing advances.
- Running: every scheduled frame spawns particles, advances them, draws the
  scene and schedules the next frame.

Population regeneration is independent of the Idle/Running state so the
scene can preview parameter changes before a session starts. All mutation of
the entity list and particle pool happens on the simulator's own calls, so a
single caller thread is the only writer.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Protocol

from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import ConfigurationError
from ecosim.entities import EcosystemEntity, EntityKind, generate_population
from ecosim.metrics import compute_metrics
from ecosim.particles import ParticlePool
from ecosim.scheduler import ManualScheduler, TickScheduler
from ecosim.state import EcosystemMetrics, EnvironmentalState

logger = logging.getLogger(__name__)


class FrameRenderer(Protocol):
    """Anything that can draw the simulator's current scene."""

    def draw_frame(self, simulator: "EcosystemSimulator") -> bool:
        """Draw one frame.

        Returns:
            False if no drawing surface was available and the frame was skipped
        """
        ...


class EcosystemSimulator:
    """Owns entities and particles and advances them once per frame.

    Attributes:
        config: Simulation configuration
        state: Environmental state the population was generated from
        metrics: Metrics the population was generated from
        entities: Current entity batch
        particles: Bounded particle pool
        frame_count: Frames advanced while running
        frames_skipped: Frames whose drawing was skipped for lack of a surface
        running: Whether frames are being scheduled
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        scheduler: Optional[TickScheduler] = None,
        renderer: Optional[FrameRenderer] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            config: Simulation configuration (production defaults if omitted)
            scheduler: Frame scheduler (a ManualScheduler if omitted)
            renderer: Drawing backend; frames are simulated but not drawn without one
                (must be omitted when ``config.headless`` is set)
            rng: Random source for cosmetic attributes and spawn rolls
            seed: Seed used when ``rng`` is not provided (falls back to config.seed)
        """
        self.config = config or SimulationConfig.production()
        self.config.validate()

        if rng is not None:
            self.rng: random.Random = rng
        else:
            self.rng = random.Random(seed if seed is not None else self.config.seed)

        if self.config.headless and renderer is not None:
            raise ConfigurationError("A headless simulation cannot attach a frame renderer")

        self.scheduler: TickScheduler = scheduler if scheduler is not None else ManualScheduler()
        self.renderer = renderer

        particle_config = self.config.particles
        self.particles = ParticlePool(
            capacity=particle_config.max_particles,
            rng=self.rng,
            pollution_spawn_chance=particle_config.pollution_spawn_chance,
            clean_spawn_chance=particle_config.clean_spawn_chance,
            pollution_max_life=particle_config.pollution_max_life,
            clean_max_life=particle_config.clean_max_life,
        )

        self.state = EnvironmentalState()
        self.metrics: EcosystemMetrics = compute_metrics(self.state)
        self.entities: List[EcosystemEntity] = []
        self.frame_count: int = 0
        self.frames_skipped: int = 0
        self.running: bool = False
        self.generation: int = 0

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def regenerate(self, state: EnvironmentalState, metrics: EcosystemMetrics) -> None:
        """Replace the whole entity batch for new conditions."""
        self.state = state
        self.metrics = metrics
        self.entities = generate_population(
            state,
            metrics,
            self.rng,
            canvas_size=(self.config.display.canvas_width, self.config.display.canvas_height),
        )
        self.generation += 1
        logger.debug(
            "Regenerated population #%d: %d entities", self.generation, len(self.entities)
        )

    def entities_of(self, kind: EntityKind) -> List[EcosystemEntity]:
        return [entity for entity in self.entities if entity.kind is kind]

    # ------------------------------------------------------------------
    # Idle / Running
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin scheduling frames. No-op if already running."""
        if self.running:
            return
        self.running = True
        self.scheduler.schedule(self.tick)
        logger.debug("Simulator started at frame %d", self.frame_count)

    def stop(self) -> None:
        """Cancel the pending frame. No further mutation happens until restarted."""
        if not self.running:
            return
        self.running = False
        self.scheduler.cancel()
        logger.debug("Simulator stopped at frame %d", self.frame_count)

    def tick(self) -> None:
        """Advance one frame and schedule the next."""
        if not self.running:
            return

        self.particles.emit(self.entities)
        self.particles.advance()
        self.frame_count += 1

        self.render()

        if self.running:
            self.scheduler.schedule(self.tick)

    def render(self) -> bool:
        """Draw the current scene if a renderer is attached.

        Returns:
            True if the frame was drawn
        """
        if self.renderer is None:
            self.frames_skipped += 1
            return False
        drawn = self.renderer.draw_frame(self)
        if not drawn:
            self.frames_skipped += 1
            logger.debug("No drawing surface at frame %d; skipping draw", self.frame_count)
        return drawn

    def reset_particles(self) -> None:
        self.particles.clear()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "frame_count": self.frame_count,
            "running": self.running,
            "generation": self.generation,
            "entity_count": len(self.entities),
            "frames_skipped": self.frames_skipped,
            "particles": self.particles.get_stats(),
        }
