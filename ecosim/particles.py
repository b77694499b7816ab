"""Bounded particle pool for pollution and clean-energy effects.

Industry sources puff pollution, renewable sources emit clean sparks. The
pool never holds more than its capacity; spawn attempts beyond it are
dropped without error.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from ecosim.color import RGB
from ecosim.config.particles import (
    CLEAN_COLOR,
    CLEAN_MAX_DRIFT,
    CLEAN_MAX_LIFE,
    CLEAN_MIN_RADIUS,
    CLEAN_MIN_RISE,
    CLEAN_RADIUS_SPAN,
    CLEAN_RISE_SPAN,
    CLEAN_SPAWN_CHANCE,
    CLEAN_X_JITTER,
    MAX_PARTICLES,
    PARTICLE_MAX_ALPHA,
    POLLUTION_COLOR,
    POLLUTION_MAX_DRIFT,
    POLLUTION_MAX_LIFE,
    POLLUTION_MIN_RADIUS,
    POLLUTION_MIN_RISE,
    POLLUTION_RADIUS_SPAN,
    POLLUTION_RISE_SPAN,
    POLLUTION_SPAWN_CHANCE,
    POLLUTION_X_JITTER,
    POLLUTION_Y_OFFSET,
)
from ecosim.entities import EcosystemEntity, EntityKind
from ecosim.math_utils import Vector2


class ParticleKind(Enum):
    POLLUTION = "pollution"
    CLEAN = "clean"


@dataclass
class Particle:
    """A short-lived visual effect token.

    Attributes:
        pos: Current position
        vel: Displacement applied every frame
        age: Frames elapsed since spawn
        max_life: Age at which the particle is evicted
        radius: Draw radius in pixels
        color: Draw color
        kind: Pollution or clean emission
    """

    pos: Vector2
    vel: Vector2
    max_life: int
    radius: float
    color: RGB
    kind: ParticleKind
    age: int = 0

    @property
    def life_fraction(self) -> float:
        return self.age / self.max_life

    @property
    def alpha(self) -> float:
        """Opacity in [0, 0.7], falling linearly to 0 at expiry."""
        return (1 - self.life_fraction) * PARTICLE_MAX_ALPHA

    @property
    def expired(self) -> bool:
        return self.age >= self.max_life

    def step(self) -> None:
        self.pos += self.vel
        self.age += 1


def make_pollution_particle(source: EcosystemEntity, rng, max_life: int = POLLUTION_MAX_LIFE) -> Particle:
    return Particle(
        pos=Vector2(
            source.pos.x + (rng.random() - 0.5) * POLLUTION_X_JITTER,
            source.pos.y + POLLUTION_Y_OFFSET,
        ),
        vel=Vector2(
            (rng.random() - 0.5) * POLLUTION_MAX_DRIFT,
            -rng.random() * POLLUTION_RISE_SPAN - POLLUTION_MIN_RISE,
        ),
        max_life=max_life,
        radius=rng.random() * POLLUTION_RADIUS_SPAN + POLLUTION_MIN_RADIUS,
        color=POLLUTION_COLOR,
        kind=ParticleKind.POLLUTION,
    )


def make_clean_particle(source: EcosystemEntity, rng, max_life: int = CLEAN_MAX_LIFE) -> Particle:
    return Particle(
        pos=Vector2(source.pos.x + (rng.random() - 0.5) * CLEAN_X_JITTER, source.pos.y),
        vel=Vector2(
            (rng.random() - 0.5) * CLEAN_MAX_DRIFT,
            -rng.random() * CLEAN_RISE_SPAN - CLEAN_MIN_RISE,
        ),
        max_life=max_life,
        radius=rng.random() * CLEAN_RADIUS_SPAN + CLEAN_MIN_RADIUS,
        color=CLEAN_COLOR,
        kind=ParticleKind.CLEAN,
    )


class ParticlePool:
    """Capacity-bounded collection of live particles.

    Unlike an object pool that recycles instances, this pool bounds how many
    particles may be alive at once. Expired particles are dropped during
    ``advance``.
    """

    def __init__(
        self,
        capacity: int = MAX_PARTICLES,
        rng: Optional[random.Random] = None,
        pollution_spawn_chance: float = POLLUTION_SPAWN_CHANCE,
        clean_spawn_chance: float = CLEAN_SPAWN_CHANCE,
        pollution_max_life: int = POLLUTION_MAX_LIFE,
        clean_max_life: int = CLEAN_MAX_LIFE,
    ):
        """Initialize the particle pool.

        Args:
            capacity: Maximum number of concurrently live particles
            rng: Random source for spawn rolls and particle cosmetics
            pollution_spawn_chance: Per-frame chance an industry source emits
            clean_spawn_chance: Per-frame chance an energy source emits
            pollution_max_life: Lifetime in frames of pollution particles
            clean_max_life: Lifetime in frames of clean particles
        """
        self.capacity = capacity
        self.pollution_spawn_chance = pollution_spawn_chance
        self.clean_spawn_chance = clean_spawn_chance
        self.pollution_max_life = pollution_max_life
        self.clean_max_life = clean_max_life
        self._rng = rng if rng is not None else random
        self._particles: List[Particle] = []
        self.total_spawned = 0
        self.total_dropped = 0
        self.total_expired = 0

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    @property
    def particles(self) -> List[Particle]:
        return list(self._particles)

    @property
    def is_full(self) -> bool:
        return len(self._particles) >= self.capacity

    def add(self, particle: Particle) -> bool:
        """Add a particle if there is room.

        Returns:
            True if the particle was added, False if the pool was full
        """
        if self.is_full:
            self.total_dropped += 1
            return False
        self._particles.append(particle)
        self.total_spawned += 1
        return True

    def emit(self, entities: Iterable[EcosystemEntity]) -> int:
        """Roll a spawn for every emitting entity.

        Industry sources are rolled before energy sources.

        Returns:
            Number of particles actually added
        """
        sources = list(entities)
        spawned = 0
        for source in sources:
            if source.kind is not EntityKind.INDUSTRY_SOURCE:
                continue
            if self._rng.random() < self.pollution_spawn_chance:
                if self.add(make_pollution_particle(source, self._rng, self.pollution_max_life)):
                    spawned += 1
        for source in sources:
            if source.kind is not EntityKind.ENERGY_SOURCE:
                continue
            if self._rng.random() < self.clean_spawn_chance:
                if self.add(make_clean_particle(source, self._rng, self.clean_max_life)):
                    spawned += 1
        return spawned

    def advance(self) -> int:
        """Move and age every particle, evicting those that reached max_life.

        Returns:
            Number of particles evicted this frame
        """
        survivors: List[Particle] = []
        for particle in self._particles:
            particle.step()
            if not particle.expired:
                survivors.append(particle)
        expired = len(self._particles) - len(survivors)
        self._particles = survivors
        self.total_expired += expired
        return expired

    def clear(self) -> None:
        self._particles.clear()

    def get_stats(self) -> dict:
        """Get pool statistics for monitoring.

        Returns:
            Dictionary with live count, capacity and lifetime counters
        """
        return {
            "active_count": len(self._particles),
            "capacity": self.capacity,
            "pollution_count": sum(1 for p in self._particles if p.kind is ParticleKind.POLLUTION),
            "clean_count": sum(1 for p in self._particles if p.kind is ParticleKind.CLEAN),
            "total_spawned": self.total_spawned,
            "total_dropped": self.total_dropped,
            "total_expired": self.total_expired,
        }
