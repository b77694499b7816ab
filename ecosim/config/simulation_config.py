"""Lightweight simulation configuration helpers."""

from dataclasses import dataclass, field, replace
from typing import Optional

from ecosim.config.display import CANVAS_HEIGHT, CANVAS_WIDTH, FRAME_RATE
from ecosim.config.particles import (
    CLEAN_MAX_LIFE,
    CLEAN_SPAWN_CHANCE,
    MAX_PARTICLES,
    POLLUTION_MAX_LIFE,
    POLLUTION_SPAWN_CHANCE,
)
from ecosim.exceptions import ConfigurationError


@dataclass
class DisplayConfig:
    """Canvas extent and pacing of the animation loop."""

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    frame_rate: int = FRAME_RATE


@dataclass
class ParticleConfig:
    """Particle pool bounds and emission rates."""

    max_particles: int = MAX_PARTICLES
    pollution_spawn_chance: float = POLLUTION_SPAWN_CHANCE
    clean_spawn_chance: float = CLEAN_SPAWN_CHANCE
    pollution_max_life: int = POLLUTION_MAX_LIFE
    clean_max_life: int = CLEAN_MAX_LIFE


@dataclass
class SimulationConfig:
    """Configuration for one simulation session.

    Attributes:
        headless: Run without a pygame window; a headless simulator refuses
            a frame renderer.
        seed: Optional seed for the cosmetic random source.
        display: Canvas and frame-rate settings.
        particles: Particle pool settings.
    """

    headless: bool = False
    seed: Optional[int] = None
    display: DisplayConfig = field(default_factory=DisplayConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)

    @classmethod
    def production(cls, headless: bool = False) -> "SimulationConfig":
        """Return the default configuration used by the viewer and CLI."""
        return cls(headless=headless)

    def with_overrides(self, **kwargs) -> "SimulationConfig":
        """Return a copy with top-level fields replaced."""
        return replace(self, **kwargs)

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        if self.display.canvas_width <= 0 or self.display.canvas_height <= 0:
            raise ConfigurationError(
                f"Canvas must have a positive extent, got "
                f"{self.display.canvas_width}x{self.display.canvas_height}"
            )
        if self.display.frame_rate <= 0:
            raise ConfigurationError(f"frame_rate must be positive, got {self.display.frame_rate}")
        if self.particles.max_particles < 0:
            raise ConfigurationError(
                f"max_particles cannot be negative, got {self.particles.max_particles}"
            )
        for name in ("pollution_spawn_chance", "clean_spawn_chance"):
            chance = getattr(self.particles, name)
            if not 0.0 <= chance <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {chance}")
        for name in ("pollution_max_life", "clean_max_life"):
            if getattr(self.particles, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")
