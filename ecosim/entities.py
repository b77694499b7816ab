"""Ecosystem entities and population generation.

Population generation is split in two:

- ``entity_counts`` and the wind/solar alternation are deterministic
  functions of the environmental state and metrics.
- Positions, sizes, phase offsets and animal colors come from an injected
  ``random.Random`` so tests can substitute a seeded source.

A population is always rebuilt as a whole batch; entities never carry
identity across regenerations.
"""

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from ecosim.color import RGB, tree_color_for_health
from ecosim.config.display import (
    ANIMAL_COLORS,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ENERGY_BAND,
    ENERGY_COLOR,
    ENTITY_MIN_X,
    ENTITY_SPAN_X,
    FAUNA_BAND,
    FLORA_BAND,
    INDUSTRY_BAND,
    INDUSTRY_COLOR,
    MAX_ENERGY_SOURCES,
    MAX_FAUNA,
    MAX_FLORA,
    MAX_INDUSTRY_SOURCES,
)
from ecosim.math_utils import Vector2, clamp
from ecosim.state import EcosystemMetrics, EnvironmentalState

TWO_PI = math.pi * 2


class EntityKind(Enum):
    FLORA = "flora"
    FAUNA = "fauna"
    ENERGY_SOURCE = "energy_source"
    INDUSTRY_SOURCE = "industry_source"


class EnergySubtype(Enum):
    WIND = "wind"
    SOLAR = "solar"


@dataclass
class EcosystemEntity:
    """A rendered ecosystem participant.

    Attributes:
        kind: Which population this entity belongs to
        pos: Anchor position on the canvas
        health: Vitality in [0, 1]; always 1.0 for energy and industry sources
        size: Crown radius, body radius or structure size in pixels
        color: Base draw color
        phase: Animation phase offset in radians, fixed for the entity's lifetime
        age: Cosmetic age used for variety only
        subtype: Wind or solar, energy sources only
    """

    kind: EntityKind
    pos: Vector2
    health: float
    size: float
    color: RGB
    phase: float = 0.0
    age: float = 0.0
    subtype: Optional[EnergySubtype] = None

    @property
    def emits_particles(self) -> bool:
        return self.kind in (EntityKind.ENERGY_SOURCE, EntityKind.INDUSTRY_SOURCE)


class EntityCounts(NamedTuple):
    flora: int
    fauna: int
    energy_sources: int
    industry_sources: int

    @property
    def total(self) -> int:
        return self.flora + self.fauna + self.energy_sources + self.industry_sources


def _scaled_count(percent: float, maximum: int) -> int:
    return max(0, math.floor((percent / 100) * maximum))


def entity_counts(state: EnvironmentalState, metrics: EcosystemMetrics) -> EntityCounts:
    """Deterministic population sizes for a state/metrics pair.

    Flora follows forest cover, fauna follows the biodiversity index, energy
    sources follow the renewable share and industry sources follow the
    industry level.
    """
    return EntityCounts(
        flora=_scaled_count(state.forest_cover, MAX_FLORA),
        fauna=_scaled_count(metrics.biodiversity_index, MAX_FAUNA),
        energy_sources=_scaled_count(state.renewable_energy, MAX_ENERGY_SOURCES),
        industry_sources=_scaled_count(state.industry_level, MAX_INDUSTRY_SOURCES),
    )


def energy_subtype_for_index(index: int) -> EnergySubtype:
    """Even creation indices are wind turbines, odd ones solar panels."""
    return EnergySubtype.WIND if index % 2 == 0 else EnergySubtype.SOLAR


def flora_health(state: EnvironmentalState) -> float:
    """Trees suffer above +2 °C and above 450 ppm CO2."""
    temperature_factor = max(0.0, 2 - state.temperature) / 2
    co2_factor = max(0.0, (450 - state.co2_levels) / 100)
    return clamp((temperature_factor + co2_factor) / 2, 0.0, 1.0)


def fauna_health(state: EnvironmentalState, metrics: EcosystemMetrics) -> float:
    """Animals thrive near +1 °C and with high biodiversity."""
    biodiversity_factor = metrics.biodiversity_index / 100
    temperature_factor = max(0.0, (3 - abs(state.temperature - 1)) / 3)
    return clamp((biodiversity_factor + temperature_factor) / 2, 0.0, 1.0)


def _random_position(rng: random.Random, band: tuple, scale: Tuple[float, float]) -> Vector2:
    top, span = band
    scale_x, scale_y = scale
    return Vector2(
        (rng.random() * ENTITY_SPAN_X + ENTITY_MIN_X) * scale_x,
        (rng.random() * span + top) * scale_y,
    )


def generate_population(
    state: EnvironmentalState,
    metrics: EcosystemMetrics,
    rng: Optional[random.Random] = None,
    canvas_size: Tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT),
) -> List[EcosystemEntity]:
    """Build a fresh batch of entities for the given conditions.

    Args:
        state: Current environmental parameters
        metrics: Metrics computed from ``state``
        rng: Random source for cosmetic attributes (module ``random`` if omitted)
        canvas_size: Canvas extent; spawn bands are laid out for the default
            800x400 canvas and scaled proportionally to it

    Returns:
        Flora, fauna, energy sources and industry sources, in that order
    """
    rng = rng if rng is not None else random
    counts = entity_counts(state, metrics)
    scale = (canvas_size[0] / CANVAS_WIDTH, canvas_size[1] / CANVAS_HEIGHT)
    entities: List[EcosystemEntity] = []

    tree_health = flora_health(state)
    tree_color = tree_color_for_health(tree_health)
    for _ in range(counts.flora):
        entities.append(
            EcosystemEntity(
                kind=EntityKind.FLORA,
                pos=_random_position(rng, FLORA_BAND, scale),
                health=tree_health,
                age=rng.random() * 100,
                size=rng.random() * 15 + 15,
                color=tree_color,
                phase=rng.random() * TWO_PI,
            )
        )

    animal_health = fauna_health(state, metrics)
    for _ in range(counts.fauna):
        entities.append(
            EcosystemEntity(
                kind=EntityKind.FAUNA,
                pos=_random_position(rng, FAUNA_BAND, scale),
                health=animal_health,
                age=rng.random() * 50,
                size=rng.random() * 8 + 5,
                color=rng.choice(ANIMAL_COLORS),
                phase=rng.random() * TWO_PI,
            )
        )

    for index in range(counts.energy_sources):
        entities.append(
            EcosystemEntity(
                kind=EntityKind.ENERGY_SOURCE,
                pos=_random_position(rng, ENERGY_BAND, scale),
                health=1.0,
                size=20,
                color=ENERGY_COLOR,
                phase=rng.random() * TWO_PI,
                subtype=energy_subtype_for_index(index),
            )
        )

    for _ in range(counts.industry_sources):
        entities.append(
            EcosystemEntity(
                kind=EntityKind.INDUSTRY_SOURCE,
                pos=_random_position(rng, INDUSTRY_BAND, scale),
                health=1.0,
                size=25,
                color=INDUSTRY_COLOR,
            )
        )

    return entities
