"""Per-frame animation offsets for entities.

Entities are static records; their on-screen motion is a pure function of
the frame counter and each entity's phase offset.
"""

import math
from typing import Tuple

from ecosim.entities import EcosystemEntity, EntityKind

TREE_SWAY_SPEED = 0.02
TREE_SWAY_AMPLITUDE = 2.0
ANIMAL_SPEED_X = 0.01
ANIMAL_SPEED_Y = 0.015
ANIMAL_RANGE_X = 20.0
ANIMAL_RANGE_Y = 5.0
TURBINE_SPEED = 0.05


def animated_offset(entity: EcosystemEntity, frame: int) -> Tuple[float, float]:
    """Displacement of ``entity`` from its anchor at ``frame``."""
    if entity.kind is EntityKind.FLORA:
        return (math.sin(frame * TREE_SWAY_SPEED + entity.phase) * TREE_SWAY_AMPLITUDE, 0.0)
    if entity.kind is EntityKind.FAUNA:
        return (
            math.sin(frame * ANIMAL_SPEED_X + entity.phase) * ANIMAL_RANGE_X,
            math.cos(frame * ANIMAL_SPEED_Y + entity.phase) * ANIMAL_RANGE_Y,
        )
    return (0.0, 0.0)


def animated_position(entity: EcosystemEntity, frame: int) -> Tuple[float, float]:
    dx, dy = animated_offset(entity, frame)
    return (entity.pos.x + dx, entity.pos.y + dy)


def turbine_rotation(entity: EcosystemEntity, frame: int) -> float:
    """Rotor angle in radians."""
    return frame * TURBINE_SPEED + entity.phase
