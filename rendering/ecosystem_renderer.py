"""Pygame drawing of the ecosystem scene.

This module draws the sky, ground, every entity at its animated position and
every live particle with its lifetime alpha. It only reads simulator state;
it never mutates entities or particles.
"""

import logging
import math
import random
from typing import Optional, Tuple

import pygame

from ecosim.animation import animated_position, turbine_rotation
from ecosim.color import RGB, lerp_color, sky_color_for_co2
from ecosim.config.display import (
    GROUND_BOTTOM_COLOR,
    GROUND_TEXTURE_SPECKS,
    GROUND_TOP_COLOR,
    SKY_FRACTION,
    SKY_HORIZON_COLOR,
    SMOKESTACK_COLOR,
    SOLAR_PANEL_COLOR,
    TRUNK_COLOR,
    TURBINE_BLADE_COLOR,
    WINDOW_COLOR,
)
from ecosim.entities import EcosystemEntity, EnergySubtype, EntityKind
from ecosim.particles import ParticlePool
from ecosim.state import EnvironmentalState

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _rotate(point: Point, angle: float) -> Point:
    x, y = point
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


class EcosystemRenderer:
    """Draws the simulator's scene onto a pygame surface.

    Attributes:
        surface: Target surface, or None when no display is available
    """

    def __init__(self, surface: Optional[pygame.Surface], rng: Optional[random.Random] = None) -> None:
        """Initialize the renderer.

        Args:
            surface: Surface to draw on; None makes every frame a skipped frame
            rng: Random source for the ground texture specks
        """
        self.surface = surface
        self._rng = rng if rng is not None else random.Random()
        self._ground_texture: Optional[pygame.Surface] = None

    def draw_frame(self, simulator) -> bool:
        """Draw background, entities and particles.

        Returns:
            False if the frame was skipped because no surface could be drawn on
        """
        if self.surface is None:
            return False
        try:
            self.draw_background(simulator.state)
            for entity in simulator.entities:
                self.draw_entity(entity, simulator.frame_count)
            self.draw_particles(simulator.particles)
        except pygame.error as exc:
            logger.debug("Drawing surface unavailable, skipping frame: %s", exc)
            return False
        return True

    # ------------------------------------------------------------------
    # Background
    # ------------------------------------------------------------------

    def _build_ground_texture(self, width: int, height: int) -> pygame.Surface:
        ground = pygame.Surface((width, max(1, height)))
        for row in range(ground.get_height()):
            t = row / max(1, ground.get_height() - 1)
            pygame.draw.line(ground, lerp_color(GROUND_TOP_COLOR, GROUND_BOTTOM_COLOR, t), (0, row), (width, row))

        speck = pygame.Surface((2, 1), pygame.SRCALPHA)
        speck.fill((0, 0, 0, 25))
        for _ in range(GROUND_TEXTURE_SPECKS):
            ground.blit(speck, (self._rng.random() * width, self._rng.random() * ground.get_height()))
        return ground

    def draw_background(self, state: EnvironmentalState) -> None:
        width, height = self.surface.get_size()
        sky_height = int(height * SKY_FRACTION)
        top_color = sky_color_for_co2(state.co2_levels)
        for row in range(sky_height):
            t = row / max(1, sky_height - 1)
            pygame.draw.line(self.surface, lerp_color(top_color, SKY_HORIZON_COLOR, t), (0, row), (width, row))

        # Baked once; the texture never changes with conditions
        if self._ground_texture is None:
            self._ground_texture = self._build_ground_texture(width, height - sky_height)
        self.surface.blit(self._ground_texture, (0, sky_height))

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def draw_entity(self, entity: EcosystemEntity, frame: int) -> None:
        if entity.kind is EntityKind.FLORA:
            self.draw_tree(entity, frame)
        elif entity.kind is EntityKind.FAUNA:
            self.draw_animal(entity, frame)
        elif entity.kind is EntityKind.ENERGY_SOURCE:
            self.draw_energy_source(entity, frame)
        elif entity.kind is EntityKind.INDUSTRY_SOURCE:
            self.draw_industry(entity)

    def _blit_circle(self, color: RGB, center: Point, radius: float, alpha: float) -> None:
        radius = max(1, int(round(radius)))
        circle = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(circle, (*color, int(max(0.0, min(1.0, alpha)) * 255)), (radius, radius), radius)
        self.surface.blit(circle, (center[0] - radius, center[1] - radius))

    def draw_tree(self, entity: EcosystemEntity, frame: int) -> None:
        x, y = animated_position(entity, frame)
        pygame.draw.rect(self.surface, TRUNK_COLOR, pygame.Rect(int(x) - 3, int(y), 6, 25))
        # Sickly trees have smaller, more transparent crowns
        self._blit_circle(entity.color, (x, y - 10), entity.size * entity.health, 0.7 + entity.health * 0.3)

    def draw_animal(self, entity: EcosystemEntity, frame: int) -> None:
        x, y = animated_position(entity, frame)
        self._blit_circle(entity.color, (x, y), entity.size, entity.health)
        pygame.draw.circle(self.surface, (0, 0, 0), (int(x) - 3, int(y) - 2), 1)
        pygame.draw.circle(self.surface, (0, 0, 0), (int(x) + 3, int(y) - 2), 1)

    def draw_energy_source(self, entity: EcosystemEntity, frame: int) -> None:
        x, y = entity.pos.x, entity.pos.y
        if entity.subtype is EnergySubtype.WIND:
            rotation = turbine_rotation(entity, frame)
            top = _rotate((0, -20), rotation)
            bottom = _rotate((0, 20), rotation)
            pygame.draw.line(self.surface, entity.color, (x + top[0], y + top[1]), (x + bottom[0], y + bottom[1]), 3)
            for blade in range(3):
                angle = rotation + blade * math.pi * 2 / 3
                root = _rotate((0, -20), angle)
                tip = _rotate((0, -35), angle)
                pygame.draw.line(self.surface, TURBINE_BLADE_COLOR, (x + root[0], y + root[1]), (x + tip[0], y + tip[1]), 2)
        else:
            pygame.draw.rect(self.surface, SOLAR_PANEL_COLOR, pygame.Rect(int(x) - 15, int(y) - 8, 30, 16))
            for offset in range(-12, 13, 6):
                pygame.draw.line(self.surface, entity.color, (x + offset, y - 8), (x + offset, y + 8), 1)

    def draw_industry(self, entity: EcosystemEntity) -> None:
        x, y = int(entity.pos.x), int(entity.pos.y)
        pygame.draw.rect(self.surface, entity.color, pygame.Rect(x - 20, y - 15, 40, 30))
        pygame.draw.rect(self.surface, SMOKESTACK_COLOR, pygame.Rect(x - 15, y - 25, 8, 15))
        pygame.draw.rect(self.surface, SMOKESTACK_COLOR, pygame.Rect(x + 7, y - 25, 8, 15))
        pygame.draw.rect(self.surface, WINDOW_COLOR, pygame.Rect(x - 10, y - 10, 6, 6))
        pygame.draw.rect(self.surface, WINDOW_COLOR, pygame.Rect(x + 4, y - 10, 6, 6))

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    def draw_particles(self, particles: ParticlePool) -> None:
        for particle in particles:
            self._blit_circle(particle.color, particle.pos.as_tuple(), particle.radius, particle.alpha)
