"""UI rendering utilities for the ecosystem viewer.

This module handles the overlays drawn on top of the scene: the metrics
panel, the running indicator, the legend, the parameter panel and short-lived
notifications.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

import pygame

from ecosim.config.display import (
    ENERGY_COLOR,
    INDUSTRY_COLOR,
    OVERLAY_ALPHA,
    OVERLAY_BG_COLOR,
    OVERLAY_TEXT_COLOR,
    RUNNING_BADGE_COLOR,
    TREE_VIBRANT_COLOR,
)
from ecosim.results import SimulationResultsSummary
from ecosim.state import INITIAL_DISPLAY_METRICS, EcosystemMetrics, EnvironmentalState

Line = Union[str, Tuple[str, Tuple[int, int, int]]]

LEGEND = (
    ("Trees", TREE_VIBRANT_COLOR),
    ("Animals", (59, 130, 246)),
    ("Renewable", ENERGY_COLOR),
    ("Industry", INDUSTRY_COLOR),
)


def metrics_lines(metrics: Optional[EcosystemMetrics], state: EnvironmentalState) -> List[str]:
    """Text of the metrics overlay; falls back to the placeholder scorecard."""
    metrics = metrics or INITIAL_DISPLAY_METRICS
    return [
        f"Species: {metrics.species_count}",
        f"Biodiversity: {metrics.biodiversity_index}%",
        f"Air Quality: {metrics.air_quality.value}",
        f"Temperature: {state.temperature:+.1f}°C",
        f"Carbon Storage: {metrics.carbon_storage} GT",
        f"Sustainability: {metrics.sustainability_score}%",
    ]


def summary_lines(summary: SimulationResultsSummary) -> List[str]:
    return [
        "Simulation Results",
        f"Biodiversity change: {summary.biodiversity_change:+d}%",
        f"CO2 change: {summary.carbon_change:+.1f}%",
        f"Temperature change: {summary.temperature_change:+.1f}°C",
        f"Sustainability: {summary.sustainability_index}/100",
        f"Economic value: ${summary.economic_value:,}",
        f"Rewards: +{summary.xp_earned} XP, +{summary.credits_earned} EcoCredits",
    ]


class UIRenderer:
    """Renders UI elements for the ecosystem viewer.

    Attributes:
        screen: Pygame surface to render to
        font: Font for overlay text
        frame_count: Current frame count shown by the running indicator
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font
        self.frame_count: int = 0

    def set_frame_count(self, frame_count: int) -> None:
        self.frame_count = frame_count

    def _draw_panel(self, lines: Sequence[Line], topleft: Tuple[int, int], width: int) -> None:
        line_height = self.font.get_linesize()
        panel = pygame.Surface((width, line_height * len(lines) + 12))
        panel.set_alpha(OVERLAY_ALPHA)
        panel.fill(OVERLAY_BG_COLOR)
        self.screen.blit(panel, topleft)

        y = topleft[1] + 6
        for line in lines:
            # Lines may carry their own color as (text, color)
            if isinstance(line, tuple):
                text, color = line
            else:
                text, color = line, OVERLAY_TEXT_COLOR
            self.screen.blit(self.font.render(text, True, color), (topleft[0] + 8, y))
            y += line_height

    def draw_metrics_panel(self, metrics: Optional[EcosystemMetrics], state: EnvironmentalState) -> None:
        self._draw_panel(metrics_lines(metrics, state), (16, 16), 200)

    def draw_running_indicator(self, elapsed: str) -> None:
        text = self.font.render(f"Simulating... {elapsed} ({self.frame_count} frames)", True, OVERLAY_TEXT_COLOR)
        badge = pygame.Surface((text.get_width() + 12, text.get_height() + 6))
        badge.fill(RUNNING_BADGE_COLOR)
        x = self.screen.get_width() - badge.get_width() - 16
        self.screen.blit(badge, (x, 16))
        self.screen.blit(text, (x + 6, 19))

    def draw_legend(self) -> None:
        line_height = self.font.get_linesize()
        width, height = 130, line_height * len(LEGEND) + 12
        x = self.screen.get_width() - width - 16
        y = self.screen.get_height() - height - 16
        panel = pygame.Surface((width, height))
        panel.set_alpha(OVERLAY_ALPHA)
        panel.fill(OVERLAY_BG_COLOR)
        self.screen.blit(panel, (x, y))
        for index, (label, color) in enumerate(LEGEND):
            row_y = y + 6 + index * line_height
            pygame.draw.circle(self.screen, color, (x + 14, row_y + line_height // 2), 5)
            self.screen.blit(self.font.render(label, True, OVERLAY_TEXT_COLOR), (x + 26, row_y))

    def draw_parameter_panel(self, state: EnvironmentalState, selected: str, locked: bool) -> None:
        """List every parameter, highlighting the one the arrow keys adjust."""
        lines: List[Line] = []
        for name, value in state.to_dict().items():
            marker = ">" if name == selected else " "
            color = (250, 204, 21) if name == selected else OVERLAY_TEXT_COLOR
            lines.append((f"{marker} {name}: {value:g}", color))
        if locked:
            lines.append(("Parameters locked while running", (150, 150, 150)))
        self._draw_panel(lines, (16, self.screen.get_height() - 16 - (len(lines) * self.font.get_linesize() + 12)), 260)

    def draw_summary(self, summary: SimulationResultsSummary) -> None:
        lines = summary_lines(summary)
        width = 320
        x = (self.screen.get_width() - width) // 2
        self._draw_panel(lines, (x, 80), width)

    def draw_notifications(self, notifications: List[Dict]) -> None:
        y = self.screen.get_height() // 2
        for notification in notifications:
            text = self.font.render(notification["message"], True, notification["color"])
            self.screen.blit(text, ((self.screen.get_width() - text.get_width()) // 2, y))
            y += self.font.get_linesize()
