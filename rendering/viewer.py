"""Interactive pygame window for the ecosystem simulation."""

import logging
from typing import Dict, List, Optional

import pygame

from ecosim.actions import ConservationAction
from ecosim.config.display import OVERLAY_FONT_SIZE
from ecosim.config.environment import PARAMETER_RANGES
from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import SessionStateError
from ecosim.session import SimulationSession, format_elapsed
from ecosim.state import EcosystemMetrics, EnvironmentalState, normalize_parameter_name
from rendering.ecosystem_renderer import EcosystemRenderer
from rendering.frame_scheduler import PygameFrameScheduler
from rendering.ui_renderer import UIRenderer

logger = logging.getLogger(__name__)

PARAMETER_ORDER = [
    "co2Levels",
    "forestCover",
    "temperature",
    "renewableEnergy",
    "industryLevel",
    "population",
]

ACTION_KEYS = {
    pygame.K_1: ConservationAction.PLANT_TREES,
    pygame.K_2: ConservationAction.ADD_SOLAR,
    pygame.K_3: ConservationAction.WIND_POWER,
}

NOTIFICATION_DURATION = 180  # 3 seconds at 60fps
NOTIFICATION_MAX_COUNT = 4
NOTIFICATION_INFO_COLOR = (100, 255, 100)
NOTIFICATION_ERROR_COLOR = (255, 120, 120)


class EcosystemViewer:
    """Windowed front end: keyboard controls, scene and overlays.

    The viewer is the simulator's frame renderer: each tick draws the scene
    through EcosystemRenderer, then the overlays, then flips the display.

    Attributes:
        session: The session being displayed
        screen: Pygame display surface
        scheduler: Clock-paced frame scheduler
        selected_index: Parameter adjusted by the arrow keys
        notifications: Short-lived messages (rewards, rejected input)
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        initial_state: Optional[EnvironmentalState] = None,
    ) -> None:
        self.config = config or SimulationConfig.production()
        self.scheduler = PygameFrameScheduler(self.config.display.frame_rate)
        self.screen: Optional[pygame.Surface] = None
        self.scene_renderer = EcosystemRenderer(None)
        self.ui_renderer: Optional[UIRenderer] = None
        self.session = SimulationSession(
            self.config, initial_state=initial_state, scheduler=self.scheduler, renderer=self
        )
        self.selected_index: int = 0
        self.notifications: List[Dict] = []
        self.ui_frame: int = 0
        # The placeholder scorecard stays up until the user first touches the
        # environment, unless the run started from explicit overrides
        self.metrics_revealed: bool = initial_state is not None

    def setup(self) -> None:
        try:
            self.screen = pygame.display.set_mode(
                (self.config.display.canvas_width, self.config.display.canvas_height)
            )
            pygame.display.set_caption("Ecosystem Simulation")
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return

        self.scene_renderer.surface = self.screen
        self.ui_renderer = UIRenderer(self.screen, pygame.font.Font(None, OVERLAY_FONT_SIZE))

    @property
    def displayed_metrics(self) -> Optional[EcosystemMetrics]:
        """Metrics for the overlay; None shows the initial placeholder."""
        return self.session.metrics if self.metrics_revealed else None

    @property
    def selected_parameter(self) -> str:
        return PARAMETER_ORDER[self.selected_index]

    def notify(self, message: str, color=NOTIFICATION_INFO_COLOR) -> None:
        self.notifications.append({"message": message, "color": color, "frame": self.ui_frame})
        if len(self.notifications) > NOTIFICATION_MAX_COUNT:
            self.notifications.pop(0)

    def update_notifications(self) -> None:
        self.notifications = [
            n for n in self.notifications if self.ui_frame - n["frame"] < NOTIFICATION_DURATION
        ]

    # FrameRenderer protocol
    def draw_frame(self, simulator) -> bool:
        if not self.scene_renderer.draw_frame(simulator):
            return False
        if self.ui_renderer is not None:
            self.ui_renderer.set_frame_count(simulator.frame_count)
            self.ui_renderer.draw_metrics_panel(self.displayed_metrics, self.session.state)
            self.ui_renderer.draw_legend()
            self.ui_renderer.draw_parameter_panel(
                self.session.state, self.selected_parameter, locked=self.session.running
            )
            if self.session.running:
                self.ui_renderer.draw_running_indicator(format_elapsed(self.session.elapsed_seconds))
            elif self.session.last_summary is not None:
                self.ui_renderer.draw_summary(self.session.last_summary)
            self.ui_renderer.draw_notifications(self.notifications)
        pygame.display.flip()
        return True

    def toggle_running(self) -> None:
        if self.session.running:
            summary = self.session.stop()
            self.notify(f"Session complete: +{summary.xp_earned} XP, +{summary.credits_earned} EcoCredits")
        else:
            self.session.start()
        self.metrics_revealed = True

    def adjust_selected(self, direction: int) -> None:
        field_name = normalize_parameter_name(self.selected_parameter)
        step = PARAMETER_RANGES[field_name][2]
        current = getattr(self.session.state, field_name)
        decimals = len(f"{step:g}".partition(".")[2])
        # Snap to the slider grid to avoid accumulating float drift
        value = round(round((current + direction * step) / step) * step, decimals)
        self.session.set_parameter(field_name, value)
        self.metrics_revealed = True

    def handle_events(self) -> bool:
        """Handle user input. Returns False when the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            try:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_SPACE:
                    self.toggle_running()
                elif event.key == pygame.K_UP:
                    self.selected_index = (self.selected_index - 1) % len(PARAMETER_ORDER)
                elif event.key == pygame.K_DOWN:
                    self.selected_index = (self.selected_index + 1) % len(PARAMETER_ORDER)
                elif event.key == pygame.K_LEFT:
                    self.adjust_selected(-1)
                elif event.key == pygame.K_RIGHT:
                    self.adjust_selected(1)
                elif event.key == pygame.K_r:
                    self.session.reset()
                    self.metrics_revealed = True
                elif event.key in ACTION_KEYS:
                    reward = self.session.apply_action(ACTION_KEYS[event.key])
                    self.metrics_revealed = True
                    self.notify(f"{reward.action}: +{reward.xp_earned} XP, +{reward.credits_earned} EcoCredits")
            except SessionStateError as e:
                self.notify(str(e), NOTIFICATION_ERROR_COLOR)
        return True

    def run(self) -> None:
        self.setup()
        logger.info("Controls: SPACE start/stop, UP/DOWN select, LEFT/RIGHT adjust, 1-3 actions, R reset, ESC quit")

        while self.handle_events():
            self.ui_frame += 1
            self.update_notifications()
            if self.session.running:
                self.scheduler.fire()
            else:
                # Idle preview: redraw without advancing the simulation
                self.scheduler.wait_for_frame()
                self.session.simulator.render()

        if self.session.running:
            self.session.stop()


def main(
    config: Optional[SimulationConfig] = None,
    initial_state: Optional[EnvironmentalState] = None,
) -> None:
    """Entry point for the interactive viewer."""
    pygame.init()
    viewer = EcosystemViewer(config, initial_state)
    try:
        viewer.run()
    finally:
        pygame.quit()
