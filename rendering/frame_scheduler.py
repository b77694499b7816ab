"""Frame scheduler paced by the pygame clock."""

import pygame

from ecosim.scheduler import ManualScheduler


class PygameFrameScheduler(ManualScheduler):
    """ManualScheduler whose ``fire()`` waits for the next display frame.

    Attributes:
        clock: Pygame clock limiting the loop to ``frame_rate``
        frame_rate: Target frames per second
    """

    def __init__(self, frame_rate: int) -> None:
        super().__init__()
        self.clock = pygame.time.Clock()
        self.frame_rate = frame_rate

    def wait_for_frame(self) -> int:
        """Block until the next frame is due; returns milliseconds since the last one."""
        return self.clock.tick(self.frame_rate)

    def fire(self) -> bool:
        self.wait_for_frame()
        return super().fire()
