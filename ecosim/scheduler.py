"""Frame scheduling capability.

The simulator never talks to a platform refresh primitive directly. It asks
a ``TickScheduler`` to run a callback on the next frame and to cancel that
request. Whatever drives frames (a pygame clock, an explicit headless loop,
a test) satisfies the protocol.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

TickCallback = Callable[[], None]


@runtime_checkable
class TickScheduler(Protocol):
    """Schedules at most one pending frame callback."""

    @property
    def pending(self) -> bool:
        """Whether a callback is waiting for the next frame."""
        ...

    def schedule(self, callback: TickCallback) -> None:
        """Run ``callback`` on the next frame, replacing any pending one."""
        ...

    def cancel(self) -> None:
        """Drop the pending callback; it must never run afterwards."""
        ...


class ManualScheduler:
    """Scheduler driven by an explicit loop calling ``fire()``.

    Used for headless runs and tests. The pending slot is cleared before the
    callback runs, so a callback may schedule its successor and a ``cancel()``
    issued between frames is always honoured.
    """

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self.frames_fired: int = 0

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def schedule(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def fire(self) -> bool:
        """Run the pending callback, if any.

        Returns:
            True if a callback ran
        """
        callback = self._callback
        if callback is None:
            return False
        self._callback = None
        self.frames_fired += 1
        callback()
        return True

    def run_frames(self, count: int) -> int:
        """Fire up to ``count`` frames, stopping early once nothing is pending.

        Returns:
            Number of frames actually fired
        """
        fired = 0
        for _ in range(count):
            if not self.fire():
                break
            fired += 1
        return fired
