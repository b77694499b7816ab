"""Pytest configuration and fixtures for ecosystem simulator tests."""

import os
import random

import pytest

# Rendering tests draw on in-memory surfaces; never open a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def reference_state():
    """The default classroom scenario."""
    from ecosim.state import EnvironmentalState

    return EnvironmentalState(
        co2_levels=410,
        forest_cover=65,
        temperature=1.2,
        renewable_energy=25,
        population=50,
        industry_level=60,
    )


@pytest.fixture
def manual_scheduler():
    from ecosim.scheduler import ManualScheduler

    return ManualScheduler()


@pytest.fixture
def simulator(manual_scheduler, seeded_rng):
    """Setup a simulator driven by an explicit frame loop."""
    from ecosim.simulator import EcosystemSimulator

    return EcosystemSimulator(scheduler=manual_scheduler, rng=seeded_rng)


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def session(manual_scheduler, seeded_rng, fake_clock):
    from ecosim.session import SimulationSession

    return SimulationSession(scheduler=manual_scheduler, rng=seeded_rng, clock=fake_clock)
