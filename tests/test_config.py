import pytest

from ecosim.config.simulation_config import DisplayConfig, ParticleConfig, SimulationConfig
from ecosim.entities import EntityKind
from ecosim.exceptions import ConfigurationError, EcosimError
from ecosim.metrics import compute_metrics
from ecosim.particles import ParticleKind
from ecosim.simulator import EcosystemSimulator
from ecosim.state import EnvironmentalState


def test_production_config_is_valid():
    config = SimulationConfig.production()
    config.validate()
    assert config.particles.max_particles == 100
    assert config.display.canvas_width == 800
    assert config.display.canvas_height == 400


def test_with_overrides_returns_copy():
    config = SimulationConfig.production()
    seeded = config.with_overrides(seed=7, headless=True)
    assert seeded.seed == 7 and seeded.headless
    assert config.seed is None


@pytest.mark.parametrize(
    "config",
    [
        SimulationConfig(display=DisplayConfig(canvas_width=0)),
        SimulationConfig(display=DisplayConfig(frame_rate=0)),
        SimulationConfig(particles=ParticleConfig(max_particles=-1)),
        SimulationConfig(particles=ParticleConfig(pollution_spawn_chance=1.5)),
        SimulationConfig(particles=ParticleConfig(clean_max_life=0)),
    ],
)
def test_invalid_config_is_rejected(config):
    with pytest.raises(ConfigurationError):
        config.validate()


def test_simulator_validates_its_config():
    with pytest.raises(EcosimError):
        EcosystemSimulator(SimulationConfig(particles=ParticleConfig(clean_spawn_chance=-0.1)))


def test_custom_capacity_reaches_pool():
    simulator = EcosystemSimulator(SimulationConfig(particles=ParticleConfig(max_particles=5)))
    assert simulator.particles.capacity == 5


def test_particle_lifetime_overrides_reach_spawned_particles(manual_scheduler, seeded_rng):
    config = SimulationConfig(
        particles=ParticleConfig(
            pollution_spawn_chance=1.0,
            clean_spawn_chance=1.0,
            pollution_max_life=5,
            clean_max_life=3,
        )
    )
    simulator = EcosystemSimulator(config, scheduler=manual_scheduler, rng=seeded_rng)
    state = EnvironmentalState(renewable_energy=100, industry_level=100)
    simulator.regenerate(state, compute_metrics(state))

    simulator.start()
    manual_scheduler.fire()

    lifetimes = {p.kind: p.max_life for p in simulator.particles}
    assert lifetimes == {ParticleKind.POLLUTION: 5, ParticleKind.CLEAN: 3}

    manual_scheduler.run_frames(5)
    assert all(p.age < p.max_life for p in simulator.particles)


def test_canvas_size_bounds_entity_positions(seeded_rng):
    config = SimulationConfig(display=DisplayConfig(canvas_width=200, canvas_height=100))
    simulator = EcosystemSimulator(config, rng=seeded_rng)
    state = EnvironmentalState(
        forest_cover=100, temperature=-2, renewable_energy=100, industry_level=100
    )
    simulator.regenerate(state, compute_metrics(state))

    assert len(simulator.entities_of(EntityKind.FLORA)) == 30
    for entity in simulator.entities:
        assert 0 <= entity.pos.x < 200
        assert 0 <= entity.pos.y < 100


def test_headless_config_refuses_renderer():
    class NullRenderer:
        def draw_frame(self, simulator) -> bool:
            return True

    with pytest.raises(ConfigurationError):
        EcosystemSimulator(SimulationConfig.production(headless=True), renderer=NullRenderer())

    headless = EcosystemSimulator(SimulationConfig.production(headless=True))
    assert headless.renderer is None
