"""Tests for the bounded particle pool."""

import random

from ecosim.entities import EcosystemEntity, EntityKind
from ecosim.math_utils import Vector2
from ecosim.particles import (
    Particle,
    ParticleKind,
    ParticlePool,
    make_clean_particle,
    make_pollution_particle,
)


def make_source(kind, x=400.0, y=200.0):
    return EcosystemEntity(kind=kind, pos=Vector2(x, y), health=1.0, size=20, color=(0, 0, 0))


def make_particle(max_life=10):
    return Particle(
        pos=Vector2(0, 0),
        vel=Vector2(1, -1),
        max_life=max_life,
        radius=2,
        color=(0, 0, 0),
        kind=ParticleKind.CLEAN,
    )


def test_pool_never_exceeds_capacity_under_sustained_spawning():
    sources = [make_source(EntityKind.INDUSTRY_SOURCE) for _ in range(6)]
    sources += [make_source(EntityKind.ENERGY_SOURCE) for _ in range(8)]
    pool = ParticlePool(rng=random.Random(3), pollution_spawn_chance=1.0, clean_spawn_chance=1.0)

    peak = 0
    for _ in range(5000):
        pool.emit(sources)
        peak = max(peak, len(pool))
        assert len(pool) <= 100
        pool.advance()

    assert peak == 100
    assert pool.total_dropped > 0


def test_add_rejects_when_full():
    pool = ParticlePool(capacity=2)
    assert pool.add(make_particle())
    assert pool.add(make_particle())
    assert not pool.add(make_particle())
    assert len(pool) == 2
    assert pool.get_stats()["total_dropped"] == 1


def test_alpha_strictly_decreases_and_particle_expires_at_max_life():
    pool = ParticlePool()
    particle = make_particle(max_life=5)
    pool.add(particle)

    alphas = [particle.alpha]
    for frame in range(1, 5):
        pool.advance()
        assert particle in pool.particles
        assert particle.age == frame
        alphas.append(particle.alpha)

    assert all(later < earlier for earlier, later in zip(alphas, alphas[1:]))
    assert alphas[0] == 0.7

    evicted = pool.advance()
    assert evicted == 1
    assert len(pool) == 0
    assert particle.age == particle.max_life
    assert particle.alpha == 0.0


def test_advance_moves_by_velocity():
    pool = ParticlePool()
    particle = make_particle()
    pool.add(particle)
    pool.advance()
    pool.advance()
    assert particle.pos == Vector2(2, -2)


def test_only_emitting_entities_spawn():
    pool = ParticlePool(rng=random.Random(0), pollution_spawn_chance=1.0, clean_spawn_chance=1.0)
    spawned = pool.emit(
        [
            make_source(EntityKind.FLORA),
            make_source(EntityKind.FAUNA),
            make_source(EntityKind.INDUSTRY_SOURCE),
            make_source(EntityKind.ENERGY_SOURCE),
        ]
    )
    assert spawned == 2
    stats = pool.get_stats()
    assert stats["pollution_count"] == 1
    assert stats["clean_count"] == 1


def test_zero_spawn_chance_never_spawns():
    pool = ParticlePool(rng=random.Random(0), pollution_spawn_chance=0.0, clean_spawn_chance=0.0)
    for _ in range(200):
        pool.emit([make_source(EntityKind.INDUSTRY_SOURCE), make_source(EntityKind.ENERGY_SOURCE)])
    assert len(pool) == 0


def test_pollution_particle_shape(seeded_rng):
    source = make_source(EntityKind.INDUSTRY_SOURCE, x=100, y=200)
    particle = make_pollution_particle(source, seeded_rng)
    assert particle.kind is ParticleKind.POLLUTION
    assert particle.max_life == 120
    assert 90 <= particle.pos.x <= 110
    assert particle.pos.y == 175
    assert -3 < particle.vel.y <= -1
    assert 2 <= particle.radius < 6


def test_clean_particle_shape(seeded_rng):
    source = make_source(EntityKind.ENERGY_SOURCE, x=100, y=200)
    particle = make_clean_particle(source, seeded_rng)
    assert particle.kind is ParticleKind.CLEAN
    assert particle.max_life == 80
    assert particle.pos.y == 200
    assert -1.5 < particle.vel.y <= -0.5


def test_pool_lifetimes_are_applied_to_emitted_particles():
    pool = ParticlePool(
        rng=random.Random(5),
        pollution_spawn_chance=1.0,
        clean_spawn_chance=1.0,
        pollution_max_life=2,
        clean_max_life=1,
    )
    pool.emit([make_source(EntityKind.INDUSTRY_SOURCE), make_source(EntityKind.ENERGY_SOURCE)])
    assert sorted(p.max_life for p in pool) == [1, 2]

    assert pool.advance() == 1
    assert [p.kind for p in pool] == [ParticleKind.POLLUTION]
    assert pool.advance() == 1
    assert len(pool) == 0
