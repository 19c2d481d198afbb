from __future__ import annotations

import math
import random

from gate_survivors.world.effects import EffectsManager


def _manager() -> EffectsManager:
    return EffectsManager(random.Random(11))


def test_blood_particles_are_returned_not_kept() -> None:
    fx = _manager()
    particles = fx.create_blood_particles(50, 60)
    assert len(particles) == 8
    assert fx.muzzle_flashes == [] and fx.explosions == []
    for p in particles:
        assert (p.x, p.y) == (50, 60)
        assert 2 <= math.hypot(p.vx, p.vy) <= 5
        assert 3 <= p.size <= 8


def test_blood_update_fades_and_drops_in_place() -> None:
    fx = _manager()
    particles = fx.create_blood_particles(0, 0)
    same = particles

    fx.update_blood(particles, 400)
    assert particles is same
    assert len(particles) == 8
    assert all(math.isclose(p.alpha, 0.5) for p in particles)

    fx.update_blood(particles, 400)
    assert particles == []


def test_blood_falls_under_gravity() -> None:
    fx = _manager()
    (p, *_) = fx.create_blood_particles(0, 0)
    vy = p.vy
    fx.update_blood([p], 16)
    assert math.isclose(p.vy, vy + 0.2)


def test_muzzle_flash_expires() -> None:
    fx = _manager()
    fx.create_muzzle_flash(10, 10, -math.pi / 2)
    assert 15 <= fx.muzzle_flashes[0].size <= 25

    fx.update(30)
    assert len(fx.muzzle_flashes) == 1
    fx.update(20)
    assert fx.muzzle_flashes == []


def test_explosion_radius_grows_linearly_then_expires() -> None:
    fx = _manager()
    fx.create_explosion(0, 0, 100)
    assert fx.explosions[0].radius == 0

    fx.update(250)
    assert math.isclose(fx.explosions[0].radius, 50)

    fx.update(249)
    assert math.isclose(fx.explosions[0].radius, 99.8)

    fx.update(1)
    assert fx.explosions == []


def test_clear() -> None:
    fx = _manager()
    fx.create_muzzle_flash(0, 0, 0)
    fx.create_explosion(0, 0, 50)
    fx.clear()
    assert fx.muzzle_flashes == [] and fx.explosions == []
