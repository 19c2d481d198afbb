from __future__ import annotations

import math
import random

import pygame
import pytest

from gate_survivors.core.settings import CANVAS_WIDTH, MAX_SHOOTER_COUNT
from gate_survivors.entities.bullet import ENEMY, PLAYER, create_bullet
from gate_survivors.entities.gate import ADD, MULTIPLY, apply_gate, create_gate
from gate_survivors.entities.player import create_player
from gate_survivors.entities.zombie import (
    create_random_zombie, create_zombie, damage_zombie, drift_speed,
    update_zombie_motion, zombie_color,
)
from gate_survivors.world.zombie_defs import ZOMBIES


def test_create_player_starts_bottom_centre() -> None:
    p = create_player()
    assert p.pos.x == 380
    assert p.pos.y == 740
    assert p.health == p.max_health == 100
    assert p.shooter_count == 1
    assert p.resources == 0
    assert not p.invulnerable


def test_create_bullet_pointing_up() -> None:
    b = create_bullet(100, 100, -math.pi / 2, 0)
    assert math.isclose(b.vel.x, 0.0, abs_tol=1e-9)
    assert math.isclose(b.vel.y, -10.0)
    assert (b.pos.x, b.pos.y) == (100, 100)
    assert b.damage == 20
    assert b.faction == PLAYER


def test_bullet_expires_after_lifetime() -> None:
    b = create_bullet(0, 0, 0.0, 1000, faction=ENEMY)
    assert not b.expired(3000)
    assert b.expired(3001)


def test_create_zombie_in_left_lane() -> None:
    rng = random.Random(3)
    for _ in range(200):
        z = create_zombie("standard", lane=0, rng=rng)
        assert 0 <= z.pos.x <= CANVAS_WIDTH / 2
        assert z.radius <= z.pos.x <= CANVAS_WIDTH / 2 - z.radius
        assert z.pos.y == -z.radius * 2
        assert z.lane == 0


def test_create_zombie_in_right_lane() -> None:
    rng = random.Random(4)
    for _ in range(200):
        z = create_zombie("tank", lane=1, rng=rng)
        assert CANVAS_WIDTH / 2 + z.radius <= z.pos.x <= CANVAS_WIDTH - z.radius


def test_create_zombie_picks_a_lane_when_omitted() -> None:
    rng = random.Random(5)
    lanes = {create_zombie("runner", rng=rng).lane for _ in range(100)}
    assert lanes == {0, 1}


def test_create_zombie_rejects_bad_lane() -> None:
    with pytest.raises(ValueError):
        create_zombie("standard", lane=2)


def test_create_zombie_unknown_type() -> None:
    with pytest.raises(KeyError):
        create_zombie("ghoul", lane=0)


def test_variant_fields_only_on_matching_types() -> None:
    spitter = create_zombie("spitter", lane=0)
    exploder = create_zombie("exploder", lane=0)
    standard = create_zombie("standard", lane=0)

    assert spitter.spit_cooldown == 2500
    assert spitter.explosion_radius is None
    assert exploder.explosion_radius == 100
    assert exploder.spit_cooldown is None
    assert standard.spit_cooldown is None and standard.explosion_radius is None


def test_create_random_zombie_uses_known_type() -> None:
    rng = random.Random(6)
    for _ in range(50):
        z = create_random_zombie(rng)
        assert z.kind in ZOMBIES
        assert z.health == z.max_health == ZOMBIES[z.kind]["health"]


def test_damage_zombie_reports_death_once() -> None:
    z = create_zombie("standard", lane=0)
    assert z.health == 60

    results = [damage_zombie(z, 20) for _ in range(3)]
    assert results == [False, False, True]
    assert z.health == 0

    assert damage_zombie(z, 20) is False
    assert z.health == 0


def test_damage_zombie_clamps_at_zero() -> None:
    z = create_zombie("runner", lane=0)
    assert damage_zombie(z, 500)
    assert z.health == 0


def test_drift_multipliers() -> None:
    assert math.isclose(drift_speed(create_zombie("spitter", lane=0)), 0.9 * 0.7)
    assert math.isclose(drift_speed(create_zombie("exploder", lane=0)), 2.0 * 1.3)
    assert math.isclose(drift_speed(create_zombie("runner", lane=0)), 3.5 * 1.2)
    assert math.isclose(drift_speed(create_zombie("tank", lane=0)), 0.6)


def test_zombie_moves_straight_down() -> None:
    z = create_zombie("standard", lane=0)
    x, y = z.pos.x, z.pos.y
    update_zombie_motion(z)
    assert z.pos.x == x
    assert math.isclose(z.pos.y, y + 1.2)


def test_zombie_color_darkens_when_hurt() -> None:
    z = create_zombie("standard", lane=0)
    assert zombie_color(z) == (74, 124, 78)
    z.health = 20
    assert zombie_color(z) == (51, 86, 54)


def test_create_gate_centred_in_lane() -> None:
    left = create_gate(0, ADD, 2)
    right = create_gate(1, MULTIPLY, 3)
    assert math.isclose(left.pos.x, 40)
    assert math.isclose(right.pos.x, 440)
    assert left.pos.y == -80
    assert not left.passed and left.active
    assert left.label == "+2" and right.label == "x3"


def test_create_gate_rejects_bad_lane() -> None:
    with pytest.raises(ValueError):
        create_gate(2, ADD, 1)
    with pytest.raises(ValueError):
        create_gate(-1, MULTIPLY, 2)


def test_rects_follow_position() -> None:
    p = create_player()
    assert p.rect == pygame.Rect(380, 740, 40, 40)

    b = create_bullet(100.7, 50.2, 0.0, 0)
    assert b.rect == pygame.Rect(100, 50, 6, 12)

    g = create_gate(0, ADD, 1)
    g.pos.y = 700
    assert g.rect == pygame.Rect(40, 700, 320, 60)
    assert g.rect.colliderect(p.rect)


def test_apply_gate_add_and_multiply() -> None:
    p = create_player()
    assert apply_gate(p, create_gate(0, ADD, 2))
    assert p.shooter_count == 3
    assert apply_gate(p, create_gate(1, MULTIPLY, 3))
    assert p.shooter_count == 9


def test_apply_gate_only_once() -> None:
    p = create_player()
    g = create_gate(0, ADD, 3)
    assert apply_gate(p, g)
    assert not apply_gate(p, g)
    assert p.shooter_count == 4
    assert g.passed


def test_apply_gate_caps_shooters() -> None:
    p = create_player()
    p.shooter_count = 30
    apply_gate(p, create_gate(0, MULTIPLY, 2))
    assert p.shooter_count == MAX_SHOOTER_COUNT


def test_shooter_count_bounded_over_random_gates() -> None:
    rng = random.Random(9)
    p = create_player()
    for _ in range(500):
        if rng.random() > 0.5:
            g = create_gate(rng.randrange(2), ADD, rng.randint(1, 3))
        else:
            g = create_gate(rng.randrange(2), MULTIPLY, rng.randint(2, 3))
        apply_gate(p, g)
        assert 1 <= p.shooter_count <= MAX_SHOOTER_COUNT
