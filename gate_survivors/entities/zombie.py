# entities/zombie.py
import random
from dataclasses import dataclass, field
from typing import List, Optional

import pygame

from gate_survivors.core.settings import LANE_WIDTH, NUM_LANES
from gate_survivors.core.utils import weighted_choice
from gate_survivors.world.zombie_defs import (
    DRIFT_MULT, EXPLODER, SPITTER, ZOMBIES, spawn_weights,
)


@dataclass
class Zombie:
    """
    A zombie is a circle: pos is its centre.
    It owns its blood particles; they go away with it.
    """
    kind: str
    pos: pygame.Vector2
    health: int
    max_health: int
    speed: float
    damage: int
    radius: float
    attack_cooldown: float
    resource_drop: int
    lane: int
    vel: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0, 0))
    last_attack_time: float = 0.0
    blood_particles: List = field(default_factory=list)
    dead: bool = False

    # spitter only
    spit_cooldown: Optional[float] = None
    last_spit_time: Optional[float] = None

    # exploder only
    explosion_radius: Optional[float] = None

    @property
    def width(self) -> float:
        return self.radius * 2

    @property
    def height(self) -> float:
        return self.radius * 2


def _check_lane(lane: int):
    if lane not in range(NUM_LANES):
        raise ValueError(f"lane must be 0..{NUM_LANES - 1}, got {lane!r}")


def create_zombie(kind: str, lane: Optional[int] = None, rng=random) -> Zombie:
    cfg = ZOMBIES[kind]

    if lane is None:
        lane = int(rng.random() * NUM_LANES)
    _check_lane(lane)

    radius = cfg["radius"]
    lane_start = lane * LANE_WIDTH
    x = lane_start + rng.random() * (LANE_WIDTH - radius * 2) + radius

    z = Zombie(
        kind=kind,
        pos=pygame.Vector2(x, -radius * 2),  # just above the top edge
        health=cfg["health"],
        max_health=cfg["health"],
        speed=cfg["speed"],
        damage=cfg["damage"],
        radius=radius,
        attack_cooldown=cfg["attack_cooldown"],
        resource_drop=cfg["resource_drop"],
        lane=lane,
    )

    if kind == SPITTER:
        z.spit_cooldown = cfg["spit_cooldown"]
        z.last_spit_time = 0.0
    elif kind == EXPLODER:
        z.explosion_radius = cfg["explosion_radius"]

    return z


def create_random_zombie(rng=random) -> Zombie:
    kind = weighted_choice(spawn_weights(), rng)
    return create_zombie(kind, rng=rng)


def drift_speed(zombie: Zombie) -> float:
    return zombie.speed * DRIFT_MULT.get(zombie.kind, 1.0)


def update_zombie_motion(zombie: Zombie):
    # no pathing: straight down the lane
    zombie.vel.xy = (0, drift_speed(zombie))
    zombie.pos += zombie.vel


def damage_zombie(zombie: Zombie, amount: int) -> bool:
    """Returns True only on the hit that kills it."""
    if zombie.dead:
        return False
    zombie.health = max(0, zombie.health - int(amount))
    if zombie.health <= 0:
        zombie.dead = True
        return True
    return False


def zombie_color(zombie: Zombie) -> tuple:
    base = ZOMBIES[zombie.kind]["color"]
    if zombie.health / zombie.max_health < 0.5:
        return tuple(int(c * 0.7) for c in base)
    return base
