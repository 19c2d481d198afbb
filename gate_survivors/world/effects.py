# world/effects.py
import math
import random
from dataclasses import dataclass
from typing import List

from gate_survivors.core.settings import (
    MUZZLE_FLASH_LIFETIME, BLOOD_PARTICLE_COUNT, BLOOD_PARTICLE_LIFETIME,
    BLOOD_GRAVITY, EXPLOSION_LIFETIME,
)
from gate_survivors.core.utils import random_float


@dataclass
class MuzzleFlash:
    x: float
    y: float
    rotation: float
    size: float
    lifetime: float = MUZZLE_FLASH_LIFETIME

    @property
    def alpha(self) -> float:
        return max(0.0, self.lifetime / MUZZLE_FLASH_LIFETIME)


@dataclass
class BloodParticle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    lifetime: float = BLOOD_PARTICLE_LIFETIME
    alpha: float = 1.0


@dataclass
class Explosion:
    x: float
    y: float
    max_radius: float
    radius: float = 0.0
    age: float = 0.0
    lifetime: float = EXPLOSION_LIFETIME

    @property
    def progress(self) -> float:
        return min(1.0, self.age / self.lifetime)


class EffectsManager:
    """
    Purely visual bookkeeping:
    - owns muzzle flashes and explosions
    - builds blood particles but hands them to the caller (the zombie keeps them)
    Nothing here feeds back into gameplay.
    """

    def __init__(self, rng=random):
        self.rng = rng
        self.muzzle_flashes: List[MuzzleFlash] = []
        self.explosions: List[Explosion] = []

    def create_muzzle_flash(self, x: float, y: float, rotation: float):
        self.muzzle_flashes.append(
            MuzzleFlash(x, y, rotation, size=random_float(15, 25, self.rng))
        )

    def create_blood_particles(self, x: float, y: float) -> List[BloodParticle]:
        particles = []
        for i in range(BLOOD_PARTICLE_COUNT):
            # evenly around the circle, jittered
            angle = (math.pi * 2 * i) / BLOOD_PARTICLE_COUNT + random_float(-0.3, 0.3, self.rng)
            speed = random_float(2, 5, self.rng)
            particles.append(BloodParticle(
                x, y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                size=random_float(3, 8, self.rng),
            ))
        return particles

    def create_explosion(self, x: float, y: float, max_radius: float):
        self.explosions.append(Explosion(x, y, max_radius))

    def update(self, dt: float):
        for f in self.muzzle_flashes:
            f.lifetime -= dt
        self.muzzle_flashes = [f for f in self.muzzle_flashes if f.lifetime > 0.0]

        for e in self.explosions:
            e.age += dt
            e.radius = e.max_radius * e.progress
        self.explosions = [e for e in self.explosions if e.age < e.lifetime]

    @staticmethod
    def update_blood(particles: List[BloodParticle], dt: float):
        # in place: the list belongs to a zombie
        for p in particles:
            p.x += p.vx
            p.y += p.vy
            p.vy += BLOOD_GRAVITY
            p.lifetime -= dt
            p.alpha = max(0.0, p.lifetime / BLOOD_PARTICLE_LIFETIME)
        particles[:] = [p for p in particles if p.lifetime > 0.0]

    def clear(self):
        self.muzzle_flashes.clear()
        self.explosions.clear()
