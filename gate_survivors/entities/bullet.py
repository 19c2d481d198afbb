# entities/bullet.py
import math
from dataclasses import dataclass

import pygame

from gate_survivors.core.settings import (
    BULLET_WIDTH, BULLET_HEIGHT, BULLET_SPEED, BULLET_DAMAGE, BULLET_LIFETIME,
)

PLAYER = "player"
ENEMY = "enemy"


@dataclass
class Bullet:
    pos: pygame.Vector2        # top-left
    vel: pygame.Vector2        # px per tick
    created_at: float
    width: float = BULLET_WIDTH
    height: float = BULLET_HEIGHT
    damage: int = BULLET_DAMAGE
    lifetime: float = BULLET_LIFETIME
    faction: str = PLAYER
    alive: bool = True

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.width), int(self.height))

    def expired(self, now: float) -> bool:
        return now - self.created_at > self.lifetime


def create_bullet(x: float, y: float, angle: float, timestamp: float, faction: str = PLAYER) -> Bullet:
    vel = pygame.Vector2(math.cos(angle) * BULLET_SPEED, math.sin(angle) * BULLET_SPEED)
    return Bullet(pos=pygame.Vector2(x, y), vel=vel, created_at=timestamp, faction=faction)
