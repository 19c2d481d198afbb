# entities/player.py
from dataclasses import dataclass

import pygame

from gate_survivors.core.settings import (
    CANVAS_WIDTH, CANVAS_HEIGHT,
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, PLAYER_MAX_HEALTH,
    PLAYER_SHOOT_INTERVAL, PLAYER_BOTTOM_OFFSET, PLAYER_ROTATION,
    INITIAL_SHOOTER_COUNT,
)


@dataclass
class Player:
    """
    The only player. Created once, never removed:
    death and respawn just reposition and heal it.

    pos is the top-left corner; timers are ms counting down to 0.
    """
    pos: pygame.Vector2
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    health: int = PLAYER_MAX_HEALTH
    max_health: int = PLAYER_MAX_HEALTH
    speed: float = PLAYER_SPEED
    rotation: float = PLAYER_ROTATION

    # shooting
    last_shoot_time: float = 0.0
    shoot_interval: float = PLAYER_SHOOT_INTERVAL
    shooter_count: int = INITIAL_SHOOTER_COUNT

    # timers
    invulnerable_time: float = 0.0
    damage_flash_time: float = 0.0

    resources: int = 0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.width), int(self.height))

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.pos.x + self.width / 2, self.pos.y + self.height / 2)

    @property
    def invulnerable(self) -> bool:
        return self.invulnerable_time > 0.0


def spawn_position(width: float = PLAYER_WIDTH, height: float = PLAYER_HEIGHT) -> pygame.Vector2:
    return pygame.Vector2(CANVAS_WIDTH / 2 - width / 2, baseline_y(height))


def baseline_y(height: float = PLAYER_HEIGHT) -> float:
    return CANVAS_HEIGHT - height - PLAYER_BOTTOM_OFFSET


def create_player() -> Player:
    return Player(pos=spawn_position())
