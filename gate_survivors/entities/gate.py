# entities/gate.py
from dataclasses import dataclass

import pygame

from gate_survivors.core.settings import (
    GATE_WIDTH, GATE_HEIGHT, GATE_SPAWN_OFFSET, LANE_WIDTH, NUM_LANES,
    MAX_SHOOTER_COUNT,
)
from gate_survivors.core.utils import clamp

ADD = "add"
MULTIPLY = "multiply"


@dataclass
class Gate:
    pos: pygame.Vector2   # top-left
    lane: int
    kind: str
    value: int
    width: float = GATE_WIDTH
    height: float = GATE_HEIGHT
    active: bool = True
    passed: bool = False

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.width), int(self.height))

    @property
    def label(self) -> str:
        return f"+{self.value}" if self.kind == ADD else f"x{self.value}"


def create_gate(lane: int, kind: str, value: int) -> Gate:
    if lane not in range(NUM_LANES):
        raise ValueError(f"lane must be 0..{NUM_LANES - 1}, got {lane!r}")
    x = lane * LANE_WIDTH + (LANE_WIDTH - GATE_WIDTH) / 2
    y = -GATE_HEIGHT - GATE_SPAWN_OFFSET
    return Gate(pos=pygame.Vector2(x, y), lane=lane, kind=kind, value=int(value))


def apply_gate(player, gate: Gate) -> bool:
    """
    Apply a gate's effect to the player's shooter count, once.
    Returns False if the gate was already used.
    """
    if gate.passed or not gate.active:
        return False
    gate.passed = True

    if gate.kind == ADD:
        count = player.shooter_count + gate.value
    else:
        count = player.shooter_count * gate.value

    player.shooter_count = int(clamp(count, 1, MAX_SHOOTER_COUNT))
    return True
