# world/gates.py
import logging
import random
from typing import List

from gate_survivors.core.settings import (
    GATE_SPAWN_INTERVAL, GATE_ADD_RANGE, GATE_MULTIPLY_RANGE, NUM_LANES,
)
from gate_survivors.core.utils import random_int
from gate_survivors.entities.gate import ADD, MULTIPLY, Gate, create_gate

logger = logging.getLogger(__name__)


class GateSpawner:
    """Drops a row of gates (one per lane) every GATE_SPAWN_INTERVAL ms."""

    def __init__(self, start_time: float = 0.0, rng=random):
        self.rng = rng
        self.last_spawn_time = start_time

    def roll(self, lane: int) -> Gate:
        kind = ADD if self.rng.random() > 0.5 else MULTIPLY
        lo, hi = GATE_ADD_RANGE if kind == ADD else GATE_MULTIPLY_RANGE
        return create_gate(lane, kind, random_int(lo, hi, self.rng))

    def update(self, now: float) -> List[Gate]:
        if now - self.last_spawn_time <= GATE_SPAWN_INTERVAL:
            return []
        self.last_spawn_time = now
        row = [self.roll(lane) for lane in range(NUM_LANES)]
        logger.debug("Gates spawned: %s", " | ".join(g.label for g in row))
        return row
