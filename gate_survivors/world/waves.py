# world/waves.py
import logging
from dataclasses import dataclass

from gate_survivors.core.settings import (
    BASE_ZOMBIES_PER_WAVE, WAVE_ZOMBIE_INCREASE, WAVE_DELAY, ZOMBIE_SPAWN_INTERVAL,
)

logger = logging.getLogger(__name__)


def wave_size(wave: int) -> int:
    return BASE_ZOMBIES_PER_WAVE + (wave - 1) * WAVE_ZOMBIE_INCREASE


@dataclass
class GameState:
    """Read-only to everything except Level."""
    is_playing: bool = True
    is_paused: bool = False
    current_wave: int = 1
    zombies_killed: int = 0
    zombies_in_wave: int = BASE_ZOMBIES_PER_WAVE
    zombies_spawned: int = 0
    wave_start_time: float = 0.0
    wave_active: bool = True
    exploration_mode: bool = False
    total_kills: int = 0

    @property
    def zombies_remaining(self) -> int:
        return max(0, self.zombies_in_wave - self.zombies_killed)


class WaveManager:
    """
    Wave system.
    - Active: spawn one zombie every ZOMBIE_SPAWN_INTERVAL until the quota is out
    - Complete when the quota is spawned and nothing is left alive
    - Resting ("exploration"): wait WAVE_DELAY, then start the next, bigger wave
    Level asks; WaveManager only keeps the counters and timestamps.
    """

    def __init__(self, start_time: float = 0.0):
        self.state = GameState(wave_start_time=start_time)
        self.last_spawn_time = 0.0

    @property
    def wave_number(self) -> int:
        return self.state.current_wave

    def should_spawn(self, now: float) -> bool:
        s = self.state
        return (
            s.wave_active
            and s.zombies_spawned < s.zombies_in_wave
            and now - self.last_spawn_time > ZOMBIE_SPAWN_INTERVAL
        )

    def record_spawn(self, now: float):
        self.state.zombies_spawned += 1
        self.last_spawn_time = now

    def record_kill(self):
        self.state.zombies_killed += 1
        self.state.total_kills += 1

    def is_complete(self, live_zombies: int) -> bool:
        s = self.state
        return s.zombies_spawned >= s.zombies_in_wave and live_zombies == 0

    def complete(self, now: float):
        s = self.state
        s.wave_active = False
        s.wave_start_time = now
        s.exploration_mode = True
        logger.info("Wave %d complete (%d killed)", s.current_wave, s.zombies_killed)

    def ready_for_next(self, now: float) -> bool:
        s = self.state
        return (not s.wave_active) and now - s.wave_start_time > WAVE_DELAY

    def start_next(self, now: float):
        s = self.state
        s.current_wave += 1
        s.zombies_in_wave = wave_size(s.current_wave)
        s.zombies_spawned = 0
        s.zombies_killed = 0
        s.wave_active = True
        s.exploration_mode = False
        s.wave_start_time = now
        self.last_spawn_time = now
        logger.info("Wave %d started: %d zombies", s.current_wave, s.zombies_in_wave)

    def restart_current(self, now: float):
        # after a respawn: same wave number, spawn the whole quota again
        s = self.state
        s.zombies_spawned = 0
        s.wave_active = True
        s.exploration_mode = False
        self.last_spawn_time = now
