# core/game.py
import logging
import random
from typing import Iterable, Iterator, Optional, Protocol

import pygame

from gate_survivors.core.settings import TITLE, CANVAS_WIDTH, CANVAS_HEIGHT, FPS
from gate_survivors.core.audio import ShotAudio
from gate_survivors.core.input import Input
from gate_survivors.world.level import Level
from gate_survivors.ui.hud import HUD
from gate_survivors.ui.renderer import Renderer

logger = logging.getLogger(__name__)


class TickDriver(Protocol):
    """Anything that yields increasing frame timestamps in ms."""

    def __iter__(self) -> Iterator[float]:
        ...


class PygameTickDriver:
    def __init__(self, fps: int = FPS):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.running = True

    def stop(self):
        self.running = False

    def __iter__(self) -> Iterator[float]:
        while self.running:
            self.clock.tick(self.fps)
            yield float(pygame.time.get_ticks())


class ManualTickDriver:
    """Feeds synthetic timestamps; no display needed."""

    def __init__(self, timestamps: Iterable[float]):
        self.timestamps = list(timestamps)

    @classmethod
    def steps(cls, step_ms: float, count: int, start: float = 0.0) -> "ManualTickDriver":
        return cls(start + step_ms * i for i in range(count))

    def __iter__(self) -> Iterator[float]:
        return iter(self.timestamps)


def drive(level: Level, driver: TickDriver, keys: Optional[dict] = None) -> Level:
    """Run a level headless over every timestamp the driver yields."""
    keys = keys or {}
    for now in driver:
        level.frame(now, keys)
    return level


class Game:
    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        self.driver = PygameTickDriver(FPS)

        self.audio = ShotAudio()
        self.audio.load()

        self.input = Input()

        rng = random.Random(seed) if seed is not None else None

        self.level = Level(rng=rng, on_shot=self.audio.play, start_time=float(pygame.time.get_ticks()))
        self.renderer = Renderer()
        self.hud = HUD()

    def run(self):
        logger.info("Starting %s", TITLE)
        for now in self.driver:
            self._handle_events()
            if not self.driver.running:
                break

            self.input.update()
            self.level.frame(now, self.input.held)

            self.renderer.draw(self.screen, self.level)
            self.hud.draw(self.screen, self.level)
            pygame.display.flip()

        logger.info("Quit on wave %d", self.level.state.current_wave)
        pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.driver.stop()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.driver.stop()

                if event.key == pygame.K_p:
                    self.level.toggle_pause()
