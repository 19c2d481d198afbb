import os
import random

import pytest

# headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from gate_survivors.world.level import Level  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def level(rng):
    return Level(rng=rng)
