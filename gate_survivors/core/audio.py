# core/audio.py
# "Python-only assets": the shot sound is synthesised, not loaded.
import array
import logging
import random

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
SHOT_MS = 90
SHOT_VOLUME = 0.25


def _noise_burst(ms: int, seed: int = 7) -> bytes:
    """Decaying white noise, signed 16-bit mono."""
    rng = random.Random(seed)
    n = SAMPLE_RATE * ms // 1000
    samples = array.array("h")
    for i in range(n):
        decay = (1.0 - i / n) ** 3
        samples.append(int(rng.uniform(-1.0, 1.0) * decay * 32767))
    return samples.tobytes()


class ShotAudio:
    """
    Fire-and-forget shot sound.
    If the mixer can't start (no audio device) it stays quiet.
    """

    def __init__(self):
        self.sound = None

    def load(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.sound = pygame.mixer.Sound(buffer=_noise_burst(SHOT_MS))
            self.sound.set_volume(SHOT_VOLUME)
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            self.sound = None

    def play(self):
        if self.sound is not None:
            self.sound.play()
