# core/input.py
import pygame

MOVE_LEFT = "left"
MOVE_RIGHT = "right"


class Input:
    """Turns raw key state into the logical keys Level reads."""

    def __init__(self):
        self._keys = None
        self.held = {MOVE_LEFT: False, MOVE_RIGHT: False}

    def update(self):
        self._keys = pygame.key.get_pressed()
        self.held[MOVE_LEFT] = self.left()
        self.held[MOVE_RIGHT] = self.right()

    def left(self) -> bool:
        k = self._keys
        return bool(k[pygame.K_a] or k[pygame.K_LEFT])

    def right(self) -> bool:
        k = self._keys
        return bool(k[pygame.K_d] or k[pygame.K_RIGHT])
