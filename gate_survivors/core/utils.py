# core/utils.py
import math
import random

import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def normalize(x: float, y: float) -> pygame.Vector2:
    v = pygame.Vector2(x, y)
    if v.length_squared() == 0:
        return pygame.Vector2(0, 0)
    return v.normalize()


def angle_between(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.atan2(y2 - y1, x2 - x1)


# ------------------------------------------------------------
# Random sampling (rng is anything with random(): module or Random)
# ------------------------------------------------------------
def random_int(lo: int, hi: int, rng=random) -> int:
    """Inclusive on both ends."""
    return math.floor(rng.random() * (hi - lo + 1)) + lo


def random_float(lo: float, hi: float, rng=random) -> float:
    return rng.random() * (hi - lo) + lo


def random_element(items, rng=random):
    return items[math.floor(rng.random() * len(items))]


def weighted_choice(weights: dict, rng=random) -> str:
    """
    Pick a key with probability proportional to its weight.
    Walks the mapping in insertion order, subtracting each weight from a
    uniform draw in [0, total) until the remainder is <= 0.
    """
    total = sum(weights.values())
    remaining = rng.random() * total

    for key, weight in weights.items():
        remaining -= weight
        if remaining <= 0:
            return key

    # float rounding can leave a sliver; first key wins
    return next(iter(weights))


# ------------------------------------------------------------
# Collision (rect records expose pos (top-left), width, height;
# rect vs rect goes through each record's pygame.Rect)
# ------------------------------------------------------------
def rect_circle_overlap(rect, cx: float, cy: float, radius: float) -> bool:
    # closest point on the rect to the circle centre
    nx = clamp(cx, rect.pos.x, rect.pos.x + rect.width)
    ny = clamp(cy, rect.pos.y, rect.pos.y + rect.height)
    return distance(cx, cy, nx, ny) < radius


def circle_overlap(x1: float, y1: float, r1: float, x2: float, y2: float, r2: float) -> bool:
    return distance(x1, y1, x2, y2) < r1 + r2
