"""
Zombie stat tables live here so you can tune without touching Level code.

Each entry is keyed by type name. Order matters: weighted spawning walks
the table top to bottom, and falls back to the first entry.

Extra keys:
  "spit_cooldown"      spitter only, ms between projectiles
  "explosion_radius"   exploder only, px
"""

STANDARD = "standard"
RUNNER = "runner"
TANK = "tank"
SPITTER = "spitter"
EXPLODER = "exploder"

ZOMBIES = {
    STANDARD: {
        "health": 60,
        "speed": 1.2,
        "damage": 10,
        "radius": 18,
        "attack_cooldown": 1000,
        "color": (74, 124, 78),
        "resource_drop": 5,
        "spawn_weight": 50,
    },
    RUNNER: {
        "health": 30,
        "speed": 3.5,
        "damage": 8,
        "radius": 15,
        "attack_cooldown": 800,
        "color": (124, 78, 74),
        "resource_drop": 8,
        "spawn_weight": 25,
    },
    TANK: {
        "health": 200,
        "speed": 0.6,
        "damage": 25,
        "radius": 28,
        "attack_cooldown": 1500,
        "color": (61, 90, 61),
        "resource_drop": 15,
        "spawn_weight": 10,
    },
    SPITTER: {
        "health": 45,
        "speed": 0.9,
        "damage": 12,
        "radius": 16,
        "attack_cooldown": 2000,
        "spit_cooldown": 2500,
        "color": (124, 124, 74),
        "resource_drop": 10,
        "spawn_weight": 10,
    },
    EXPLODER: {
        "health": 40,
        "speed": 2.0,
        "damage": 35,
        "radius": 20,
        "explosion_radius": 100,
        "attack_cooldown": 500,
        "color": (124, 74, 74),
        "resource_drop": 12,
        "spawn_weight": 5,
    },
}

# Downward drift multiplier per type (anything missing drifts at 1.0)
DRIFT_MULT = {
    SPITTER: 0.7,
    EXPLODER: 1.3,
    RUNNER: 1.2,
}

# Single-letter tag drawn on each zombie
SYMBOLS = {
    STANDARD: "Z",
    RUNNER: "R",
    TANK: "T",
    SPITTER: "S",
    EXPLODER: "E",
}


def spawn_weights() -> dict:
    return {name: cfg["spawn_weight"] for name, cfg in ZOMBIES.items()}
