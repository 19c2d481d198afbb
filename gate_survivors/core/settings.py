# core/settings.py
import math

TITLE = "Gate Survivors"
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 800
FPS = 60

# Colors (R,G,B)
BG_COLOR = (26, 26, 32)
LANE_DIVIDER_COLOR = (60, 60, 74)
PLAYER_COLOR = (70, 130, 220)
PLAYER_HURT_COLOR = (255, 120, 120)
BULLET_COLOR = (255, 230, 120)
SPIT_COLOR = (170, 200, 60)
HUD_COLOR = (245, 245, 255)
ADD_GATE_COLOR = (80, 200, 110)
MULTIPLY_GATE_COLOR = (240, 150, 50)

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Player (speeds are px per tick, times are ms)
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 40
PLAYER_SPEED = 4
PLAYER_MAX_HEALTH = 100
PLAYER_SHOOT_INTERVAL = 150
PLAYER_INVULNERABLE_TIME = 1000     # after taking a hit
PLAYER_DAMAGE_FLASH_TIME = 200
PLAYER_BOTTOM_OFFSET = 20           # gap between player and bottom edge
PLAYER_ROTATION = -math.pi / 2      # always facing up

# Shooting
GUN_LENGTH = 25
SPREAD_ANGLE = math.pi / 8          # total fan across one volley
MAX_BULLETS_PER_VOLLEY = 10
INITIAL_SHOOTER_COUNT = 1
MAX_SHOOTER_COUNT = 50

# Bullets
BULLET_WIDTH = 6
BULLET_HEIGHT = 12
BULLET_SPEED = 10
BULLET_DAMAGE = 20
BULLET_LIFETIME = 2000
BULLET_CULL_MARGIN = 50
SPIT_SPEED_MULT = 0.5

# Waves
BASE_ZOMBIES_PER_WAVE = 10
WAVE_ZOMBIE_INCREASE = 5
WAVE_DELAY = 5000                   # rest between waves
ZOMBIE_SPAWN_INTERVAL = 800
WAVE_COMPLETE_HEAL = 20

# Combat
ZOMBIE_ESCAPE_DAMAGE = 5
EXPLOSION_SPLASH_DAMAGE = 50

# Effects
MUZZLE_FLASH_LIFETIME = 50
BLOOD_PARTICLE_COUNT = 8
BLOOD_PARTICLE_LIFETIME = 800
BLOOD_GRAVITY = 0.2
EXPLOSION_LIFETIME = 500

# Death
DEATH_RESOURCE_LOSS_PERCENT = 0.5
DEATH_RESPAWN_DELAY = 2000
RESPAWN_INVULNERABLE_TIME = 2000

# Lanes
NUM_LANES = 2
LANE_WIDTH = CANVAS_WIDTH / NUM_LANES
LANE_DIVIDER_X = CANVAS_WIDTH / 2

# Gates
GATE_WIDTH = LANE_WIDTH * 0.8
GATE_HEIGHT = 60
GATE_SPAWN_OFFSET = 20              # extra gap above the top edge
GATE_SPAWN_INTERVAL = 4000
GATE_SPEED = 2
GATE_ADD_RANGE = (1, 3)
GATE_MULTIPLY_RANGE = (2, 3)
