# world/level.py
import logging
import random
from typing import Callable, List, Mapping, Optional

import pygame

from gate_survivors.core.input import MOVE_LEFT, MOVE_RIGHT
from gate_survivors.core.settings import (
    CANVAS_WIDTH, CANVAS_HEIGHT,
    GUN_LENGTH, SPREAD_ANGLE, MAX_BULLETS_PER_VOLLEY,
    PLAYER_ROTATION, PLAYER_INVULNERABLE_TIME, PLAYER_DAMAGE_FLASH_TIME,
    BULLET_CULL_MARGIN, SPIT_SPEED_MULT,
    ZOMBIE_ESCAPE_DAMAGE, EXPLOSION_SPLASH_DAMAGE, WAVE_COMPLETE_HEAL,
    GATE_SPEED,
    DEATH_RESPAWN_DELAY, DEATH_RESOURCE_LOSS_PERCENT, RESPAWN_INVULNERABLE_TIME,
)
from gate_survivors.core.utils import (
    angle_between, circle_overlap, clamp, rect_circle_overlap,
)
from gate_survivors.entities.bullet import ENEMY, PLAYER, Bullet, create_bullet
from gate_survivors.entities.gate import Gate, apply_gate
from gate_survivors.entities.player import baseline_y, create_player, spawn_position
from gate_survivors.entities.zombie import (
    Zombie, create_random_zombie, damage_zombie, update_zombie_motion,
)
from gate_survivors.world.effects import EffectsManager
from gate_survivors.world.gates import GateSpawner
from gate_survivors.world.waves import WaveManager
from gate_survivors.world.zombie_defs import EXPLODER, SPITTER

logger = logging.getLogger(__name__)

DEFAULT_EXPLOSION_RADIUS = 100


class Level:
    """
    The whole simulation. Owns every entity list and all the timers.

    Driven from outside once per frame:
        level.frame(now_ms, held_keys)
    then the renderer reads player / bullets / zombies / gates / state.

    Time is injected (ms); movement is per tick, cooldowns are in ms.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_shot: Optional[Callable[[], None]] = None,
        start_time: float = 0.0,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.on_shot = on_shot

        self.effects = EffectsManager(self.rng)
        self.waves = WaveManager(start_time)
        self.gate_spawner = GateSpawner(start_time, self.rng)

        self.player = create_player()
        self.bullets: List[Bullet] = []
        self.zombies: List[Zombie] = []
        self.gates: List[Gate] = []

        self.last_time: Optional[float] = None
        self.now = start_time

        self.is_dead = False
        self.death_time = 0.0

    @property
    def state(self):
        return self.waves.state

    # ------------------------------------------------------------
    # Frame entry
    # ------------------------------------------------------------
    def frame(self, now: float, keys: Mapping[str, bool]) -> float:
        """Advance one frame. Returns the delta used (ms)."""
        dt = 0.0 if self.last_time is None else now - self.last_time
        self.last_time = now

        if self.state.is_paused or not self.state.is_playing:
            return dt

        if self.is_dead:
            self._update_death(now)
        else:
            self.update(now, dt, keys)
        return dt

    def toggle_pause(self) -> bool:
        self.state.is_paused = not self.state.is_paused
        logger.info("Paused" if self.state.is_paused else "Resumed")
        return self.state.is_paused

    def update(self, now: float, dt: float, keys: Mapping[str, bool]):
        self.now = now

        self._update_player(now, dt, keys)
        self._update_bullets(now)
        self._update_zombies(now, dt)

        self._update_spawning(now)
        self._update_wave(now)

        self._update_gates()
        self.gates.extend(self.gate_spawner.update(now))

        self.effects.update(dt)

        self._check_collisions(now)
        self._check_gate_collisions()

    # ------------------------------------------------------------
    # Player
    # ------------------------------------------------------------
    def _update_player(self, now: float, dt: float, keys: Mapping[str, bool]):
        p = self.player

        p.invulnerable_time = max(0.0, p.invulnerable_time - dt)
        p.damage_flash_time = max(0.0, p.damage_flash_time - dt)

        if keys.get(MOVE_LEFT):
            p.pos.x -= p.speed
        if keys.get(MOVE_RIGHT):
            p.pos.x += p.speed

        p.pos.x = clamp(p.pos.x, 0, CANVAS_WIDTH - p.width)
        p.pos.y = baseline_y(p.height)
        p.rotation = PLAYER_ROTATION

        if now - p.last_shoot_time > p.shoot_interval:
            self._shoot(now)
            p.last_shoot_time = now

    def _shoot(self, now: float):
        p = self.player
        center = p.center
        count = min(p.shooter_count, MAX_BULLETS_PER_VOLLEY)

        for i in range(count):
            # fan the volley evenly across SPREAD_ANGLE
            offset = ((i - (count - 1) / 2) * SPREAD_ANGLE) / max(1, count - 1)
            rotation = p.rotation + offset

            gun = center + _polar(rotation, GUN_LENGTH)
            self.bullets.append(create_bullet(gun.x, gun.y, rotation, now))
            self.effects.create_muzzle_flash(gun.x, gun.y, rotation)

        if self.on_shot is not None:
            self.on_shot()

    def damage_player(self, amount: int) -> bool:
        p = self.player
        if self.is_dead or p.invulnerable:
            return False

        p.health = max(0, p.health - int(amount))
        p.damage_flash_time = PLAYER_DAMAGE_FLASH_TIME
        p.invulnerable_time = PLAYER_INVULNERABLE_TIME

        if p.health <= 0:
            self._handle_player_death()
        return True

    def _handle_player_death(self):
        p = self.player
        lost = int(p.resources * DEATH_RESOURCE_LOSS_PERCENT)
        p.resources -= lost

        self.is_dead = True
        self.death_time = self.now
        logger.info("Player died on wave %d (lost %d resources)", self.state.current_wave, lost)

    def _update_death(self, now: float):
        if now - self.death_time > DEATH_RESPAWN_DELAY:
            self._respawn(now)

    def _respawn(self, now: float):
        p = self.player
        self.is_dead = False

        p.pos = spawn_position(p.width, p.height)
        p.health = p.max_health
        p.damage_flash_time = 0.0
        p.invulnerable_time = RESPAWN_INVULNERABLE_TIME

        self.zombies.clear()
        self.bullets.clear()
        self.effects.clear()

        self.waves.restart_current(now)
        logger.info("Player respawned, wave %d restarts", self.state.current_wave)

    # ------------------------------------------------------------
    # Bullets
    # ------------------------------------------------------------
    def _update_bullets(self, now: float):
        m = BULLET_CULL_MARGIN
        for b in self.bullets:
            b.pos += b.vel
            if (
                b.pos.x < -m or b.pos.x > CANVAS_WIDTH + m
                or b.pos.y < -m or b.pos.y > CANVAS_HEIGHT + m
                or b.expired(now)
            ):
                b.alive = False
        self.bullets = [b for b in self.bullets if b.alive]

    # ------------------------------------------------------------
    # Zombies
    # ------------------------------------------------------------
    def _update_zombies(self, now: float, dt: float):
        target = self.player.center

        for z in self.zombies:
            update_zombie_motion(z)
            self.effects.update_blood(z.blood_particles, dt)

            if z.kind == SPITTER and (
                z.last_spit_time is None or now - z.last_spit_time > z.spit_cooldown
            ):
                self._spit(z, target.x, target.y, now)
                z.last_spit_time = now

            # walked off the bottom: it got through
            if z.pos.y > CANVAS_HEIGHT + z.radius:
                z.dead = True
                self.damage_player(ZOMBIE_ESCAPE_DAMAGE)

        self.zombies = [z for z in self.zombies if not z.dead]

    def _spit(self, z: Zombie, tx: float, ty: float, now: float):
        angle = angle_between(z.pos.x, z.pos.y, tx, ty)
        b = create_bullet(z.pos.x, z.pos.y, angle, now, faction=ENEMY)
        b.damage = z.damage
        b.vel *= SPIT_SPEED_MULT
        self.bullets.append(b)

    def _update_spawning(self, now: float):
        if not self.waves.should_spawn(now):
            return
        z = create_random_zombie(self.rng)
        self.zombies.append(z)
        self.waves.record_spawn(now)
        logger.debug("Spawned %s in lane %d (%d/%d)", z.kind, z.lane,
                     self.state.zombies_spawned, self.state.zombies_in_wave)

    def _update_wave(self, now: float):
        if self.state.wave_active and self.waves.is_complete(len(self.zombies)):
            self.waves.complete(now)
            p = self.player
            p.health = min(p.health + WAVE_COMPLETE_HEAL, p.max_health)

        if self.waves.ready_for_next(now):
            self.waves.start_next(now)

    # ------------------------------------------------------------
    # Gates
    # ------------------------------------------------------------
    def _update_gates(self):
        for g in self.gates:
            g.pos.y += GATE_SPEED
        self.gates = [g for g in self.gates if g.pos.y <= CANVAS_HEIGHT + g.height]

    def _check_gate_collisions(self):
        for g in self.gates:
            if g.passed or not g.active:
                continue
            if self.player.rect.colliderect(g.rect) and apply_gate(self.player, g):
                logger.info("Gate %s passed, shooters now %d", g.label, self.player.shooter_count)

    # ------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------
    def _check_collisions(self, now: float):
        # player bullets vs zombies: one zombie per bullet
        for b in self.bullets:
            if not b.alive or b.faction != PLAYER:
                continue
            for z in self.zombies:
                if z.dead:
                    continue
                if rect_circle_overlap(b, z.pos.x, z.pos.y, z.radius):
                    died = damage_zombie(z, b.damage)
                    z.blood_particles.extend(self.effects.create_blood_particles(z.pos.x, z.pos.y))
                    if died:
                        self._kill_zombie(z, chain=True)
                    b.alive = False
                    break

        # spit vs player
        for b in self.bullets:
            if self.player.invulnerable:
                break
            if b.alive and b.faction == ENEMY and b.rect.colliderect(self.player.rect):
                self.damage_player(b.damage)
                b.alive = False

        # zombies vs player
        if not self.player.invulnerable:
            for z in self.zombies:
                if z.dead:
                    continue
                if (
                    rect_circle_overlap(self.player, z.pos.x, z.pos.y, z.radius)
                    and now - z.last_attack_time > z.attack_cooldown
                ):
                    self.damage_player(z.damage)
                    z.last_attack_time = now

                    if z.kind == EXPLODER:
                        # blows up on contact; gone, but not a kill
                        self._detonate(z)
                        z.dead = True

        self.bullets = [b for b in self.bullets if b.alive]
        self.zombies = [z for z in self.zombies if not z.dead]

    def _kill_zombie(self, z: Zombie, chain: bool):
        z.dead = True
        self.waves.record_kill()
        self.player.resources += z.resource_drop

        if chain and z.kind == EXPLODER:
            self._detonate(z)

        z.blood_particles.extend(self.effects.create_blood_particles(z.pos.x, z.pos.y))

    def _detonate(self, z: Zombie):
        radius = z.explosion_radius or DEFAULT_EXPLOSION_RADIUS
        self.effects.create_explosion(z.pos.x, z.pos.y, radius)
        logger.debug("Exploder detonated at (%.0f, %.0f)", z.pos.x, z.pos.y)

        p = self.player
        c = p.center
        if circle_overlap(z.pos.x, z.pos.y, radius, c.x, c.y, p.width / 2):
            self.damage_player(z.damage)

        # splash never chains into other exploders
        for other in self.zombies:
            if other is z or other.dead:
                continue
            if circle_overlap(z.pos.x, z.pos.y, radius, other.pos.x, other.pos.y, other.radius):
                if damage_zombie(other, EXPLOSION_SPLASH_DAMAGE):
                    self._kill_zombie(other, chain=False)


def _polar(angle: float, length: float) -> pygame.Vector2:
    return pygame.Vector2(length, 0).rotate_rad(angle)
