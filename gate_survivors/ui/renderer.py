# ui/renderer.py
import pygame

from gate_survivors.core.settings import (
    CANVAS_WIDTH, CANVAS_HEIGHT, LANE_DIVIDER_X,
    BG_COLOR, LANE_DIVIDER_COLOR, PLAYER_COLOR, PLAYER_HURT_COLOR,
    BULLET_COLOR, SPIT_COLOR, ADD_GATE_COLOR, MULTIPLY_GATE_COLOR, GUN_LENGTH,
)
from gate_survivors.entities.bullet import ENEMY
from gate_survivors.entities.gate import ADD
from gate_survivors.entities.zombie import zombie_color
from gate_survivors.world.zombie_defs import SYMBOLS


def _health_bar(surf, x: float, y: float, w: float, h: float, frac: float):
    frac = max(0.0, min(1.0, frac))
    pygame.draw.rect(surf, (60, 20, 20), (x, y, w, h))
    col = (80, 210, 120) if frac > 0.5 else (230, 180, 60) if frac > 0.25 else (220, 60, 60)
    pygame.draw.rect(surf, col, (x, y, w * frac, h))


class Renderer:
    """
    Draws the level. Reads only: nothing here touches gameplay state.
    Effects with alpha go on a shared SRCALPHA overlay.
    """

    def __init__(self, font_size: int = 18):
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", font_size, bold=True)
        self.gate_font = pygame.font.SysFont("consolas", 30, bold=True)
        self.overlay = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)

    def draw(self, surf: pygame.Surface, level):
        surf.fill(BG_COLOR)
        pygame.draw.line(surf, LANE_DIVIDER_COLOR, (LANE_DIVIDER_X, 0), (LANE_DIVIDER_X, CANVAS_HEIGHT), 2)

        self.overlay.fill((0, 0, 0, 0))

        for g in level.gates:
            self.draw_gate(surf, g)
        for b in level.bullets:
            self.draw_bullet(surf, b)
        for z in level.zombies:
            self.draw_zombie(surf, z)

        self.draw_player(surf, level.player)
        self.draw_effects(level.effects)

        surf.blit(self.overlay, (0, 0))

    def draw_gate(self, surf, g):
        col = ADD_GATE_COLOR if g.kind == ADD else MULTIPLY_GATE_COLOR
        alpha = 60 if g.passed else 140
        rect = g.rect
        pygame.draw.rect(self.overlay, (*col, alpha), rect)
        pygame.draw.rect(surf, col, rect, 3)

        txt = self.gate_font.render(g.label, True, (255, 255, 255))
        surf.blit(txt, txt.get_rect(center=rect.center))

    def draw_bullet(self, surf, b):
        col = SPIT_COLOR if b.faction == ENEMY else BULLET_COLOR
        if b.faction == ENEMY:
            pygame.draw.circle(surf, col, (int(b.pos.x), int(b.pos.y)), 5)
        else:
            pygame.draw.rect(surf, col, b.rect)

    def draw_zombie(self, surf, z):
        for p in z.blood_particles:
            pygame.draw.circle(self.overlay, (139, 0, 0, int(255 * p.alpha)), (int(p.x), int(p.y)), int(p.size))

        cx, cy = int(z.pos.x), int(z.pos.y)
        r = int(z.radius)
        pygame.draw.circle(surf, zombie_color(z), (cx, cy), r)
        pygame.draw.circle(surf, (20, 20, 26), (cx, cy), r, 2)

        txt = self.font.render(SYMBOLS.get(z.kind, "?"), True, (235, 235, 235))
        surf.blit(txt, txt.get_rect(center=(cx, cy)))

        if z.health < z.max_health:
            _health_bar(surf, cx - r, cy - r - 8, r * 2, 4, z.health / z.max_health)

    def draw_player(self, surf, p):
        # blink while invulnerable
        if p.invulnerable and int(p.invulnerable_time / 100) % 2 == 1:
            return

        col = PLAYER_HURT_COLOR if p.damage_flash_time > 0 else PLAYER_COLOR
        rect = p.rect
        pygame.draw.rect(surf, col, rect)
        pygame.draw.rect(surf, (20, 20, 26), rect, 2)

        c = p.center
        tip = c + pygame.Vector2(GUN_LENGTH, 0).rotate_rad(p.rotation)
        pygame.draw.line(surf, (200, 200, 210), c, tip, 4)

        _health_bar(surf, p.pos.x, p.pos.y + p.height + 4, p.width, 4, p.health / p.max_health)

    def draw_effects(self, effects):
        for f in effects.muzzle_flashes:
            a = f.alpha
            pygame.draw.circle(self.overlay, (255, 200, 0, int(150 * a)), (int(f.x), int(f.y)), int(f.size))
            pygame.draw.circle(self.overlay, (255, 255, 200, int(255 * a)), (int(f.x), int(f.y)), int(f.size * 0.4))

        for e in effects.explosions:
            a = 1.0 - e.progress
            r = max(1, int(e.radius))
            pygame.draw.circle(self.overlay, (255, 200, 0, int(120 * a)), (int(e.x), int(e.y)), max(1, int(r * 0.7)))
            pygame.draw.circle(self.overlay, (255, 100, 0, int(255 * a)), (int(e.x), int(e.y)), r, 6)
