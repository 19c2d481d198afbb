# ui/hud.py
import pygame

from gate_survivors.core.settings import CANVAS_WIDTH, CANVAS_HEIGHT, HUD_COLOR

HELP_LINES = (
    "A/D or <- -> : move",
    "Auto-shoot",
    "Touch gates to add shooters",
    "Green = add | Orange = multiply",
    "P : pause",
)


class HUD:
    """
    Text overlay:
    - HP bar, shooters, resources, wave progress
    - exploration banner between waves
    - pause and death screens
    """

    def __init__(self, font_size: int = 18):
        pygame.font.init()
        fs = max(10, min(48, int(font_size)))
        self.font = pygame.font.SysFont("consolas", fs)
        self.big = pygame.font.SysFont("consolas", fs * 3, bold=True)

    def _text(self, surf, font, msg, pos, color=HUD_COLOR, anchor="topleft"):
        txt = font.render(msg, True, color)
        rect = txt.get_rect(**{anchor: pos})
        surf.blit(txt, rect)

    def draw(self, surf: pygame.Surface, level):
        p = level.player
        s = level.state

        # -------------------------
        # Health Bar
        # -------------------------
        w, h, x, y = 240, 16, 14, 12
        pct = max(0.0, min(1.0, p.health / max(1, p.max_health)))

        pygame.draw.rect(surf, (40, 40, 55), (x, y, w, h))
        pygame.draw.rect(surf, (80, 210, 120), (x, y, int(w * pct), h))
        pygame.draw.rect(surf, (230, 230, 240), (x, y, w, h), 2)
        self._text(surf, self.font, f"HP {p.health}/{p.max_health}", (x, y + 20))

        # -------------------------
        # Stats
        # -------------------------
        self._text(surf, self.font, f"Shooters: {p.shooter_count}", (x, y + 44))
        self._text(surf, self.font, f"Resources: {p.resources}", (x, y + 66))
        self._text(surf, self.font, f"Wave: {s.current_wave}", (x, y + 88))
        if s.wave_active:
            self._text(surf, self.font, f"Zombies: {s.zombies_remaining}", (x, y + 110))
        else:
            self._text(surf, self.font, "WAVE COMPLETE!", (x, y + 110), (120, 255, 140))

        yy = y
        for line in HELP_LINES:
            self._text(surf, self.font, line, (CANVAS_WIDTH - 14, yy), (200, 200, 215), "topright")
            yy += 20

        if s.exploration_mode:
            self._text(surf, self.font, "EXPLORATION MODE", (CANVAS_WIDTH // 2, 150), (120, 200, 255), "center")
            self._text(surf, self.font, "Grab gates and get ready!", (CANVAS_WIDTH // 2, 172), (200, 200, 215), "center")

        if s.is_paused:
            self._shade(surf, 120)
            self._text(surf, self.big, "PAUSED", (CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2), anchor="center")

        if level.is_dead:
            self.draw_death(surf, level)

    def _shade(self, surf, alpha: int):
        shade = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        surf.blit(shade, (0, 0))

    def draw_death(self, surf, level):
        self._shade(surf, 170)
        cx, cy = CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2
        self._text(surf, self.big, "YOU DIED", (cx, cy - 100), (255, 70, 70), "center")
        self._text(surf, self.font, f"Wave Reached: {level.state.current_wave}", (cx, cy - 30), anchor="center")
        self._text(surf, self.font, f"Zombies Killed: {level.state.total_kills}", (cx, cy), anchor="center")
        self._text(surf, self.font, "You lost 50% of your resources!", (cx, cy + 30), (255, 200, 80), "center")
        self._text(surf, self.font, "Respawning...", (cx, cy + 70), (200, 200, 215), "center")
