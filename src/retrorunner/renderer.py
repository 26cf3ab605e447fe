import logging
import math

import pygame

from .settings import (
    WIDTH, HEIGHT, GROUND_Y, BG, GROUND, PLAYER_COLOR, ENEMY_COLOR, COIN_COLOR,
    HIGH_COIN_COLOR, WHITE, BLACK, POWERUP_COLORS, POWERUP_COINS_REQUIRED,
    HIGH_COIN_BONUS, PLAY_AGAIN_BUTTON, STATE_START, STATE_GAMEOVER,
)

logger = logging.getLogger(__name__)


def load_font(size):
    try:
        return pygame.font.Font(None, size)
    except pygame.error as e:
        logger.warning("Font unavailable, drawing without text: %s", e)
        return None


class Renderer:
    """Draws a RenderSnapshot with plain shapes. Never touches game state."""

    def __init__(self, screen):
        self.screen = screen
        self.font = load_font(32)
        self.small_font = load_font(24)
        self.large_font = load_font(64)

    def draw(self, snap, ticks=0):
        try:
            self.draw_background(snap.bg_offset)
            if snap.game_state == STATE_START:
                self.draw_start_screen(ticks)
                return
            self.draw_world(snap, ticks)
            self.draw_hud(snap)
            if snap.game_state == STATE_GAMEOVER:
                self.draw_game_over(snap)
        except pygame.error as e:
            logger.warning("Render issue: %s", e)

    def draw_background(self, offset):
        self.screen.fill(BG)
        # two stripe bands scrolling at half speed give a sense of motion
        for band in (0, WIDTH):
            x = int(round(offset)) + band
            for i in range(0, WIDTH, 80):
                pygame.draw.rect(self.screen, (225, 205, 250), (x + i, GROUND_Y - 140, 40, 140))
        pygame.draw.rect(self.screen, GROUND, (0, GROUND_Y, WIDTH, HEIGHT - GROUND_Y))

    def draw_world(self, snap, ticks):
        for e in snap.enemies:
            pygame.draw.rect(self.screen, ENEMY_COLOR, (int(e.x), int(e.y), e.width, e.height), border_radius=6)

        p = snap.player
        if snap.power_up_active:
            pulse = 4 + math.sin((ticks % 500) / 500 * math.pi * 4) * 3
            center = (int(p.x + p.width / 2), int(p.y + p.height / 2))
            for i in range(len(POWERUP_COLORS)):
                col = POWERUP_COLORS[(i + ticks // 100) % len(POWERUP_COLORS)]
                radius = int(max(p.width, p.height) / 1.8 + pulse + i * 3)
                pygame.draw.circle(self.screen, col, center, radius, width=2)
        pygame.draw.rect(self.screen, PLAYER_COLOR, (int(p.x), int(p.y), p.width, p.height))

        for c in snap.coins:
            rect = pygame.Rect(int(c.x), int(c.y), c.size, c.size)
            if c.high_value:
                pygame.draw.circle(self.screen, HIGH_COIN_COLOR, rect.center, c.size // 2 + 5)
                self.text(self.small_font, f"{HIGH_COIN_BONUS}x", (rect.centerx, rect.top - 2), anchor="midbottom")
            pygame.draw.circle(self.screen, COIN_COLOR, rect.center, c.size // 2)

        for d in snap.particles:
            size = max(1, int(d.size))
            alpha = max(0, min(255, int(255 * d.life)))
            dot = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*d.color, alpha), (size, size), size)
            self.screen.blit(dot, (int(d.x) - size, int(d.y) - size))

    def text(self, font, msg, pos, color=WHITE, anchor="topleft"):
        if font is None:
            return
        # shadowed text
        for offset, col in (((2, 2), BLACK), ((0, 0), color)):
            surf = font.render(msg, True, col)
            rect = surf.get_rect(**{anchor: (int(pos[0]) + offset[0], int(pos[1]) + offset[1])})
            self.screen.blit(surf, rect)

    def draw_hud(self, snap):
        self.text(self.font, f"Coins: {snap.coins_collected}", (20, 16))
        self.text(self.font, f"Score: {snap.total_score}", (20, 48))
        if snap.power_up_active:
            secs = math.ceil(snap.power_up_remaining / 1000)
            p = snap.player
            self.text(self.font, f"{secs}s", (p.x + p.width / 2, p.y - 12), anchor="midbottom")
        elif snap.power_up_progress > 0:
            self.text(self.small_font, f"Power-Up: {snap.power_up_progress}/{POWERUP_COINS_REQUIRED}",
                      (WIDTH - 20, 16), anchor="topright")

    def draw_start_screen(self, ticks):
        bounce = round(math.sin(ticks / 800) * 8)
        cx, cy = WIDTH // 2, HEIGHT // 2 + bounce
        self.text(self.large_font, "Retro Runner", (cx, cy - 40), anchor="midbottom")
        lines = [
            "Press Space or Up Arrow to Jump, twice for Double Jump!",
            f"Collect coins for extra score, some are worth {HIGH_COIN_BONUS}x!",
            f"Collect {POWERUP_COINS_REQUIRED} coins for a Power-Up!",
        ]
        for i, line in enumerate(lines):
            self.text(self.small_font, line, (cx, cy + i * 36), anchor="midtop")
        self.text(self.font, "Press Space or Up Arrow to Start", (cx, cy + 120), anchor="midtop")

    def draw_game_over(self, snap):
        shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 76))
        self.screen.blit(shade, (0, 0))
        cx, cy = WIDTH // 2, HEIGHT // 2
        result = snap.result
        self.text(self.large_font, "Game Over", (cx, cy - 30), anchor="midbottom")
        if result is not None:
            self.text(self.font, f"Coins Collected: {result.score}", (cx, cy - 10), anchor="midtop")
            self.text(self.font, f"Final Score: {result.total_score}", (cx, cy + 24), anchor="midtop")
        button = pygame.Rect(PLAY_AGAIN_BUTTON)
        pygame.draw.rect(self.screen, GROUND, button, border_radius=16)
        pygame.draw.rect(self.screen, WHITE, button, width=2, border_radius=16)
        self.text(self.font, "Play Again?", button.center, anchor="center")
