"""Coin-fuelled power-up: invincibility plus a speed boost for a fixed time.

Phases cycle NORMAL -> ACTIVE -> RECOVERING -> NORMAL. While ACTIVE the
player ignores enemies. When it runs out, every enemy on or near the screen
is pushed far to the right and enemy spawning pauses for the recovery window.
"""

import logging

from .coin import Coin
from .enemy import Enemy
from .settings import (
    WIDTH, ENEMY_WIDTH, COIN_SIZE, HIGH_COIN_SIZE, POWERUP_COINS_REQUIRED,
    POWERUP_DURATION, POWERUP_SPEED_BOOST, POWERUP_RECOVERY_DURATION,
    POWERUP_SHOWCASE_COINS, POWERUP_SHOWCASE_ENEMIES,
)
from .spawner import tier_y
from .state import PowerUpPhase

logger = logging.getLogger(__name__)


class PowerUpController:
    def __init__(self, rng, on_expire=None):
        self.rng = rng
        # called with no arguments when the active phase ends
        self.on_expire = on_expire

    def collect(self, state, coin, now):
        """Count a picked-up coin toward the next power-up."""
        pu = state.power_up
        if pu.active or coin.high_value:
            return
        pu.progress += 1
        if pu.progress >= POWERUP_COINS_REQUIRED:
            self.activate(state, now)

    def activate(self, state, now):
        pu = state.power_up
        pu.phase = PowerUpPhase.ACTIVE
        pu.started_at = now
        pu.saved_speed = state.scroll_speed
        pu.progress = 0
        state.scroll_speed += POWERUP_SPEED_BOOST
        self.spawn_showcase(state)
        logger.info("Power-up activated (speed %.2f -> %.2f)", pu.saved_speed, state.scroll_speed)

    def spawn_showcase(self, state):
        """Alternating low/high coins followed by a short run of enemies."""
        rng = self.rng
        start_x = WIDTH + 100
        for enemy in state.enemies:
            if WIDTH < enemy.x < start_x + 200:
                start_x = enemy.x + enemy.width + 100

        for i in range(POWERUP_SHOWCASE_COINS):
            x = start_x + i * 150
            if i % 2 == 0:
                state.coins.append(Coin(x, tier_y("low", rng), size=COIN_SIZE))
            else:
                state.coins.append(Coin(x, tier_y("high", rng), size=HIGH_COIN_SIZE, high_value=True))

        enemy_x = start_x + 750
        for i in range(POWERUP_SHOWCASE_ENEMIES):
            if i > 0:
                enemy_x += 150 + rng.random() * 150
            state.enemies.append(Enemy(enemy_x))

    def update(self, state, now):
        pu = state.power_up
        if pu.phase is PowerUpPhase.ACTIVE:
            if now - pu.started_at >= POWERUP_DURATION:
                self.expire(state, now)
        elif pu.phase is PowerUpPhase.RECOVERING:
            if now >= pu.recovery_ends_at:
                pu.phase = PowerUpPhase.NORMAL
                logger.info("Recovery window over")

    def expire(self, state, now):
        pu = state.power_up
        state.scroll_speed = pu.saved_speed
        pu.phase = PowerUpPhase.RECOVERING
        pu.recovery_ends_at = now + POWERUP_RECOVERY_DURATION

        # clear the path: nothing on or just off screen may hit the player
        moved = 0
        for enemy in state.enemies:
            if -ENEMY_WIDTH < enemy.x < WIDTH + 300:
                enemy.x = WIDTH + 400 + self.rng.random() * 200
                moved += 1
        logger.info("Power-up expired, %d enemies moved off screen", moved)
        if self.on_expire is not None:
            self.on_expire()

    def remaining(self, state, now):
        """Milliseconds of invincibility left, 0 when not active."""
        pu = state.power_up
        if not pu.active:
            return 0
        return max(0, POWERUP_DURATION - (now - pu.started_at))
