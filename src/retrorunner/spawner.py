"""
Coin and enemy spawn planning.

Each tick the planner may add one coin and one enemy. Both streams spawn
when the screen holds too few of their kind or when their (difficulty
scaled) delay has elapsed, and never while the previous spawn of the same
kind is still close to the right edge. Candidate positions are nudged right
until they clear every entity of the other kind; after a bounded number of
tries the last candidate is accepted as is.
"""

import logging

from .coin import Coin
from .collision import horizontally_too_close
from .difficulty import speed_ratio, difficulty_factor
from .enemy import Enemy
from .settings import (
    WIDTH, GROUND_Y, COIN_SIZE, HIGH_COIN_SIZE, COIN_TIERS, ENEMY_WIDTH,
    MIN_COINS_ON_SCREEN, HIGH_COIN_CHANCE, LOW_TIER_CHANCE,
    COIN_HORIZONTAL_GAP_MIN, COIN_PLACEMENT_ATTEMPTS,
    MIN_ENEMIES_ON_SCREEN, ENEMY_MILESTONES, ENEMY_BASE_GAP_MIN,
    ENEMY_BASE_GAP_MAX, ENEMY_GAP_REDUCTION_FACTOR, ENEMY_MIN_GAP_LIMIT,
    ENEMY_SPAWN_VARIANCE, ENEMY_PLACEMENT_ATTEMPTS, SPAWN_SEPARATION_MARGIN,
)

logger = logging.getLogger(__name__)


def tier_y(tier, rng):
    low, high = COIN_TIERS[tier]
    return GROUND_Y - low - rng.random() * (high - low)


def visible(entities):
    return [e for e in entities if 0 < e.x < WIDTH]


def min_enemies_on_screen(total_score):
    for threshold, count in ENEMY_MILESTONES:
        if total_score > threshold:
            return count
    return MIN_ENEMIES_ON_SCREEN


def enemy_gap_bounds(factor):
    """(min, max) spacing between consecutive enemies for a difficulty factor."""
    scale = max(factor, 1)
    min_gap = max(ENEMY_BASE_GAP_MIN / scale * ENEMY_GAP_REDUCTION_FACTOR, ENEMY_MIN_GAP_LIMIT)
    max_gap = max(ENEMY_BASE_GAP_MAX / scale * ENEMY_GAP_REDUCTION_FACTOR, min_gap + 100)
    return min_gap, max_gap


def clear_of(x, width, others, shift, rng, attempts):
    """Push x right until it clears every entity in `others`.

    Each conflict moves the candidate past the offending entity by `shift`
    plus up to 50 units of slack. Gives up after `attempts` passes.
    """
    for _ in range(attempts):
        for other in others:
            if horizontally_too_close(x, width, other.x, other.width, SPAWN_SEPARATION_MARGIN):
                x = other.x + other.width + shift + rng.random() * 50
                break
        else:
            return x
    return x


class SpawnPlanner:
    def __init__(self, rng):
        self.rng = rng

    def update(self, state, now):
        self.maybe_spawn_coin(state, now)
        # no new enemies during the post power-up grace period
        if state.power_up.recovering:
            return
        self.maybe_spawn_enemy(state, now)

    # -----------------------------
    # Coins
    # -----------------------------
    def maybe_spawn_coin(self, state, now):
        rng = self.rng
        on_screen = visible(state.coins)
        need = len(on_screen) < MIN_COINS_ON_SCREEN

        if state.coins and state.coins[-1].x > WIDTH - COIN_HORIZONTAL_GAP_MIN:
            return None

        delay = max(700 - speed_ratio(state) * 100, 300) + rng.random() * 600
        due = now - state.last_coin_spawn > delay
        if not (need or due):
            return None

        high_value = rng.random() < HIGH_COIN_CHANCE
        if high_value:
            y, size = tier_y("high", rng), HIGH_COIN_SIZE
        elif not on_screen or rng.random() < LOW_TIER_CHANCE:
            y, size = tier_y("low", rng), COIN_SIZE
        else:
            y, size = tier_y("mid", rng), COIN_SIZE

        spacing = 50 if need else COIN_HORIZONTAL_GAP_MIN
        slack = rng.random() * 150
        x = WIDTH + slack
        if state.coins:
            x = max(x, state.coins[-1].x + spacing + slack)
        x = clear_of(x, size, state.enemies, SPAWN_SEPARATION_MARGIN, rng, COIN_PLACEMENT_ATTEMPTS)

        coin = Coin(x, y, size=size, high_value=high_value)
        state.coins.append(coin)
        state.last_coin_spawn = now
        logger.debug("spawned %r", coin)
        return coin

    # -----------------------------
    # Enemies
    # -----------------------------
    def maybe_spawn_enemy(self, state, now):
        rng = self.rng
        factor = difficulty_factor(state)

        base_delay = max(1400 - factor * 350, 400)
        jitter = 1 + (rng.random() * ENEMY_SPAWN_VARIANCE * 2 - ENEMY_SPAWN_VARIANCE)
        due = now - state.last_enemy_spawn > base_delay * jitter

        min_gap, max_gap = enemy_gap_bounds(factor)
        if state.enemies and state.enemies[-1].x > WIDTH - min_gap:
            return None

        need = len(visible(state.enemies)) < min_enemies_on_screen(state.total_score)
        if not (need or due):
            return None

        gap = min_gap + rng.random() * (max_gap - min_gap)
        x = WIDTH + gap * 0.3
        if state.enemies:
            x = max(x, state.enemies[-1].x + gap)
        x = clear_of(x, ENEMY_WIDTH, state.coins, 100, rng, ENEMY_PLACEMENT_ATTEMPTS)

        enemy = Enemy(x)
        state.enemies.append(enemy)
        state.last_enemy_spawn = now
        logger.debug("spawned %r", enemy)
        return enemy
