import logging

from .settings import (
    INITIAL_SCROLL_SPEED, MAX_SCROLL_SPEED, SPEED_INCREASE_INTERVAL,
    SPEED_INCREASE_AMOUNT, SPEED_MILESTONES, DIFFICULTY_EXPONENT,
)

logger = logging.getLogger(__name__)


def speed_multiplier(total_score):
    """Ratchet multiplier for the current score milestone."""
    for threshold, multiplier in SPEED_MILESTONES:
        if total_score > threshold:
            return multiplier
    return 1.0


def speed_ratio(state):
    return state.scroll_speed / INITIAL_SCROLL_SPEED


def difficulty_factor(state):
    return speed_ratio(state) ** DIFFICULTY_EXPONENT


def update_speed(state, now):
    """Raise scroll speed once per interval, capped at MAX_SCROLL_SPEED."""
    if now - state.last_speed_increase < SPEED_INCREASE_INTERVAL:
        return
    increase = SPEED_INCREASE_AMOUNT * speed_multiplier(state.total_score)
    if state.scroll_speed < MAX_SCROLL_SPEED:
        state.scroll_speed = min(state.scroll_speed + increase, MAX_SCROLL_SPEED)
        logger.debug("scroll speed now %.2f", state.scroll_speed)
    state.last_speed_increase = now
