import logging
import random
from collections import deque, namedtuple
from dataclasses import dataclass
from enum import Enum

import pygame

from .collision import overlaps, shrink
from .difficulty import update_speed
from .particle import ParticleSystem
from .powerup import PowerUpController
from .settings import (
    WIDTH, INITIAL_SCROLL_SPEED, COLLISION_MARGIN, SCORE_INCREASE_PER_SECOND,
    SCORE_INCREASE_PER_COIN, HIGH_COIN_BONUS, RESTART_DELAY, INTENT_QUEUE_SIZE,
    PLAY_AGAIN_BUTTON, STATE_START, STATE_PLAYING, STATE_GAMEOVER,
)
from .spawner import SpawnPlanner
from .state import RunState, PowerUpPhase

logger = logging.getLogger(__name__)


class RetroRunnerError(Exception):
    pass


class Intent(Enum):
    JUMP = "jump"
    START = "start"
    PLAY_AGAIN = "play_again"    # game-over button, skips the restart delay


@dataclass(frozen=True)
class RunEnded:
    score: int           # coins collected
    total_score: int


PlayerView = namedtuple("PlayerView", ["x", "y", "width", "height", "vy", "on_ground", "jumps_remaining"])
CoinView = namedtuple("CoinView", ["x", "y", "size", "high_value"])
EnemyView = namedtuple("EnemyView", ["x", "y", "width", "height"])
ParticleView = namedtuple("ParticleView", ["x", "y", "size", "life", "color"])


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only copy of everything a renderer needs for one frame."""
    game_state: int
    player: PlayerView
    coins: tuple
    enemies: tuple
    particles: tuple
    bg_offset: float
    coins_collected: int
    total_score: int
    power_up_phase: PowerUpPhase
    power_up_progress: int
    power_up_remaining: float
    result: RunEnded = None

    @property
    def power_up_active(self):
        return self.power_up_phase is PowerUpPhase.ACTIVE


class Game:
    """Owns the run state and advances it one tick per frame.

    Input arrives as intents (see push_intent / handle_event) and is applied
    at the start of the next update(now). Renderers read snapshot() only.
    """

    def __init__(self, rng=None, seed=None, intent_queue_size=INTENT_QUEUE_SIZE):
        if intent_queue_size < 1:
            raise RetroRunnerError(f"intent queue size must be positive, got {intent_queue_size}")
        self.rng = rng if rng is not None else random.Random(seed)
        self.intents = deque(maxlen=intent_queue_size)

        self.spawner = SpawnPlanner(self.rng)
        self.particles = ParticleSystem(self.rng)
        self.powerups = PowerUpController(self.rng, on_expire=self.particles.clear)

        self.game_state = STATE_START
        self.state = RunState.new(0, self.rng)
        self.now = 0
        self.game_over_at = 0
        self.last_result = None
        self._run_ended_listeners = []

    # -----------------------------
    # Input
    # -----------------------------
    def push_intent(self, intent):
        self.intents.append(intent)

    def handle_event(self, event):
        """Translate a pygame event into an intent."""
        if event.type == pygame.KEYDOWN:
            if self.game_state == STATE_PLAYING and event.key in (pygame.K_SPACE, pygame.K_UP):
                self.push_intent(Intent.JUMP)
            elif self.game_state == STATE_START and event.key in (pygame.K_SPACE, pygame.K_UP):
                self.push_intent(Intent.START)
            elif self.game_state == STATE_GAMEOVER and event.key == pygame.K_SPACE:
                self.push_intent(Intent.START)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.game_state == STATE_GAMEOVER and pygame.Rect(PLAY_AGAIN_BUTTON).collidepoint(event.pos):
                self.push_intent(Intent.PLAY_AGAIN)

    def _drain_intents(self, now):
        while self.intents:
            intent = self.intents.popleft()
            if intent is Intent.START:
                self._start(now)
            elif intent is Intent.PLAY_AGAIN:
                self._start(now, debounce=False)
            elif intent is Intent.JUMP:
                self._jump()

    def _start(self, now, debounce=True):
        if self.game_state == STATE_PLAYING:
            logger.debug("start ignored, already running")
            return
        if debounce and self.game_state == STATE_GAMEOVER and now - self.game_over_at <= RESTART_DELAY:
            logger.debug("start ignored, game just ended")
            return
        self.reset(now)
        self.game_state = STATE_PLAYING
        logger.info("Run started")

    def _jump(self):
        if self.game_state != STATE_PLAYING:
            logger.debug("jump ignored, not running")
            return
        player = self.state.player
        if player.jump() == "double":
            self.particles.double_jump(player)

    # -----------------------------
    # Run lifecycle
    # -----------------------------
    def reset(self, now):
        self.state = RunState.new(now, self.rng)
        self.particles.clear()
        self.now = now
        self.last_result = None

    def add_run_ended_listener(self, listener):
        self._run_ended_listeners.append(listener)

    def game_over(self, now):
        state = self.state
        self.game_state = STATE_GAMEOVER
        self.game_over_at = now
        self.last_result = RunEnded(state.coins_collected, state.total_score)

        state.scroll_speed = INITIAL_SCROLL_SPEED
        state.power_up.phase = PowerUpPhase.NORMAL
        state.power_up.started_at = 0
        self.particles.clear()

        logger.info("Game over: %d coins, score %d", self.last_result.score, self.last_result.total_score)
        for listener in list(self._run_ended_listeners):
            listener(self.last_result)

    # -----------------------------
    # Tick
    # -----------------------------
    def update(self, now):
        self._drain_intents(now)
        if self.game_state != STATE_PLAYING:
            return
        self.now = now
        state = self.state

        self.powerups.update(state, now)
        self._update_score(now)
        update_speed(state, now)
        self.spawner.update(state, now)

        state.bg_offset -= state.scroll_speed * 0.5
        if state.bg_offset <= -WIDTH:
            state.bg_offset += WIDTH

        state.player.update()
        if not self._update_entities(now):
            return
        self._update_particles()

    def _update_score(self, now):
        state = self.state
        # recomputed from the start anchor every tick, never accumulated
        time_score = int((now - state.started_at) * SCORE_INCREASE_PER_SECOND / 1000)
        state.total_score = time_score + state.coin_points

    def _update_entities(self, now):
        """Move, prune and resolve collisions. Returns False if the run ended."""
        state = self.state
        speed = state.scroll_speed
        for coin in state.coins:
            coin.update(speed)
        for enemy in state.enemies:
            enemy.update(speed)
        state.coins = [c for c in state.coins if not c.is_offscreen()]
        state.enemies = [e for e in state.enemies if not e.is_offscreen()]

        player = state.player
        for coin in state.coins[:]:
            if overlaps(player, coin):
                state.coins.remove(coin)
                self._collect(coin, now)

        if state.power_up.active:
            return True
        hitbox = shrink(player.box, COLLISION_MARGIN)
        for enemy in state.enemies:
            if overlaps(hitbox, shrink(enemy, COLLISION_MARGIN)):
                self.game_over(now)
                return False
        return True

    def _collect(self, coin, now):
        state = self.state
        points = SCORE_INCREASE_PER_COIN
        if coin.high_value:
            points *= HIGH_COIN_BONUS
            self.particles.high_coin(coin)
        state.coins_collected += 1
        state.coin_points += points
        state.total_score += points
        self.powerups.collect(state, coin, now)

    def _update_particles(self):
        if self.state.power_up.active and self.rng.random() < 0.4:
            self.particles.sparkle_around(self.state.player)
        self.particles.update()

    # -----------------------------
    # Output
    # -----------------------------
    def snapshot(self):
        state = self.state
        p = state.player
        return RenderSnapshot(
            game_state=self.game_state,
            player=PlayerView(p.x, p.y, p.width, p.height, p.vy, p.on_ground, p.jumps_remaining),
            coins=tuple(CoinView(c.x, c.y, c.size, c.high_value) for c in state.coins),
            enemies=tuple(EnemyView(e.x, e.y, e.width, e.height) for e in state.enemies),
            particles=tuple(ParticleView(d["x"], d["y"], d["size"], d["life"], d["color"])
                            for d in self.particles.particles),
            bg_offset=state.bg_offset,
            coins_collected=state.coins_collected,
            total_score=state.total_score,
            power_up_phase=state.power_up.phase,
            power_up_progress=state.power_up.progress,
            power_up_remaining=self.powerups.remaining(state, self.now),
            result=self.last_result,
        )
