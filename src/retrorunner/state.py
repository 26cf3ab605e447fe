"""
Run-global simulation state.

Everything a single run mutates lives in one RunState, created at run start
and thrown away at the next one. Components receive it explicitly.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from .coin import Coin
from .enemy import Enemy
from .player import Player
from .settings import WIDTH, GROUND_Y, COIN_SIZE, INITIAL_SCROLL_SPEED


class PowerUpPhase(Enum):
    NORMAL = auto()
    ACTIVE = auto()
    RECOVERING = auto()


@dataclass
class PowerUpState:
    phase: PowerUpPhase = PowerUpPhase.NORMAL
    progress: int = 0
    started_at: float = 0
    saved_speed: float = INITIAL_SCROLL_SPEED
    recovery_ends_at: float = 0

    @property
    def active(self):
        return self.phase is PowerUpPhase.ACTIVE

    @property
    def recovering(self):
        return self.phase is PowerUpPhase.RECOVERING


@dataclass
class RunState:
    started_at: float
    player: Player = field(default_factory=Player)
    coins: list = field(default_factory=list)
    enemies: list = field(default_factory=list)
    scroll_speed: float = INITIAL_SCROLL_SPEED
    coins_collected: int = 0
    coin_points: int = 0
    total_score: int = 0
    bg_offset: float = 0
    last_coin_spawn: float = 0
    last_enemy_spawn: float = 0
    last_speed_increase: float = 0
    power_up: PowerUpState = field(default_factory=PowerUpState)

    @classmethod
    def new(cls, now, rng):
        """Fresh run anchored at `now`, seeded with one coin and one enemy."""
        state = cls(started_at=now,
                    last_coin_spawn=now,
                    last_enemy_spawn=now,
                    last_speed_increase=now)
        state.coins.append(Coin(WIDTH + 100, GROUND_Y - COIN_SIZE - 60 - rng.random() * 80))
        # first enemy well behind the first coin
        state.enemies.append(Enemy(WIDTH + 500))
        return state
