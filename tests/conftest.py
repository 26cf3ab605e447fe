import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from retrorunner.game import Game, Intent  # noqa: E402
from retrorunner.state import RunState  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return RunState.new(0, rng)


@pytest.fixture
def game():
    return Game(seed=42)


@pytest.fixture
def running_game(game):
    game.push_intent(Intent.START)
    game.update(0)
    return game
