from retrorunner.coin import Coin
from retrorunner.enemy import Enemy
from retrorunner.powerup import PowerUpController
from retrorunner.settings import (
    WIDTH, POWERUP_COINS_REQUIRED, POWERUP_DURATION, POWERUP_RECOVERY_DURATION,
    POWERUP_SPEED_BOOST, POWERUP_SHOWCASE_COINS, POWERUP_SHOWCASE_ENEMIES,
    INITIAL_SCROLL_SPEED,
)
from retrorunner.state import PowerUpPhase


def collect_regular(controller, state, count, now=0):
    for _ in range(count):
        controller.collect(state, Coin(0, 0), now)


def test_activates_exactly_at_threshold(state, rng):
    pu = PowerUpController(rng)
    collect_regular(pu, state, POWERUP_COINS_REQUIRED - 1)
    assert state.power_up.phase is PowerUpPhase.NORMAL
    assert state.power_up.progress == POWERUP_COINS_REQUIRED - 1

    pu.collect(state, Coin(0, 0), 500)
    assert state.power_up.phase is PowerUpPhase.ACTIVE
    assert state.power_up.started_at == 500
    assert state.power_up.progress == 0
    assert state.power_up.saved_speed == INITIAL_SCROLL_SPEED
    assert state.scroll_speed == INITIAL_SCROLL_SPEED + POWERUP_SPEED_BOOST


def test_high_value_coins_do_not_count(state, rng):
    pu = PowerUpController(rng)
    pu.collect(state, Coin(0, 0, high_value=True), 0)
    assert state.power_up.progress == 0


def test_no_progress_while_active(state, rng):
    pu = PowerUpController(rng)
    pu.activate(state, 0)
    collect_regular(pu, state, 5)
    assert state.power_up.progress == 0


def test_progress_counts_while_recovering(state, rng):
    pu = PowerUpController(rng)
    state.power_up.phase = PowerUpPhase.RECOVERING
    collect_regular(pu, state, 3)
    assert state.power_up.progress == 3


def test_showcase_spawn(state, rng):
    coins_before = len(state.coins)
    enemies_before = len(state.enemies)
    PowerUpController(rng).activate(state, 0)

    showcase = state.coins[coins_before:]
    assert len(showcase) == POWERUP_SHOWCASE_COINS
    assert [c.high_value for c in showcase] == [False, True, False, True, False]
    xs = [c.x for c in showcase]
    assert all(b - a == 150 for a, b in zip(xs, xs[1:]))

    enemies = state.enemies[enemies_before:]
    assert len(enemies) == POWERUP_SHOWCASE_ENEMIES
    assert enemies[0].x == xs[0] + 750
    assert all(150 <= b.x - a.x <= 300 for a, b in zip(enemies, enemies[1:]))


def test_showcase_starts_past_nearby_enemy(state, rng):
    state.enemies = [Enemy(WIDTH + 150)]
    state.coins = []
    PowerUpController(rng).activate(state, 0)
    assert state.coins[0].x == WIDTH + 150 + state.enemies[0].width + 100


def test_expires_exactly_at_duration(state, rng):
    pu = PowerUpController(rng)
    pu.activate(state, 1000)

    pu.update(state, 1000 + POWERUP_DURATION - 1)
    assert state.power_up.phase is PowerUpPhase.ACTIVE
    assert pu.remaining(state, 1000 + POWERUP_DURATION - 1) == 1

    pu.update(state, 1000 + POWERUP_DURATION)
    assert state.power_up.phase is PowerUpPhase.RECOVERING
    assert state.scroll_speed == INITIAL_SCROLL_SPEED
    assert state.power_up.recovery_ends_at == 1000 + POWERUP_DURATION + POWERUP_RECOVERY_DURATION
    assert pu.remaining(state, 1000 + POWERUP_DURATION) == 0


def test_expiry_clears_the_path(state, rng):
    pu = PowerUpController(rng)
    pu.activate(state, 0)
    state.enemies = [Enemy(-20), Enemy(120), Enemy(WIDTH + 250), Enemy(WIDTH + 2000)]
    pu.update(state, POWERUP_DURATION)

    for enemy in state.enemies[:3]:
        assert WIDTH + 400 <= enemy.x <= WIDTH + 600
    assert state.enemies[3].x == WIDTH + 2000


def test_recovery_ends(state, rng):
    pu = PowerUpController(rng)
    pu.activate(state, 0)
    pu.update(state, POWERUP_DURATION)
    pu.update(state, POWERUP_DURATION + POWERUP_RECOVERY_DURATION - 1)
    assert state.power_up.phase is PowerUpPhase.RECOVERING
    pu.update(state, POWERUP_DURATION + POWERUP_RECOVERY_DURATION)
    assert state.power_up.phase is PowerUpPhase.NORMAL


def test_expire_callback(state, rng):
    calls = []
    pu = PowerUpController(rng, on_expire=lambda: calls.append(True))
    pu.activate(state, 0)
    pu.update(state, POWERUP_DURATION)
    assert calls == [True]
