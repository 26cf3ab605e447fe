from retrorunner.player import Player
from retrorunner.settings import (
    GROUND_Y, TERMINAL_VELOCITY, JUMP_VELOCITY, DOUBLE_JUMP_VELOCITY, GRAVITY,
)


def test_starts_on_ground():
    p = Player()
    assert p.on_ground
    assert p.vy == 0
    assert p.jumps_remaining == 2
    assert p.y + p.height == GROUND_Y


def test_velocity_never_exceeds_terminal():
    p = Player(y=-2000)
    p.on_ground = False
    for _ in range(300):
        p.update()
        assert p.vy <= TERMINAL_VELOCITY


def test_landing_is_idempotent():
    p = Player()
    y = p.y
    for _ in range(10):
        p.update()
        assert p.vy == 0
        assert p.y == y
        assert p.on_ground


def test_jump_then_double_jump():
    p = Player()
    assert p.jump() == "jump"
    assert p.vy == JUMP_VELOCITY
    assert not p.on_ground
    assert p.jumps_remaining == 1

    assert p.jump() == "double"
    assert p.vy == DOUBLE_JUMP_VELOCITY
    assert p.jumps_remaining == 0


def test_third_jump_has_no_effect():
    p = Player()
    p.jump()
    p.jump()
    p.update()
    vy = p.vy
    assert p.jump() is None
    assert p.vy == vy
    assert p.jumps_remaining == 0


def test_jump_moves_player_up():
    p = Player()
    p.jump()
    p.update()
    assert p.vy == JUMP_VELOCITY + GRAVITY
    assert p.y < GROUND_Y - p.height


def test_landing_restores_jumps():
    p = Player()
    p.jump()
    p.jump()
    for _ in range(200):
        p.update()
    assert p.on_ground
    assert p.vy == 0
    assert p.jumps_remaining == 2
    assert p.jump() == "jump"
