import pygame
import pytest

from retrorunner.game import Intent
from retrorunner.enemy import Enemy
from retrorunner.renderer import Renderer
from retrorunner.settings import WIDTH, HEIGHT, BG, GROUND, PLAY_AGAIN_BUTTON, STATE_GAMEOVER


@pytest.fixture
def renderer():
    pygame.font.init()
    yield Renderer(pygame.Surface((WIDTH, HEIGHT)))
    pygame.font.quit()


def test_start_screen_background(renderer, game):
    renderer.draw(game.snapshot(), 0)
    assert tuple(renderer.screen.get_at((WIDTH - 1, 0)))[:3] == BG


def test_draws_powered_up_run(renderer, running_game):
    g = running_game
    g.powerups.activate(g.state, 0)
    g.push_intent(Intent.JUMP)
    g.push_intent(Intent.JUMP)
    for now in range(16, 400, 16):
        g.update(now)
    snap = g.snapshot()
    assert snap.power_up_active
    assert snap.particles
    renderer.draw(snap, 400)


def test_draws_game_over(renderer, running_game):
    g = running_game
    g.state.enemies.append(Enemy(g.state.player.x + 4))
    g.update(16)
    assert g.game_state == STATE_GAMEOVER
    renderer.draw(g.snapshot(), 16)


def test_draw_never_mutates_game(renderer, running_game):
    before = running_game.snapshot()
    renderer.draw(before, 16)
    assert running_game.snapshot() == before


def test_draws_without_fonts(running_game):
    pygame.font.quit()
    r = Renderer(pygame.Surface((WIDTH, HEIGHT)))
    assert r.font is None and r.small_font is None and r.large_font is None

    g = running_game
    g.state.enemies.append(Enemy(g.state.player.x + 4))
    g.update(16)
    r.draw(g.snapshot(), 16)
    x, y, w, h = PLAY_AGAIN_BUTTON
    # no label drawn over the button
    assert tuple(r.screen.get_at((x + w // 2, y + h // 2)))[:3] == GROUND
