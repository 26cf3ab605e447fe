import logging
import os
import sys

import pygame

from .game import Game
from .renderer import Renderer
from .settings import WIDTH, HEIGHT, TITLE, FPS


def main():
    logging.basicConfig(
        level=os.environ.get("RETRORUNNER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    game = Game()
    renderer = Renderer(screen)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            game.handle_event(event)

        now = pygame.time.get_ticks()
        game.update(now)

        renderer.draw(game.snapshot(), now)
        pygame.display.flip()
        clock.tick(FPS)


if __name__ == "__main__":
    main()
