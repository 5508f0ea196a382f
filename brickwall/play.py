"""Play Brick Wall Breaker in a window.

Arrow keys move the paddle, P pauses, ENTER restarts after a game over and
ESC quits.
"""

import logging
import sys

import pygame

from .arena import Arena, InputSnapshot
from .config import ArenaConfig
from .render import Renderer, load_image

logger = logging.getLogger(__name__)

FPS = 60


def main(config=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    config = config if config is not None else ArenaConfig()

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Brick Wall Breaker")
    clock = pygame.time.Clock()

    size = (config.obstacle.width, config.obstacle.height)
    arena = Arena(config, obstacle_image=load_image(config.obstacle_image_path, size))
    renderer = Renderer(config, surface=screen)

    running = True
    while running:
        pause = restart = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    pause = True
                elif event.key == pygame.K_RETURN:
                    restart = True

        keys = pygame.key.get_pressed()
        inputs = InputSnapshot(
            left=keys[pygame.K_LEFT],
            right=keys[pygame.K_RIGHT],
            pause=pause,
            restart=restart,
        )

        renderer.draw(arena.tick(inputs))
        pygame.display.flip()
        clock.tick(FPS)

    logger.info("Quit with score %d", arena.score)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
