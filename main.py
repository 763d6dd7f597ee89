import logging
import random
import sys

import pygame

from bubble_rush.input import KeyboardInput
from bubble_rush.loop import frame
from bubble_rush.render import SurfaceRenderer
from bubble_rush.scheduler import Scheduler
from bubble_rush.session import GameSession
from bubble_rush.settings import FPS, WORLD_HEIGHT, WORLD_WIDTH


logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WORLD_WIDTH, WORLD_HEIGHT))
    pygame.display.set_caption("Bubble Rush - Beat the Clock")
    clock = pygame.time.Clock()
    renderer = SurfaceRenderer(screen)
    keyboard = KeyboardInput()

    session = GameSession(scheduler=Scheduler(), rng=random.Random())
    session.start()
    logger.info("Game started")

    running = True
    # Goes False once the game-over screen is up; the window stays until closed
    updating = True

    while running:
        dt_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                keyboard.handle_event(event)

        # Timer callbacks run here, on the frame thread, before the frame itself
        session.scheduler.advance(dt_ms)

        inp = keyboard.sample()
        if updating:
            updating = frame(session, inp, renderer)
            pygame.display.flip()

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
