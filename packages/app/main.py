import logging
import os

import pygame
from lib_screens import DEFAULT_DISPLAY, create_manager

"""App entrypoint: runs the quiz scenes in a pygame window."""


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    display = DEFAULT_DISPLAY

    manager = create_manager(display=display)
    manager.initialize()

    os.environ["SDL_VIDEO_WINDOW_POS"] = "%d,%d" % display.window_position

    pygame.init()
    pygame.display.set_caption(display.caption)
    screen = pygame.display.set_mode(display.window_size)
    clock = pygame.time.Clock()
    running = True
    while running and manager.running:
        dt = clock.tick(display.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            manager.handle_event(event)

        manager.update(dt)
        manager.render(screen)
        pygame.display.flip()

    pygame.quit()

    manager.shutdown()


if __name__ == "__main__":
    main()
