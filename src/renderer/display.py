# renderer/display.py
import numpy as np
import pygame
from .tone_mapping import to_8bit


def show_image(linear_image: np.ndarray, title: str = "Path Tracer"):
    """
    Opens a window showing a finished render and blocks until it is closed
    or Escape is pressed.
    """
    pixels = to_8bit(linear_image)
    height, width, _ = pixels.shape

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
