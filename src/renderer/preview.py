# renderer/preview.py
import pygame

from renderer.canvas import Canvas
from renderer.tone_mapping import clamp_to_rgb8


def show(canvas: Canvas, scale: int = 1, tone_map=clamp_to_rgb8, caption: str = "Ray Tracer"):
    """
    Open a window showing the canvas until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        size = (canvas.width * scale, canvas.height * scale)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(caption)

        # surfarray expects (width, height, 3)
        frame_surface = pygame.surfarray.make_surface(canvas.to_rgb8(tone_map).transpose(1, 0, 2))
        if scale != 1:
            frame_surface = pygame.transform.scale(frame_surface, size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(frame_surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
