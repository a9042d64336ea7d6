#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/window.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Pygame window, event source and drawing surface.
"""

import logging
import os

import pygame

from .canvas import Canvas
from .config import RenderConfig
from .errors import DrawError, WindowInitError

logger = logging.getLogger(__name__)


class PygameCanvas(Canvas):
    """Canvas backed by a pygame Surface (the display or an off-screen one)."""

    def __init__(self, surface, flip=None):
        """
        Args:
            surface: pygame.Surface to draw on
            flip: Callable that shows the finished frame; None for
                  off-screen surfaces
        """
        self.surface = surface
        self._flip = flip

    def clear(self, color):
        try:
            self.surface.fill(color)
        except pygame.error as e:
            raise DrawError(f"clear failed: {e}") from e

    def _draw_line(self, x0, y0, x1, y1, thickness, color):
        try:
            pygame.draw.line(self.surface, color, (x0, y0), (x1, y1), thickness)
        except pygame.error as e:
            raise DrawError(f"line ({x0}, {y0}) -> ({x1}, {y1}) failed: {e}") from e

    def present(self):
        if self._flip is None:
            return
        try:
            self._flip()
        except pygame.error as e:
            raise DrawError(f"present failed: {e}") from e


class PygameWindow:
    """
    A centered, fixed-size window with a quit-only event source.

    Any pygame failure while setting up is re-raised as WindowInitError.
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()
        size = (self.config.screen_width, self.config.screen_height)

        # Must be set before the display is created
        os.environ.setdefault('SDL_VIDEO_CENTERED', '1')

        try:
            pygame.display.init()
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(self.config.title)
        except pygame.error as e:
            pygame.display.quit()
            raise WindowInitError(f"could not open {size[0]}x{size[1]} window: {e}") from e

        self.canvas = PygameCanvas(screen, flip=pygame.display.flip)
        logger.info("Window opened: %dx%d '%s'", size[0], size[1], self.config.title)

    def quit_requested(self) -> bool:
        """Drain pending events without blocking; True if any was a quit."""
        quit_seen = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_seen = True
        return quit_seen

    def close(self):
        pygame.display.quit()
        pygame.quit()
        logger.info("Window closed")
