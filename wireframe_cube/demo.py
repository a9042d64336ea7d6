#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import time

from .config import RenderConfig
from .renderer import Renderer
from .rotation import Rotation

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Driver loop for the spinning cube: poll for quit, advance the angles,
    render, sleep a fixed 1/fps. Quit is only checked at the top of a
    frame; a frame in progress always finishes.
    """

    def __init__(self, config: RenderConfig, window, renderer: Renderer = None,
                 sleep=time.sleep, max_frames: int = None):
        self.config = config
        self.window = window
        self.renderer = renderer if renderer is not None else Renderer(config)
        self.rotation = Rotation.from_config(config)
        self.sleep = sleep
        self.max_frames = max_frames
        self.running = True

        # ── Frame counter ───────────────────────────────────────────────
        self.frames_rendered = 0
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def handle_input(self):
        if self.window.quit_requested():
            logger.info("Quit requested")
            self.running = False

    def step(self):
        """Advance the rotation by one frame and draw it."""
        self.rotation.advance()
        self.renderer.render(self.window.canvas, *self.rotation.angles)
        self.frames_rendered += 1

    def _track_fps(self):
        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now
            logger.debug("FPS:%d | ax=%.2f ay=%.2f",
                         self.fps, self.rotation.angle_x, self.rotation.angle_y)

    def frame_cap_reached(self) -> bool:
        return self.max_frames is not None and self.frames_rendered >= self.max_frames

    def run(self) -> int:
        """Loop until quit (or max_frames). Returns the number of frames drawn."""
        delay = self.config.frame_delay
        while self.running and not self.frame_cap_reached():
            self.handle_input()
            if not self.running:
                break

            self.step()
            self._track_fps()

            # No sleep after the last capped frame
            if self.frame_cap_reached():
                break

            self.sleep(delay)

        if self.frame_cap_reached():
            logger.info("Stopping after %d frames", self.frames_rendered)
        return self.frames_rendered
