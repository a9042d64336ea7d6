#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]

CYAN: Color = (0, 255, 255)
BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the window, the frame pacing and the wireframe style."""
    screen_width: int = 640
    screen_height: int = 480
    title: str = "3D Cube"
    target_fps: int = 60
    angle_step_x: float = 0.01   # radians per frame
    angle_step_y: float = 0.03
    line_color: Color = CYAN
    background_color: Color = BLACK
    line_thickness: int = 1

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"screen size must be positive, got "
                f"{self.screen_width}x{self.screen_height}")
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")

    @property
    def center(self) -> Tuple[int, int]:
        """Pixel offset that moves the origin to the middle of the window."""
        return self.screen_width // 2, self.screen_height // 2

    @property
    def frame_delay(self) -> float:
        """Seconds to sleep after each frame."""
        return 1.0 / self.target_fps
