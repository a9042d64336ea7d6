#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from abc import ABC, abstractmethod

from .errors import DrawError

# Pixel coordinates are signed 16-bit in the line primitive
COORD_MIN = -32768
COORD_MAX = 32767


class Canvas(ABC):
    """
    Drawing surface the renderer paints on.

    Backends implement clear(), present() and the _draw_line() hook.
    thick_line() checks its arguments first so every backend rejects
    the same bad input with the same DrawError.
    """

    @abstractmethod
    def clear(self, color):
        """Fill the whole surface with color."""

    def thick_line(self, x0: int, y0: int, x1: int, y1: int,
                   thickness: int, color):
        if thickness < 1:
            raise DrawError(f"line thickness must be >= 1, got {thickness}")
        for value in (x0, y0, x1, y1):
            if not COORD_MIN <= value <= COORD_MAX:
                raise DrawError(
                    f"line coordinate {value} outside "
                    f"[{COORD_MIN}, {COORD_MAX}]")
        self._draw_line(x0, y0, x1, y1, thickness, color)

    @abstractmethod
    def _draw_line(self, x0, y0, x1, y1, thickness, color):
        """Backend hook; arguments are already validated."""

    @abstractmethod
    def present(self):
        """Make the finished frame visible."""


class RecordingCanvas(Canvas):
    """Headless canvas that keeps what was drawn in the current frame."""

    def __init__(self):
        self.segments = []       # (x0, y0, x1, y1, thickness, color)
        self.clear_color = None
        self.frames = []         # segment lists of presented frames
        self.presented = 0

    def clear(self, color):
        self.clear_color = tuple(color)
        self.segments = []

    def _draw_line(self, x0, y0, x1, y1, thickness, color):
        self.segments.append((x0, y0, x1, y1, thickness, tuple(color)))

    def present(self):
        self.frames.append(list(self.segments))
        self.presented += 1
