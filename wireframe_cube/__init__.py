#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, rotate_xy, rotate_vertices
from .config import RenderConfig
from .errors import CubeError, WindowInitError, DrawError
from .canvas import Canvas, RecordingCanvas
from .mesh import CubeMesh, select_edges
from .rotation import Rotation
from .renderer import Renderer, draw_cube
from .demo import DemoApp
from .logging_config import setup_logging
