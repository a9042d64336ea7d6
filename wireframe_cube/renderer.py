#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import RenderConfig
from .mesh import CubeMesh
from .math_utils import rotate_vertices


class Renderer:
    """
    Stateless wireframe cube renderer.

    render(canvas, angle_x, angle_y) draws one complete frame and presents it.
    The output depends only on the two angles, the mesh and the config, so
    rendering the same angles twice draws the same segments.

    Pipeline:
      1. Clear to the background color
      2. Rotate every vertex around X, then around Y
      3. Walk the precomputed edge list
      4. Drop Z, truncate to pixels, shift to the window center, draw
      5. Present
    """

    def __init__(self, config: RenderConfig = None, mesh: CubeMesh = None):
        self.config = config if config is not None else RenderConfig()
        self.mesh = mesh if mesh is not None else CubeMesh()

    def project(self, angle_x: float, angle_y: float):
        """Return the frame's 2D segments as (x0, y0, x1, y1) pixel tuples."""
        rotated = rotate_vertices(self.mesh.vertices, angle_x, angle_y)
        off_x, off_y = self.config.center

        segments = []
        for i, j in self.mesh.edges:
            v1 = rotated[i]
            v2 = rotated[j]
            # Orthographic: z is ignored. int() truncates toward zero.
            segments.append((
                int(v1.x) + off_x,
                int(v1.y) + off_y,
                int(v2.x) + off_x,
                int(v2.y) + off_y,
            ))
        return segments

    def render(self, canvas, angle_x: float, angle_y: float):
        """
        Draw one frame onto canvas.

        DrawError from the canvas propagates untouched; the frame is then
        left unpresented.
        """
        config = self.config
        canvas.clear(config.background_color)

        for x0, y0, x1, y1 in self.project(angle_x, angle_y):
            canvas.thick_line(x0, y0, x1, y1,
                              config.line_thickness, config.line_color)

        canvas.present()


def draw_cube(canvas, angle_x: float, angle_y: float,
              config: RenderConfig = None, mesh: CubeMesh = None):
    """Render the cube at the given angles onto canvas."""
    Renderer(config, mesh).render(canvas, angle_x, angle_y)
