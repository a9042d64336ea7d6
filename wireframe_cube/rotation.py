#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/rotation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Rotation:
    """
    Angle state for the spinning cube.

    Holds the X and Y rotation angles (radians). The driver loop calls
    advance() once per frame; the angles grow without bound, which is
    harmless because the renderer only ever takes their sine and cosine.
    """
    __slots__ = ('angle_x', 'angle_y', 'step_x', 'step_y')

    def __init__(self, step_x: float = 0.01, step_y: float = 0.03):
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.step_x = step_x
        self.step_y = step_y

    @classmethod
    def from_config(cls, config) -> 'Rotation':
        return cls(config.angle_step_x, config.angle_step_y)

    def advance(self):
        """Add one frame's worth of rotation to both angles."""
        self.angle_x += self.step_x
        self.angle_y += self.step_y

    @property
    def angles(self):
        return self.angle_x, self.angle_y
