#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def matching_axes(self, other: 'Vec3') -> int:
        """Number of axes on which both vectors hold the same coordinate."""
        return (int(self.x == other.x)
                + int(self.y == other.y)
                + int(self.z == other.z))


def rotate_xy(v: Vec3, sin_x: float, cos_x: float,
              sin_y: float, cos_y: float) -> Vec3:
    """
    Rotate around the X axis, then around the Y axis.

    The Y rotation consumes the z produced by the X rotation, so the
    order cannot be swapped without changing the motion on screen.
    Takes precomputed sines/cosines so a whole mesh shares one trig pass.
    """
    # Around X: x unchanged
    new_y = v.y * cos_x - v.z * sin_x
    new_z = v.y * sin_x + v.z * cos_x

    # Around Y: y unchanged
    new_x = v.x * cos_y + new_z * sin_y
    new_z = -v.x * sin_y + new_z * cos_y

    return Vec3(new_x, new_y, new_z)


def rotate_vertices(vertices, angle_x: float, angle_y: float):
    """Rotate every vertex by (angle_x, angle_y) radians. Returns a new list."""
    sin_x = math.sin(angle_x)
    cos_x = math.cos(angle_x)
    sin_y = math.sin(angle_y)
    cos_y = math.cos(angle_y)
    return [rotate_xy(v, sin_x, cos_x, sin_y, cos_y) for v in vertices]
