#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from itertools import combinations

from .math_utils import Vec3


def select_edges(vertices):
    """
    Pick the vertex pairs that form box edges.

    A pair (i, j), i < j, is an edge when the unrotated corners share
    exactly two coordinates: one shared coordinate is a face diagonal,
    none is the space diagonal.
    """
    return tuple(
        (i, j)
        for i, j in combinations(range(len(vertices)), 2)
        if vertices[i].matching_axes(vertices[j]) == 2
    )


class CubeMesh:
    """Axis-aligned cube centered at the origin, with its edge list precomputed."""
    __slots__ = ('half_extent', 'vertices', 'edges')

    def __init__(self, half_extent: float = 50.0):
        h = float(half_extent)
        self.half_extent = h
        # Corner order: x slowest, z fastest
        self.vertices = tuple(
            Vec3(sx * h, sy * h, sz * h)
            for sx in (-1, 1)
            for sy in (-1, 1)
            for sz in (-1, 1)
        )
        self.edges = select_edges(self.vertices)

    def __repr__(self):
        return (f"CubeMesh(half_extent={self.half_extent}, "
                f"V:{len(self.vertices)} E:{len(self.edges)})")
