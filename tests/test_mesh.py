import math
from itertools import combinations

import pytest

from wireframe_cube.math_utils import Vec3
from wireframe_cube.mesh import CubeMesh, select_edges


def test_default_cube_corners():
    mesh = CubeMesh()
    assert mesh.vertices == (
        Vec3(-50, -50, -50), Vec3(-50, -50, 50),
        Vec3(-50, 50, -50), Vec3(-50, 50, 50),
        Vec3(50, -50, -50), Vec3(50, -50, 50),
        Vec3(50, 50, -50), Vec3(50, 50, 50),
    )


def test_cube_has_twelve_edges_of_length_100():
    mesh = CubeMesh()
    assert len(mesh.edges) == 12
    for i, j in mesh.edges:
        assert i < j
        assert (mesh.vertices[i] - mesh.vertices[j]).magnitude() == 100.0


def test_diagonals_are_not_edges():
    mesh = CubeMesh()
    edges = set(mesh.edges)
    excluded = [p for p in combinations(range(8), 2) if p not in edges]
    assert len(excluded) == 16

    lengths = sorted(
        (mesh.vertices[i] - mesh.vertices[j]).magnitude() for i, j in excluded
    )
    face = lengths[:12]
    space = lengths[12:]
    assert face == pytest.approx([100 * math.sqrt(2)] * 12)
    assert space == pytest.approx([100 * math.sqrt(3)] * 4)


def test_edges_join_corners_differing_on_one_axis():
    # Corner index bits are (x, y, z) signs, so edges differ by one bit
    expected = tuple(
        (i, j) for i, j in combinations(range(8), 2)
        if bin(i ^ j).count('1') == 1
    )
    assert CubeMesh().edges == expected


def test_select_edges_skips_self_pairs():
    v = Vec3(1, 1, 1)
    assert select_edges([v, v]) == ()


def test_custom_half_extent():
    mesh = CubeMesh(half_extent=10)
    assert len(mesh.edges) == 12
    for i, j in mesh.edges:
        assert (mesh.vertices[i] - mesh.vertices[j]).magnitude() == 20.0
