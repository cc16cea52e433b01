import numpy as np
import pytest

from sillyengine.mesh import RED, ColoredMesh, Mesh
from sillyengine.utils import normalize, quat_from_axis_angle, quat_to_matrix, translation_matrix


def test_cube_shape():
    cube = Mesh.cube()
    assert cube.positions.shape == (8, 3)
    assert cube.indices.shape == (12, 3)
    assert np.allclose(cube.positions.min(axis=0), -1.0)
    assert np.allclose(cube.positions.max(axis=0), 1.0)


def test_cube_triangles_face_outward():
    cube = Mesh.cube()
    for a, b, c in cube.positions[cube.indices]:
        normal = np.cross(b - a, c - a)
        centroid = (a + b + c) / 3.0
        assert np.dot(normal, centroid) > 0.0


def test_cube_uses_every_vertex():
    assert set(Mesh.cube().indices.ravel().tolist()) == set(range(8))


def test_identity_transform_keeps_positions():
    cube = Mesh.cube()
    moved = cube.transformed(np.identity(4))
    assert np.allclose(moved.positions, cube.positions)
    assert np.array_equal(moved.indices, cube.indices)


def test_translation_shifts_vertices():
    cube = Mesh.cube()
    moved = cube.transformed(translation_matrix([3.0, 0.0, -2.0]))
    assert np.allclose(moved.positions, cube.positions + [3.0, 0.0, -2.0])
    assert np.allclose(cube.positions.min(axis=0), -1.0)


def test_rotation_preserves_distances():
    cube = Mesh.cube()
    rot = quat_to_matrix(quat_from_axis_angle(normalize([1.0, 1.0, 1.0]), 0.9))
    moved = cube.transformed(rot)
    assert np.allclose(np.linalg.norm(moved.positions, axis=1), np.linalg.norm(cube.positions, axis=1))


def test_bad_matrix_raises():
    with pytest.raises(ValueError):
        Mesh.cube().transformed(np.identity(3))


def test_index_out_of_range_raises():
    with pytest.raises(ValueError):
        Mesh([(0.0, 0.0, 0.0)], [(0, 1, 2)])


def test_colored_mesh_keeps_color():
    gm = ColoredMesh(Mesh.cube(), RED)
    moved = gm.transformed(translation_matrix([1.0, 1.0, 1.0]))
    assert moved.color == RED
    assert np.allclose(moved.mesh.positions, gm.mesh.positions + 1.0)