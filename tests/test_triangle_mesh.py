"""Tests for point location in triangle meshes."""

import os

import numpy as np
import pytest

from triangle_mesh import TriangleMesh, make_square_mesh

ASSETS = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "assets"))


@pytest.fixture
def square():
    mesh = TriangleMesh()
    mesh.read_obj(os.path.join(ASSETS, "square.obj"))
    return mesh


def test_read_obj(square):
    assert square.get_num_vertices() == 4
    assert square.get_num_triangles() == 2
    assert square.get_triangle_indices(1).tolist() == [0, 2, 3]
    assert square.get_bounding_box().tolist() == [0.0, 1.0, 0.0, 1.0, 0.0, 0.0]


def test_read_obj_malformed(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0\nv 1 x\n")
    with pytest.raises(ValueError, match=":2:"):
        TriangleMesh().read_obj(str(path))


def test_read_obj_index_out_of_range(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0\nv 1 0\nv 0 1\nf 1 2 9\n")
    with pytest.raises(ValueError):
        TriangleMesh().read_obj(str(path))


def test_read_obj_missing_file(tmp_path):
    with pytest.raises(OSError):
        TriangleMesh().read_obj(str(tmp_path / "missing.obj"))


def test_locate_point(square):
    i, result = square.locate_point((0.75, 0.25))
    assert i == 0
    assert result.total() == pytest.approx(1.0)
    i, _ = square.locate_point((0.25, 0.75))
    assert i == 1


def test_locate_point_outside(square):
    assert square.locate_point((1.5, 0.5)) is None
    assert TriangleMesh().locate_point((0.0, 0.0)) is None


def test_locate_skips_degenerate_triangles():
    mesh = TriangleMesh()
    for v in [(0, 0), (1, 0), (2, 0), (0, 1)]:
        mesh.append_vertex(v)
    mesh.append_triangle([0, 1, 2])
    mesh.append_triangle([0, 1, 3])
    i, _ = mesh.locate_point((0.25, 0.25))
    assert i == 1


def test_transfer_point_follows_deformation():
    rest = make_square_mesh(rows=3)
    deformed = rest.copy()
    deformed.vertices[:, :2] *= 2.0
    moved = rest.transfer_point((0.3, -0.4), deformed)
    assert moved.x == pytest.approx(0.6)
    assert moved.y == pytest.approx(-0.8)


def test_transfer_point_requires_same_topology(square):
    with pytest.raises(ValueError):
        square.transfer_point((0.5, 0.5), make_square_mesh())


def test_make_square_mesh():
    mesh = make_square_mesh(rows=5)
    assert mesh.get_num_vertices() == 25
    assert mesh.get_num_triangles() == 32
    assert np.allclose(mesh.get_bounding_box()[:4], [-1.0, 1.0, -1.0, 1.0])


def test_read_obj_slash_indices(tmp_path):
    path = tmp_path / "tex.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "vt 0 0\nvt 1 0\nvt 0 1\n"
        "f 1/1/1 2/2/2 3/3/3\n"
    )
    mesh = TriangleMesh()
    mesh.read_obj(str(path))
    assert mesh.get_num_triangles() == 1
    assert mesh.get_triangle_indices(0).tolist() == [0, 1, 2]


def test_read_obj_polygon_faces_are_fanned(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text("v 0 0\nv 1 0\nv 1 1\nv 0 1\nf 1 2 3 4\n")
    mesh = TriangleMesh()
    mesh.read_obj(str(path))
    assert mesh.triangles.tolist() == [[0, 1, 2], [0, 2, 3]]
    i, _ = mesh.locate_point((0.25, 0.75))
    assert i == 1
