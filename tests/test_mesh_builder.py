import random

import numpy as np
import pytest
import trimesh

from grid_core import Grid
from maze_gen import Algorithm, apply
from mesh_builder import (
    _create_extruded_prism_simple,
    _is_mesh_degenerate,
    create_2d_maze_stl,
    create_maze_mesh,
)


@pytest.fixture
def maze():
    grid = Grid(4, 5)
    apply(Algorithm.SIDEWINDER, grid, random.Random(17))
    return grid


def test_prism_has_eight_vertices_and_twelve_faces():
    verts, faces = _create_extruded_prism_simple(((0, 0), (1, 0), (1, 1), (0, 1)), 2.0)
    assert verts.shape == (8, 3)
    assert faces.shape == (12, 3)
    assert verts[:, 2].max() == pytest.approx(2.0)


def test_prism_requires_quads():
    assert _create_extruded_prism_simple(((0, 0), (1, 0), (1, 1)), 1.0) is None


def test_degenerate_detection():
    assert _is_mesh_degenerate(np.zeros((8, 3)))
    assert not _is_mesh_degenerate(np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=float))


def test_maze_mesh_spans_grid(maze):
    mesh = create_maze_mesh(maze, cell_size=1.0, wall_thickness=0.2, wall_height=1.0, base_height=0.5)
    assert isinstance(mesh, trimesh.Trimesh)
    assert len(mesh.faces) > 0
    (min_x, min_y, min_z), (max_x, max_y, max_z) = mesh.bounds
    assert min_x == pytest.approx(-0.1)
    assert max_x == pytest.approx(5.1)
    assert min_y == pytest.approx(-4.1)
    assert max_y == pytest.approx(0.1)
    assert min_z == pytest.approx(-0.5)
    assert max_z == pytest.approx(1.0)


def test_maze_mesh_without_base(maze):
    mesh = create_maze_mesh(maze, base_height=0.0)
    assert mesh.bounds[0][2] == pytest.approx(0.0)


def test_maze_mesh_rejects_flat_walls(maze):
    with pytest.raises(ValueError):
        create_maze_mesh(maze, wall_height=0.0)


def test_stl_export_writes_file(maze, tmp_path):
    target = tmp_path / "maze.stl"
    assert create_2d_maze_stl(maze, str(target))
    assert target.exists()
    assert len(trimesh.load(str(target)).faces) > 0
