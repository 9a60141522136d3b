import random

import numpy as np
import pytest

from grid_core import Grid
from maze_gen import Algorithm, apply
from distances import Distances, compute_distances, path_to


@pytest.fixture
def maze():
    grid = Grid(6, 7)
    apply(Algorithm.WILSONS, grid, random.Random(2024))
    return grid


def _chain(columns):
    grid = Grid(1, columns)
    for column in range(columns - 1):
        grid.link((0, column), (0, column + 1))
    return grid


def test_root_distance_is_zero(maze):
    for root in [(0, 0), (3, 4), (5, 6)]:
        assert compute_distances(maze, root).get(root) == 0


def test_every_cell_reached_in_perfect_maze(maze):
    distances = compute_distances(maze, (2, 2))
    assert len(distances) == maze.size()
    assert sorted(distances.cells()) == sorted(maze.cells)


def test_linked_cells_differ_by_exactly_one(maze):
    distances = compute_distances(maze, (0, 0))
    for cell in maze.get_all_cells():
        for linked in cell.links:
            assert abs(distances[cell.coords] - distances[linked]) == 1


def test_chain_distances():
    grid = _chain(5)
    distances = compute_distances(grid, (0, 1))
    assert [distances.get((0, c)) for c in range(5)] == [1, 0, 1, 2, 3]


def test_unlinked_cells_are_absent():
    grid = Grid(2, 2)
    grid.link((0, 0), (0, 1))
    distances = compute_distances(grid, (0, 0))
    assert distances.get((0, 1)) == 1
    assert distances.get((1, 0)) is None
    assert (1, 0) not in distances
    assert distances.get((9, 9)) is None


def test_root_outside_grid_is_rejected():
    with pytest.raises(KeyError):
        compute_distances(Grid(2, 2), (5, 5))


def test_max_returns_farthest_cell():
    grid = _chain(4)
    assert compute_distances(grid, (0, 0)).max() == ((0, 3), 3)


def test_max_breaks_ties_by_lowest_row_then_column():
    grid = Grid(3, 3)
    for neighbour in grid.neighbours((1, 1)):
        grid.link((1, 1), neighbour)
    assert compute_distances(grid, (1, 1)).max() == ((0, 1), 1)


def test_max_of_isolated_root_is_root():
    assert compute_distances(Grid(2, 2), (1, 1)).max() == ((1, 1), 0)


def test_path_properties_in_perfect_maze(maze):
    distances = compute_distances(maze, (0, 0))
    for goal in maze.cells:
        path = path_to(distances, goal)
        assert path[0] == (0, 0)
        assert path[-1] == goal
        assert len(path) == distances[goal] + 1
        for here, there in zip(path, path[1:]):
            assert distances[there] == distances[here] + 1
            assert maze.is_linked(here, there)


def test_path_to_root_is_just_root(maze):
    distances = compute_distances(maze, (3, 3))
    assert path_to(distances, (3, 3)) == [(3, 3)]
    assert distances.path_to((3, 3)) == [(3, 3)]


def test_path_absent_exactly_when_distance_absent():
    grid = Grid(2, 3)
    grid.link((0, 0), (0, 1))
    grid.link((0, 1), (1, 1))
    distances = compute_distances(grid, (0, 0))
    for goal in grid.cells:
        assert (path_to(distances, goal) is None) == (distances.get(goal) is None)
    assert path_to(distances, (1, 1)) == [(0, 0), (0, 1), (1, 1)]


def test_path_to_accepts_cell_objects(maze):
    distances = compute_distances(maze, (0, 0))
    goal = maze[(5, 6)]
    assert path_to(distances, goal)[-1] == (5, 6)


def test_path_fails_when_links_do_not_lead_back():
    grid = _chain(3)
    distances = Distances(grid, (0, 0))
    distances.set((0, 0), 0)
    distances.set((0, 2), 2)
    # (0, 1) carries no distance, so the walk back from (0, 2) is stuck.
    assert path_to(distances, (0, 2)) is None


def test_path_distances_keep_only_path_cells():
    grid = Grid(2, 2)
    grid.link((0, 0), (0, 1))
    grid.link((0, 1), (1, 1))
    grid.link((0, 0), (1, 0))
    breadcrumbs = compute_distances(grid, (0, 0)).path_distances((1, 1))
    assert sorted(breadcrumbs.cells()) == [(0, 0), (0, 1), (1, 1)]
    assert breadcrumbs.get((1, 0)) is None
    assert breadcrumbs.get((1, 1)) == 2


def test_path_distances_absent_for_unreached_goal():
    grid = Grid(1, 2)
    assert compute_distances(grid, (0, 0)).path_distances((0, 1)) is None


def test_to_array_marks_unreached_cells():
    grid = Grid(2, 2)
    grid.link((0, 0), (0, 1))
    values = compute_distances(grid, (0, 0)).to_array()
    assert values.shape == (2, 2)
    np.testing.assert_array_equal(values, np.array([[0, 1], [-1, -1]]))
