# distances.py
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

# Import from other project modules
from grid_core import Coordinate, Grid, as_coords


class Distances:
    """
    Distance of every reachable cell from a single root, measured in
    passages. Built by compute_distances and not modified afterwards.
    """

    def __init__(self, grid: Grid, root: Coordinate):
        self.grid = grid
        self.root: Coordinate = root
        self._cells: Dict[Coordinate, int] = {}

    def set(self, coords: Coordinate, distance: int):
        self._cells[coords] = distance

    def get(self, coords: Coordinate) -> Optional[int]:
        """Distance to the coordinate, or None if it was never reached."""
        return self._cells.get(as_coords(coords))

    def __getitem__(self, coords: Coordinate) -> int:
        return self._cells[as_coords(coords)]

    def __contains__(self, coords) -> bool:
        return coords in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def cells(self) -> List[Coordinate]:
        return list(self._cells)

    def max(self) -> Tuple[Coordinate, int]:
        """
        The farthest reachable cell and its distance. Among equally distant
        cells the lowest (row, column) wins.
        """
        max_coords, max_distance = self.root, 0
        for coords in sorted(self._cells):
            distance = self._cells[coords]
            if distance > max_distance:
                max_coords, max_distance = coords, distance
        return max_coords, max_distance

    def path_to(self, goal: Coordinate) -> Optional[List[Coordinate]]:
        return path_to(self, goal)

    def path_distances(self, goal: Coordinate) -> Optional["Distances"]:
        """A new Distances holding only the cells on the path to goal."""
        path = path_to(self, goal)
        if path is None:
            return None
        breadcrumbs = Distances(self.grid, self.root)
        for coords in path:
            breadcrumbs.set(coords, self._cells[coords])
        return breadcrumbs

    def to_array(self) -> np.ndarray:
        """Distances laid out as a rows x columns array, -1 where unreachable."""
        values = np.full((self.grid.rows, self.grid.columns), -1, dtype=int)
        for (row, column), distance in self._cells.items():
            values[row, column] = distance
        return values

    def __repr__(self) -> str:
        return f"Distances(root={self.root}, cells={len(self._cells)})"


def compute_distances(grid: Grid, root) -> Distances:
    """Breadth-first distances from root over the grid's passages."""
    root_coords = as_coords(root)
    if root_coords not in grid:
        raise KeyError(f"Root {root_coords} is outside the grid.")

    distances = Distances(grid, root_coords)
    distances.set(root_coords, 0)
    frontier = [root_coords]

    while frontier:
        new_frontier = []
        for coords in frontier:
            current_distance = distances[coords]
            for linked in sorted(grid[coords].links):
                if linked not in distances:
                    distances.set(linked, current_distance + 1)
                    new_frontier.append(linked)
        frontier = new_frontier

    return distances


def path_to(distances: Distances, goal) -> Optional[List[Coordinate]]:
    """
    Walks back from goal to the root, always stepping to a linked neighbour
    exactly one closer. Returns the coordinates root first, or None when the
    goal was not reached or the passages do not lead back to the root.
    """
    goal_coords = as_coords(goal)
    current_distance = distances.get(goal_coords)
    if current_distance is None:
        return None

    grid = distances.grid
    current = goal_coords
    path = [current]

    while current != distances.root:
        step: Optional[Coordinate] = None
        for linked in sorted(grid[current].links):
            if distances.get(linked) == current_distance - 1:
                step = linked
                break
        if step is None:
            return None
        current, current_distance = step, current_distance - 1
        path.append(current)

    path.reverse()
    return path

