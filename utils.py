# utils.py
import random
from collections import deque
from typing import List, Optional, Tuple

from grid_core import Coordinate, Grid
from distances import compute_distances


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Creates the random source handed to the generation algorithms."""
    return random.Random(seed)


def count_links(grid: Grid) -> int:
    """Number of undirected passages in the grid."""
    return sum(len(cell.links) for cell in grid.get_all_cells()) // 2


def dead_ends(grid: Grid) -> List[Coordinate]:
    """Cells with exactly one passage, in row-major order."""
    return [cell.coords for cell in grid.get_all_cells() if len(cell.links) == 1]


def links_are_symmetric(grid: Grid) -> bool:
    for cell in grid.get_all_cells():
        for linked in cell.links:
            if linked not in grid or not grid[linked].is_linked(cell.coords):
                return False
    return True


def is_perfect_maze(grid: Grid) -> bool:
    """
    True when the passages form a spanning tree: symmetric, N-1 of them,
    between topological neighbours only, and reaching every cell.
    """
    if not links_are_symmetric(grid):
        return False
    for cell in grid.get_all_cells():
        if not cell.links.issubset(cell.get_neighbours()):
            return False
    if count_links(grid) != grid.size() - 1:
        return False

    start = next(grid.get_all_cells()).coords
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for linked in grid[current].links:
            if linked not in seen:
                seen.add(linked)
                queue.append(linked)
    return len(seen) == grid.size()


def farthest_pair(grid: Grid) -> Tuple[Coordinate, Coordinate, int]:
    """
    The two ends of the longest path in a perfect maze, found with two
    breadth-first passes: the cell farthest from (0, 0), then the cell
    farthest from that one.
    """
    start, _ = compute_distances(grid, (0, 0)).max()
    goal, distance = compute_distances(grid, start).max()
    return start, goal, distance
