import random
from enum import Enum
from typing import Callable, Dict, List, Optional

# Import from other project modules
import constants as const
from grid_core import Cell, Coordinate, Grid
from utils import count_links, make_rng


def binary_tree(grid: Grid, rng: random.Random):
    """Links every cell to its north or east neighbour, chosen at random."""
    for cell in grid.get_all_cells():
        candidates = [n for n in (cell.north, cell.east) if n is not None]
        if not candidates:
            continue
        grid.link(cell.coords, rng.choice(candidates))


def sidewinder(grid: Grid, rng: random.Random):
    """
    Works row by row, carving eastward runs and closing each run by linking
    one random member of it north. The northern row only ever runs east.
    """
    for row in grid.each_row():
        run: List[Cell] = []

        for cell in row:
            run.append(cell)

            at_eastern_boundary = cell.east is None
            at_northern_boundary = cell.north is None
            should_close = at_eastern_boundary or (
                not at_northern_boundary
                and rng.random() < const.SIDEWINDER_CLOSE_PROBABILITY
            )

            if should_close:
                member = rng.choice(run)
                if member.north is not None:
                    grid.link(member.coords, member.north)
                run = []
            else:
                grid.link(cell.coords, cell.east)


def aldous_broder(grid: Grid, rng: random.Random):
    """
    Unbiased random walk. Every step moves to a random neighbour and links
    it in if it has not been visited yet. Produces a uniform spanning tree,
    slowly.
    """
    cell = grid.random_cell(rng)
    unvisited = grid.size() - 1

    while unvisited > 0:
        neighbour = grid[rng.choice(cell.get_neighbours())]

        if not neighbour.is_visited():
            grid.link(cell.coords, neighbour.coords)
            unvisited -= 1

        cell = neighbour


def wilsons(grid: Grid, rng: random.Random):
    """
    Loop-erased random walks from unvisited cells until each walk hits the
    maze, then carves the erased path into it.
    """
    unvisited: List[Coordinate] = [cell.coords for cell in grid.get_all_cells()]
    first = rng.choice(unvisited)
    unvisited.remove(first)
    unvisited_set = set(unvisited)

    while unvisited:
        current = rng.choice(unvisited)
        path: List[Coordinate] = [current]

        while current in unvisited_set:
            current = rng.choice(grid.neighbours(current))
            if current in path:
                path = path[: path.index(current) + 1]
            else:
                path.append(current)

        for here, there in zip(path, path[1:]):
            grid.link(here, there)

        for coords in path:
            unvisited_set.discard(coords)
        unvisited = [coords for coords in unvisited if coords in unvisited_set]


def hunt_and_kill(grid: Grid, rng: random.Random):
    """
    Random walk ("kill") until a dead end, then scan row-major ("hunt") for an
    unvisited cell bordering the maze and resume from there.
    """
    current: Optional[Cell] = grid.random_cell(rng)

    while current is not None:
        unvisited = grid.get_unvisited_neighbours(current)

        if unvisited:
            neighbour = rng.choice(unvisited)
            grid.link(current.coords, neighbour)
            current = grid[neighbour]
            continue

        current = None
        for cell in grid.get_all_cells():
            if cell.is_visited():
                continue
            visited = grid.get_visited_neighbours(cell)
            if visited:
                grid.link(cell.coords, rng.choice(visited))
                current = cell
                break


def recursive_backtracker(grid: Grid, rng: random.Random):
    """Depth-first carving with an explicit stack."""
    stack: List[Cell] = [grid.random_cell(rng)]

    while stack:
        current = stack[-1]
        unvisited = grid.get_unvisited_neighbours(current)

        if unvisited:
            # Choose a random unvisited neighbour, link it and push it
            neighbour = rng.choice(unvisited)
            grid.link(current.coords, neighbour)
            stack.append(grid[neighbour])
        else:
            # No unvisited neighbours, backtrack
            stack.pop()


class Algorithm(Enum):
    """The closed set of maze generation algorithms."""

    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    ALDOUS_BRODER = "aldous_broder"
    WILSONS = "wilsons"
    HUNT_AND_KILL = "hunt_and_kill"
    RECURSIVE_BACKTRACKER = "recursive_backtracker"

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Looks up an algorithm by member name, value or display name."""
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for algorithm in cls:
            candidates = (
                algorithm.value,
                algorithm.name.lower(),
                str(algorithm).lower().replace(" ", "_"),
            )
            if key in candidates:
                return algorithm
        raise ValueError(f"Unknown maze algorithm: {name!r}")


_DISPLAY_NAMES: Dict[Algorithm, str] = {
    Algorithm.BINARY_TREE: "Binary Tree",
    Algorithm.SIDEWINDER: "Sidewinder",
    Algorithm.ALDOUS_BRODER: "Aldous Broder",
    Algorithm.WILSONS: "Wilsons",
    Algorithm.HUNT_AND_KILL: "Hunt And Kill",
    Algorithm.RECURSIVE_BACKTRACKER: "Recursive Backtracker",
}

_ALGORITHMS: Dict[Algorithm, Callable[[Grid, random.Random], None]] = {
    Algorithm.BINARY_TREE: binary_tree,
    Algorithm.SIDEWINDER: sidewinder,
    Algorithm.ALDOUS_BRODER: aldous_broder,
    Algorithm.WILSONS: wilsons,
    Algorithm.HUNT_AND_KILL: hunt_and_kill,
    Algorithm.RECURSIVE_BACKTRACKER: recursive_backtracker,
}


def apply(algorithm: Algorithm, grid: Grid, rng: random.Random):
    """Runs one algorithm over the grid, mutating its links in place."""
    try:
        carve = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"Unsupported maze algorithm: {algorithm!r}") from None
    carve(grid, rng)


def generate_maze(
    grid: Grid,
    algorithm: Algorithm = Algorithm.RECURSIVE_BACKTRACKER,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
):
    """
    Generates maze passages within the grid using the chosen algorithm.
    Modifies the links of the cells in the grid.
    """
    if isinstance(algorithm, str):
        algorithm = Algorithm.from_name(algorithm)
    if rng is None:
        rng = make_rng(seed)

    print(f"--- Starting Maze Generation ({algorithm}) ---")
    apply(algorithm, grid, rng)

    visited_count = sum(1 for cell in grid.get_all_cells() if cell.is_visited())
    if grid.size() == 1:
        visited_count = 1  # A lone cell has nothing to link to
    print(
        f"--- Maze Generation Complete: Linked {visited_count}/{grid.size()} cells "
        f"with {count_links(grid)} passages. ---"
    )

    # Sanity check: Ensure all cells were visited
    if visited_count < grid.size():
        print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")
        print(f"ERROR: MAZE GENERATION FAILED TO VISIT ALL CELLS! Visited {visited_count}/{grid.size()}.")
        unvisited_example = next((c for c in grid.get_all_cells() if not c.is_visited()), None)
        if unvisited_example:
            print(f"Example unvisited cell: {unvisited_example.id}")
        print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")
