# grid_core.py
import random
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple, Union

# Import from other project modules
import constants as const

Coordinate = Tuple[int, int]


class InvalidDimensions(ValueError):
    """Raised when a grid is requested with fewer than one row or column."""


class Cell:
    """Represents a single cell in the rectangular grid.

    A cell never holds another Cell. Its neighbours and links are stored as
    (row, column) coordinates and resolved through the owning Grid.
    """

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        self.id = f"{row},{column}"
        self.coords: Coordinate = (row, column)  # Store as tuple for convenience

        # Topology, assigned once by the Grid
        self.neighbours: Dict[str, Optional[Coordinate]] = {
            const.DIR_NORTH: None,
            const.DIR_SOUTH: None,
            const.DIR_WEST: None,
            const.DIR_EAST: None,
        }
        self._links: Set[Coordinate] = set()  # Coordinates connected by passages

    @property
    def north(self) -> Optional[Coordinate]:
        return self.neighbours[const.DIR_NORTH]

    @property
    def south(self) -> Optional[Coordinate]:
        return self.neighbours[const.DIR_SOUTH]

    @property
    def west(self) -> Optional[Coordinate]:
        return self.neighbours[const.DIR_WEST]

    @property
    def east(self) -> Optional[Coordinate]:
        return self.neighbours[const.DIR_EAST]

    @property
    def links(self) -> FrozenSet[Coordinate]:
        """Read-only view of the coordinates this cell has passages to."""
        return frozenset(self._links)

    def get_neighbours(self) -> List[Coordinate]:
        """Topological neighbours in the fixed order north, south, west, east."""
        return [
            self.neighbours[direction]
            for direction in const.NEIGHBOUR_ORDER
            if self.neighbours[direction] is not None
        ]

    def is_linked(self, other: Optional[Coordinate]) -> bool:
        """Checks if this cell has a passage to the given coordinate."""
        return other is not None and other in self._links

    def is_visited(self) -> bool:
        """A cell is visited by generation once it has at least one link."""
        return bool(self._links)

    def __repr__(self) -> str:
        return f"Cell({self.id})"

    def __hash__(self):
        return hash(self.coords)

    def __eq__(self, other):
        return isinstance(other, Cell) and self.coords == other.coords


CellRef = Union[Cell, Coordinate]


def as_coords(ref: CellRef) -> Coordinate:
    if isinstance(ref, Cell):
        return ref.coords
    return (ref[0], ref[1])


class Grid:
    """
    Owns a rows x columns matrix of cells. All cross-cell operations go
    through coordinates on the grid, never through one cell holding another.
    """

    def __init__(self, rows: int, columns: int):
        for name, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensions(f"Grid {name} must be an integer, got {value!r}.")
            if value < 1:
                raise InvalidDimensions(f"Grid {name} must be at least 1, got {value}.")

        self.rows = rows
        self.columns = columns
        self.cells: Dict[Coordinate, Cell] = {}

        print(f"--- Initializing Grid (Rows={rows}, Columns={columns}) ---")
        self._create_cells()
        self._link_neighbours()
        print(f"--- Grid Initialized: {self.size()} cells ---")

    def _create_cells(self):
        """Instantiates all Cell objects in row-major order."""
        self.cells = {}
        for row in range(self.rows):
            for column in range(self.columns):
                cell = Cell(row, column)
                self.cells[cell.coords] = cell

    def _link_neighbours(self):
        """Determines and sets the neighbours for each cell."""
        for (row, column), cell in self.cells.items():
            if row > 0:
                cell.neighbours[const.DIR_NORTH] = (row - 1, column)
            if row < self.rows - 1:
                cell.neighbours[const.DIR_SOUTH] = (row + 1, column)
            if column > 0:
                cell.neighbours[const.DIR_WEST] = (row, column - 1)
            if column < self.columns - 1:
                cell.neighbours[const.DIR_EAST] = (row, column + 1)

    # --- Lookup ---

    def get_cell(self, row: int, column: int) -> Optional[Cell]:
        """Bounds-checked lookup. Returns None for out-of-range coordinates."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            return None
        return self.cells.get((row, column))

    def __getitem__(self, coords: Coordinate) -> Cell:
        return self.cells[as_coords(coords)]

    def __contains__(self, coords) -> bool:
        return isinstance(coords, tuple) and coords in self.cells

    def random_cell(self, rng: random.Random) -> Cell:
        """Returns a cell chosen uniformly at random from the grid."""
        row = rng.randrange(self.rows)
        column = rng.randrange(self.columns)
        return self.cells[(row, column)]

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.rows * self.columns

    def get_all_cells(self) -> Iterator[Cell]:
        """Returns an iterator over all cells in row-major order."""
        yield from self.cells.values()

    def __iter__(self) -> Iterator[Cell]:
        return self.get_all_cells()

    def each_row(self) -> Iterator[List[Cell]]:
        """Yields each row as a list of cells in column order."""
        for row in range(self.rows):
            yield [self.cells[(row, column)] for column in range(self.columns)]

    # --- Link graph ---

    def link(self, a: CellRef, b: CellRef):
        """Creates a bidirectional passage between two cells."""
        cell_a, cell_b = self[as_coords(a)], self[as_coords(b)]
        cell_a._links.add(cell_b.coords)
        cell_b._links.add(cell_a.coords)

    def unlink(self, a: CellRef, b: CellRef):
        """Removes the passage in both directions. No-op if not linked."""
        cell_a, cell_b = self[as_coords(a)], self[as_coords(b)]
        cell_a._links.discard(cell_b.coords)
        cell_b._links.discard(cell_a.coords)

    def is_linked(self, a: CellRef, b: CellRef) -> bool:
        return self[as_coords(a)].is_linked(as_coords(b))

    def neighbours(self, ref: CellRef) -> List[Coordinate]:
        return self[as_coords(ref)].get_neighbours()

    def get_unvisited_neighbours(self, ref: CellRef) -> List[Coordinate]:
        """Neighbours of the cell whose link sets are still empty."""
        return [n for n in self.neighbours(ref) if not self.cells[n].is_visited()]

    def get_visited_neighbours(self, ref: CellRef) -> List[Coordinate]:
        return [n for n in self.neighbours(ref) if self.cells[n].is_visited()]

    def reset_links(self):
        """Clears every passage, returning the grid to its ungenerated state."""
        for cell in self.cells.values():
            cell._links.clear()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"
