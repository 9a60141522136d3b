# geometry.py
import numpy as np
from typing import List, Tuple

# Import from other project modules
from grid_core import Grid
import constants as const

Point2D = Tuple[float, float]
Segment2D = Tuple[Point2D, Point2D]


def cell_center(row: int, column: int, cell_size: float = const.DEFAULT_CELL_SIZE) -> Point2D:
    """Centre of a cell in plot coordinates (x right, row 0 at the top)."""
    return ((column + 0.5) * cell_size, -(row + 0.5) * cell_size)


def extract_wall_segments(
    grid: Grid, cell_size: float = const.DEFAULT_CELL_SIZE
) -> List[Segment2D]:
    """
    Extracts 2D wall CENTERLINE segments from the grid's passages.
    Each cell contributes its east and south walls where it is not linked,
    plus the north and west outer boundary for the first row and column.
    Returns line segments as ((x1,y1), (x2,y2)).
    """
    wall_segments: List[Segment2D] = []

    for cell in grid.get_all_cells():
        x1 = cell.column * cell_size
        y1 = -cell.row * cell_size
        x2 = x1 + cell_size
        y2 = y1 - cell_size

        if cell.north is None:
            wall_segments.append(((x1, y1), (x2, y1)))
        if cell.west is None:
            wall_segments.append(((x1, y1), (x1, y2)))
        if not cell.is_linked(cell.east):
            wall_segments.append(((x2, y1), (x2, y2)))
        if not cell.is_linked(cell.south):
            wall_segments.append(((x1, y2), (x2, y2)))

    return wall_segments


def extract_wall_bases_2d(
    grid: Grid,
    wall_thickness: float,
    cell_size: float = const.DEFAULT_CELL_SIZE,
) -> List[Tuple[Point2D, Point2D, Point2D, Point2D]]:
    """
    Extracts 2D wall BASE polygons (quads) by offsetting centerlines.
    Each quad is extended by half the thickness past both segment ends so
    neighbouring walls overlap at the corners.
    """
    print("--- Extracting Wall Bases (for 3D Meshing) ---")
    if wall_thickness <= const.GEOMETRY_TOLERANCE:
        raise ValueError("Wall thickness must be positive.")

    half = wall_thickness / 2.0
    wall_bases = []
    for p1, p2 in extract_wall_segments(grid, cell_size):
        start, end = np.array(p1, dtype=float), np.array(p2, dtype=float)
        direction = end - start
        length = np.linalg.norm(direction)
        if length < const.GEOMETRY_TOLERANCE:
            continue
        direction /= length
        normal = np.array([-direction[1], direction[0]])

        start = start - direction * half
        end = end + direction * half
        quad = (
            tuple(start - normal * half),
            tuple(end - normal * half),
            tuple(end + normal * half),
            tuple(start + normal * half),
        )
        wall_bases.append(tuple((float(x), float(y)) for x, y in quad))

    print(f"  Extracted {len(wall_bases)} wall base polygons.")
    return wall_bases
