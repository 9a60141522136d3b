# display.py
"""
Text rendering of a maze. Reads only the grid's dimensions, cell lookup and
each cell's east/south passages, plus a caller-supplied function that turns
a cell into its three-character body.
"""
import math
from typing import Callable, Optional

# Import from other project modules
import constants as const
from grid_core import Cell, Grid
from distances import Distances

CellContent = Callable[[Cell], str]


def _blank_content(cell: Cell) -> str:
    return const.DISPLAY_CELL_BODY


def render_grid(grid: Grid, cell_content: Optional[CellContent] = None) -> str:
    """Draws the maze as +---+ boxes with open sides where cells are linked."""
    content = cell_content or _blank_content

    output = const.DISPLAY_CORNER
    output += (const.DISPLAY_HORIZONTAL_WALL + const.DISPLAY_CORNER) * grid.columns
    output += "\n"

    for row in range(grid.rows):
        top = const.DISPLAY_VERTICAL_WALL
        bottom = const.DISPLAY_CORNER

        for column in range(grid.columns):
            cell = grid.get_cell(row, column)
            east_boundary = const.DISPLAY_VERTICAL_WALL
            south_boundary = const.DISPLAY_HORIZONTAL_WALL

            if cell.is_linked(cell.east):
                east_boundary = const.DISPLAY_OPEN_EAST
            if cell.is_linked(cell.south):
                south_boundary = const.DISPLAY_OPEN_SOUTH

            top += content(cell) + east_boundary
            bottom += south_boundary + const.DISPLAY_CORNER

        output += top + "\n"
        output += bottom + "\n"

    return output


def distance_content(distances: Distances) -> CellContent:
    """Shows each cell's distance in hex. Unreached cells show 0."""

    def content(cell: Cell) -> str:
        distance = distances.get(cell.coords) or 0
        return f" {distance:X} "

    return content


def path_content(path_distances: Distances) -> CellContent:
    """Shows distances only along a path, leaving the root and other cells blank."""

    def content(cell: Cell) -> str:
        distance = path_distances.get(cell.coords) or 0
        return f" {distance:X} " if distance > 0 else "   "

    return content


def colored_distance_content(distances: Distances) -> CellContent:
    """Hex distances on a 24-bit ANSI background that fades with distance."""
    _, max_distance = distances.max()

    def content(cell: Cell) -> str:
        distance = distances.get(cell.coords) or 0
        if max_distance > 0:
            intensity = (max_distance - distance) / max_distance
        else:
            intensity = 1.0
        dark = math.floor(255 * intensity)
        bright = 128 + math.floor(127 * intensity)
        return f"\x1b[48;2;{dark};{dark};{bright}m {distance:X} \x1b[0m"

    return content
