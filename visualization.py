# visualization.py
import matplotlib
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors
import numpy as np
from typing import List, Optional, Tuple

# Import from other project modules
from grid_core import Coordinate, Grid
from geometry import cell_center, extract_wall_segments
from distances import compute_distances, path_to
import constants as const


# --- Visualization Helpers ---
def _setup_plot(grid: Grid) -> Tuple[plt.Figure, plt.Axes]:
    """Creates a square-aspect axis framing the whole grid."""
    fig, ax = plt.subplots(figsize=const.VIS_FIGURE_SIZE)
    margin = 0.5 * const.DEFAULT_CELL_SIZE
    ax.set_xlim(-margin, grid.columns * const.DEFAULT_CELL_SIZE + margin)
    ax.set_ylim(-grid.rows * const.DEFAULT_CELL_SIZE - margin, margin)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _draw_walls(ax: plt.Axes, grid: Grid) -> int:
    """Draws every wall centerline of the maze."""
    wall_segments = extract_wall_segments(grid)
    for (x1, y1), (x2, y2) in wall_segments:
        ax.plot(
            [x1, x2],
            [y1, y2],
            const.VIS_WALL_LINE_STYLE,
            lw=const.VIS_WALL_LINE_LW,
            alpha=const.VIS_WALL_LINE_ALPHA,
        )
    return len(wall_segments)


def _draw_links(ax: plt.Axes, grid: Grid) -> int:
    """Draws lines connecting linked cell centers."""
    drawn_pairs = set()
    for cell in grid.get_all_cells():
        for linked in cell.links:
            pair = frozenset([cell.coords, linked])
            if pair in drawn_pairs:
                continue
            (x1, y1), (x2, y2) = cell_center(*cell.coords), cell_center(*linked)
            ax.plot(
                [x1, x2],
                [y1, y2],
                const.VIS_LINK_LINE_STYLE,
                lw=const.VIS_LINK_LINE_LW,
                alpha=const.VIS_LINK_LINE_ALPHA,
            )
            drawn_pairs.add(pair)
    return len(drawn_pairs)


def _draw_entry_exit(ax: plt.Axes, entry: Coordinate, exit_: Coordinate):
    """Marks the entry and exit cells."""
    ex, ey = cell_center(*entry)
    ax.plot(ex, ey, const.VIS_ENTRY_MARKER,
            markersize=const.VIS_SOLUTION_ENTRY_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_ENTRY_MFC,
            mec=const.VIS_SOLUTION_ENTRY_MEC,
            label="Entry")
    xx, xy = cell_center(*exit_)
    ax.plot(xx, xy, const.VIS_EXIT_MARKER,
            markersize=const.VIS_SOLUTION_EXIT_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_EXIT_MFC,
            mec=const.VIS_SOLUTION_EXIT_MEC,
            label="Exit")


def _save(fig: plt.Figure, filename: str):
    plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)


# --- Main Visualization Functions ---

def visualize_maze_walls(grid: Grid, filename="maze_walls.png"):
    """Visualizes the maze walls (using centerlines)."""
    print(f"--- Generating Maze Walls Visualization: {filename} ---")
    try:
        fig, ax = _setup_plot(grid)
        wall_count = _draw_walls(ax, grid)
        ax.set_title(f"Maze Walls ({wall_count} Segments)")
        _save(fig, filename)
        print(f"  Walls visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")


def visualize_maze_links(grid: Grid, filename="maze_links.png"):
    """Visualizes the generated maze links (passages) between cells."""
    print(f"--- Generating Maze Links Visualization: {filename} ---")
    try:
        fig, ax = _setup_plot(grid)
        link_count = _draw_links(ax, grid)
        ax.set_title(f"Maze Links ({link_count} Passages)")
        _save(fig, filename)
        print(f"  Links visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")


def visualize_maze_connectivity(
    grid: Grid, root: Coordinate = (0, 0), filename="maze_connectivity.png"
):
    """Visualizes cell connectivity and distance from the root cell."""
    print(f"--- Generating Connectivity Visualization: {filename} ---")
    distances = compute_distances(grid, root)
    visited_count = len(distances)
    _, max_distance = distances.max()

    print(f"  Connectivity check visited {visited_count}/{grid.size()} cells.")
    if visited_count < grid.size():
        print("  WARNING: Not all cells are reachable from the root!")

    try:
        fig, ax = _setup_plot(grid)
        cmap = matplotlib.colormaps[const.VIS_CONN_COLORMAP].copy()
        cmap.set_bad(const.VIS_CONN_UNREACHABLE_COLOR)
        norm = mcolors.Normalize(vmin=0, vmax=max(1, max_distance))

        values = np.ma.masked_less(distances.to_array(), 0)
        size = const.DEFAULT_CELL_SIZE
        image = ax.imshow(
            values,
            cmap=cmap,
            norm=norm,
            extent=(0, grid.columns * size, -grid.rows * size, 0),
            interpolation="nearest",
        )
        _draw_walls(ax, grid)

        cbar = plt.colorbar(image, ax=ax, shrink=0.7, aspect=20, pad=0.08)
        cbar.set_label(f"Distance from Root Cell {root}")
        if visited_count < grid.size():
            cbar.ax.set_title("Grey = Unreachable Cells", fontsize=8, color="red")

        ax.set_title(f"Maze Connectivity ({visited_count}/{grid.size()} Reachable)")
        _save(fig, filename)
        print(f"  Connectivity visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")


def visualize_maze_solution(
    grid: Grid,
    start: Coordinate,
    goal: Coordinate,
    filename="maze_solution.png",
) -> Optional[List[Coordinate]]:
    """Finds and visualizes the shortest path from start to goal."""
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    solution_path = path_to(compute_distances(grid, start), goal)
    if not solution_path:
        print("  Could not find solution path, cannot visualize.")
        return None

    try:
        fig, ax = _setup_plot(grid)
        _draw_walls(ax, grid)

        print(f"  Visualizing solution path ({len(solution_path)} cells)...")
        centers = np.array([cell_center(*coords) for coords in solution_path])
        ax.plot(centers[:, 0], centers[:, 1],
                const.VIS_SOLUTION_LINE_STYLE,
                lw=const.VIS_SOLUTION_LINE_LW,
                alpha=const.VIS_SOLUTION_LINE_ALPHA)
        _draw_entry_exit(ax, start, goal)

        ax.set_title("Maze Solution Path")
        _save(fig, filename)
        print(f"  Solution visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")
    return solution_path
