# main.py
import argparse
import os
import time
import traceback
from typing import Optional, Sequence

# Import project modules
import constants as const
from grid_core import Grid, InvalidDimensions
from maze_gen import Algorithm, generate_maze
from distances import compute_distances
from display import (
    colored_distance_content,
    distance_content,
    path_content,
    render_grid,
)
from utils import dead_ends, farthest_pair, is_perfect_maze, make_rng
from mesh_builder import create_2d_maze_stl
from visualization import (
    visualize_maze_connectivity,
    visualize_maze_links,
    visualize_maze_solution,
    visualize_maze_walls,
)

ASCII_MODES = ("none", "plain", "distances", "path", "color")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and analyse a rectangular maze")
    parser.add_argument("rows", type=int, nargs="?", default=const.DEFAULT_ROWS, help="Number of rows")
    parser.add_argument("columns", type=int, nargs="?", default=const.DEFAULT_COLUMNS, help="Number of columns")
    parser.add_argument(
        "--algorithm",
        default=const.DEFAULT_ALGORITHM,
        choices=[algorithm.value for algorithm in Algorithm],
        help="Maze generation algorithm",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--ascii",
        default="plain",
        choices=ASCII_MODES,
        help="Text rendering printed after generation",
    )
    parser.add_argument("--output-dir", default="output", help="Directory for images and STL")
    parser.add_argument("--images", action="store_true", help="Save matplotlib images")
    parser.add_argument("--stl", action="store_true", help="Export a printable STL")
    return parser.parse_args(argv)


def render_ascii(grid: Grid, mode: str) -> str:
    """Text picture of the maze for one of the ASCII_MODES."""
    if mode == "plain":
        return render_grid(grid)

    distances = compute_distances(grid, (0, 0))
    if mode == "distances":
        return render_grid(grid, distance_content(distances))
    if mode == "color":
        return render_grid(grid, colored_distance_content(distances))
    if mode == "path":
        goal = (grid.rows - 1, 0)
        breadcrumbs = distances.path_distances(goal)
        if breadcrumbs is None:
            print(f"WARNING: No path from (0, 0) to {goal}.")
            return render_grid(grid)
        return render_grid(grid, path_content(breadcrumbs))
    raise ValueError(f"Unknown ASCII mode: {mode!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    start_time = time.time()

    print("\n--- Configuration ---")
    print(f"  Rows/Columns: {args.rows}/{args.columns}, Algorithm: {args.algorithm}, Seed: {args.seed}")

    try:
        grid = Grid(args.rows, args.columns)
    except InvalidDimensions as e:
        print(f"ERROR: {e}")
        return 2

    generate_maze(grid, Algorithm.from_name(args.algorithm), rng=make_rng(args.seed))
    if not is_perfect_maze(grid):
        print("ERROR: Generated passages do not form a perfect maze.")
        return 1

    if args.ascii != "none":
        print(render_ascii(grid, args.ascii))

    start, goal, longest = farthest_pair(grid)
    print(f"  Dead ends: {len(dead_ends(grid))}/{grid.size()}")
    print(f"  Longest path: {start} -> {goal} ({longest} passages)")

    if args.images or args.stl:
        os.makedirs(args.output_dir, exist_ok=True)

    if args.images:
        print("\n--- Generating Visualizations ---")
        try:
            visualize_maze_links(grid, filename=os.path.join(args.output_dir, "maze_links.png"))
            visualize_maze_walls(grid, filename=os.path.join(args.output_dir, "maze_walls.png"))
            visualize_maze_connectivity(
                grid, root=start, filename=os.path.join(args.output_dir, "maze_connectivity.png")
            )
            visualize_maze_solution(
                grid, start, goal, filename=os.path.join(args.output_dir, "maze_solution.png")
            )
        except Exception as e:
            print(f"An error occurred during visualization generation: {e}")

    if args.stl:
        print("\n--- Generating 2D Flat STL ---")
        try:
            create_2d_maze_stl(grid, os.path.join(args.output_dir, "maze_2d_flat.stl"))
        except Exception as e:
            print(f"An error occurred during 2D STL generation: {e}")
            traceback.print_exc()
            return 1

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
