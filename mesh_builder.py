# mesh_builder.py
import numpy as np
import trimesh
from typing import List, Optional, Tuple

# Import from other project modules
import constants as const
from grid_core import Grid
from geometry import extract_wall_bases_2d

import trimesh.creation
import trimesh.util


def _is_mesh_degenerate(vertices: np.ndarray) -> bool:
    """Checks whether all vertices collapse onto (nearly) the same point."""
    if vertices is None or len(vertices) < 3:
        return True
    spread = vertices - vertices[0]
    return bool(np.max(np.sum(spread * spread, axis=1)) < const.MESH_VERTEX_DISTANCE_TOLERANCE_SQ)


def _create_extruded_prism_simple(
    base_verts_2d: Tuple[Tuple[float, float], ...],
    height: float,
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Extrudes a counter-clockwise quad straight up from z=0."""
    if len(base_verts_2d) != 4:
        return None  # Expect quads
    base_verts = np.array([[x, y, 0.0] for x, y in base_verts_2d])
    top_verts = base_verts + np.array([0.0, 0.0, height])
    verts = np.vstack((base_verts, top_verts))  # 0-3 base, 4-7 top
    faces = np.array(
        [
            [0, 1, 5],
            [0, 5, 4],
            [1, 2, 6],
            [1, 6, 5],
            [2, 3, 7],
            [2, 7, 6],
            [3, 0, 4],
            [3, 4, 7],  # Sides
            [4, 5, 6],
            [4, 6, 7],  # Top cap
            [3, 2, 1],
            [3, 1, 0],  # Bottom cap (reversed)
        ],
        dtype=np.int32,
    )
    return verts, faces


def create_maze_mesh(
    grid: Grid,
    cell_size: float = const.DEFAULT_CELL_SIZE,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """
    Builds a printable mesh of the maze: one extruded prism per wall base
    standing on a rectangular base plate that spans the whole grid.
    """
    print("--- Building Maze Mesh ---")
    print(
        f"    Wall H={wall_height:.2f}, Base H={base_height:.2f}, Total H={wall_height + base_height:.2f}"
    )
    if wall_height <= const.GEOMETRY_TOLERANCE:
        raise ValueError("Wall height must be positive.")

    wall_bases = extract_wall_bases_2d(grid, wall_thickness, cell_size)

    all_wall_meshes: List[trimesh.Trimesh] = []
    skipped = 0
    for base_verts_2d in wall_bases:
        extrusion_result = _create_extruded_prism_simple(base_verts_2d, wall_height)
        if extrusion_result is None or _is_mesh_degenerate(extrusion_result[0]):
            skipped += 1
            continue
        verts, faces = extrusion_result
        all_wall_meshes.append(trimesh.Trimesh(vertices=verts, faces=faces, process=False))

    print(f"  Wall Mesh Summary: Gen={len(all_wall_meshes)}, Skip={skipped}")

    meshes = list(all_wall_meshes)
    if base_height > const.GEOMETRY_TOLERANCE:
        width = grid.columns * cell_size + wall_thickness
        depth = grid.rows * cell_size + wall_thickness
        base_mesh = trimesh.creation.box(extents=[width, depth, base_height])
        base_mesh.apply_translation(
            [
                grid.columns * cell_size / 2.0,
                -grid.rows * cell_size / 2.0,
                -base_height / 2.0,
            ]
        )
        meshes.append(base_mesh)

    combined = trimesh.util.concatenate(meshes)
    combined.merge_vertices()
    combined.fix_normals()
    print(f"  Maze mesh ready ({len(combined.vertices)}V, {len(combined.faces)}F).")
    return combined


def create_2d_maze_stl(
    grid: Grid,
    output_filename: str,
    cell_size: float = const.DEFAULT_CELL_SIZE,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> bool:
    """Creates an STL file for the maze walls on a solid base plate."""
    print(f"\n--- Generating 2D Maze STL with Base: {output_filename} ---")
    mesh = create_maze_mesh(grid, cell_size, wall_thickness, wall_height, base_height)
    if len(mesh.faces) == 0:
        print("ERROR: Maze mesh invalid, nothing to export.")
        return False
    mesh.export(output_filename)
    print(f"  Exported maze STL to {output_filename}")
    return True
