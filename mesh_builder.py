# mesh_builder.py

import numpy as np
import trimesh
from typing import List, Tuple

import constants as const

# Import from other project modules
from grid_core import MazeGrid
from geometry import extract_wall_bases_2d

import trimesh.creation
import trimesh.transformations
import trimesh.util


def _create_extruded_prism_simple(
    base_verts_2d: Tuple[Tuple[float, float], ...],
    height: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Extrudes a counter-clockwise quad from z=0 up to z=height."""
    if len(base_verts_2d) != 4:
        raise ValueError(f"Expected a quad, got {len(base_verts_2d)} vertices.")
    base_verts = np.array([[vx, vy, 0.0] for vx, vy in base_verts_2d])
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


def _create_base_slab(
    grid: MazeGrid, cell_size: float, wall_thickness: float, base_height: float
) -> trimesh.Trimesh:
    """Solid slab under the whole maze, top face at z=0."""
    extent_x = grid.width * cell_size + wall_thickness
    extent_y = grid.height * cell_size + wall_thickness
    center = [grid.width * cell_size / 2.0, grid.height * cell_size / 2.0, -base_height / 2.0]
    return trimesh.creation.box(
        extents=[extent_x, extent_y, base_height],
        transform=trimesh.transformations.translation_matrix(center),
    )


def build_maze_mesh(
    grid: MazeGrid,
    cell_size: float = const.MAZE_3D_CELL_SIZE,
    wall_thickness: float = const.MAZE_3D_WALL_THICKNESS,
    wall_height: float = const.MAZE_3D_WALL_HEIGHT,
    base_height: float = const.MAZE_3D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """
    Builds a printable mesh of the maze: one extruded prism per wall segment
    standing on a rectangular base (skipped when base_height is 0).
    """
    if wall_height <= 0:
        raise ValueError("Wall height must be positive.")
    if base_height < 0:
        raise ValueError("Base height cannot be negative.")

    if const.VERBOSE:
        print(f"--- Building Maze Mesh ({grid.width}x{grid.height}) ---")
        print(
            f"    Wall H={wall_height:.2f}, Base H={base_height:.2f}, Total H={wall_height + base_height:.2f}"
        )

    wall_bases = extract_wall_bases_2d(grid, wall_thickness, cell_size)
    all_meshes: List[trimesh.Trimesh] = []
    for base_verts_2d in wall_bases:
        verts, faces = _create_extruded_prism_simple(base_verts_2d, wall_height)
        all_meshes.append(trimesh.Trimesh(vertices=verts, faces=faces, process=False))

    if base_height > 0:
        all_meshes.append(_create_base_slab(grid, cell_size, wall_thickness, base_height))

    if const.VERBOSE:
        print(f"  Combining {len(wall_bases)} wall prisms{' and base' if base_height > 0 else ''}...")
    final_mesh = trimesh.util.concatenate(all_meshes)
    final_mesh.merge_vertices()
    if const.VERBOSE:
        print(f"    Maze mesh: {len(final_mesh.vertices)}V, {len(final_mesh.faces)}F")
    return final_mesh


def create_maze_stl(
    grid: MazeGrid,
    output_filename: str,
    cell_size: float = const.MAZE_3D_CELL_SIZE,
    wall_thickness: float = const.MAZE_3D_WALL_THICKNESS,
    wall_height: float = const.MAZE_3D_WALL_HEIGHT,
    base_height: float = const.MAZE_3D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """Builds the maze mesh and exports it as an STL file."""
    final_mesh = build_maze_mesh(grid, cell_size, wall_thickness, wall_height, base_height)
    if const.VERBOSE:
        print(f"  Exporting maze to {output_filename}...")
    final_mesh.export(output_filename)
    if const.VERBOSE:
        print("  Export complete.")
    return final_mesh
