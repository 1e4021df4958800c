# maze_gen.py
import random
import numpy as np
from typing import List, Optional, Tuple

# Import from other project modules
import constants as const
from grid_core import DIRECTIONS, Coord, Direction, MazeGrid, new_grid


def generate_maze(width: int, height: int, seed: int = const.DEFAULT_SEED) -> MazeGrid:
    """
    Generates a perfect maze using the Recursive Backtracking algorithm.

    Carving starts at (0, 0). Each cell shuffles the four directions once, on
    entry, with a single random.Random seeded from `seed`; the depth-first
    descent is kept on an explicit stack of (cell, remaining directions) so
    large grids do not run into the recursion limit. The same (width, height,
    seed) always produces the same walls.
    """
    grid = new_grid(width, height)
    if const.VERBOSE:
        print(
            f"--- Starting Maze Generation (Recursive Backtracking, {width}x{height}, seed={seed}) ---"
        )

    rnd = random.Random(seed)
    visited = np.zeros((grid.width, grid.height), dtype=bool)

    def shuffled_directions() -> List[Direction]:
        dirs = list(DIRECTIONS)
        rnd.shuffle(dirs)
        return dirs

    start: Coord = (0, 0)
    visited[start] = True
    stack: List[Tuple[Coord, List[Direction]]] = [(start, shuffled_directions())]
    carved = 0

    while stack:
        current, remaining = stack[-1]
        if not remaining:
            # All directions tried, backtrack
            stack.pop()
            continue

        direction = remaining.pop(0)
        nx, ny = direction.step(current)
        if grid.in_bounds((nx, ny)) and not visited[nx, ny]:
            grid.carve_passage(current, (nx, ny))
            visited[nx, ny] = True
            carved += 1
            stack.append(((nx, ny), shuffled_directions()))

    if const.VERBOSE:
        print(f"--- Maze Generation Complete: Carved {carved} passages over {grid.size()} cells. ---")
    return grid


def place_initial_markers(
    grid: MazeGrid, fixed: bool = True, rng: Optional[random.Random] = None
):
    """
    Places player1 and the exit.
    fixed: player1 top left. Otherwise player1 on a random row of column 0.
    In both cases the exit sits at the bottom row, middle column.
    """
    grid.clear_markers()
    if fixed:
        grid.place_marker(const.MARKER_PLAYER1, (0, 0))
    else:
        rng = rng or random.Random()
        grid.place_marker(const.MARKER_PLAYER1, (0, rng.randrange(grid.height)))
    grid.set_exit(((grid.width - 1) // 2, grid.height - 1))
    if const.VERBOSE:
        print(
            f"  Player1 set to: {grid.find_marker(const.MARKER_PLAYER1)}, exit set to: {grid.exit_cell}"
        )


def create_maze(
    width: int,
    height: int,
    seed: int = const.DEFAULT_SEED,
    fixed_positions: bool = True,
) -> MazeGrid:
    """Generates a maze and places the initial markers on it."""
    grid = generate_maze(width, height, seed)
    place_initial_markers(grid, fixed=fixed_positions)
    return grid
