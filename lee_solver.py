# lee_solver.py
import numpy as np
from typing import List, NamedTuple, Optional, Tuple

# Import from other project modules
import constants as const
from grid_core import EAST, NORTH, SOUTH, WEST, Coord, MazeError, MazeGrid

# Fixed preference when several neighbours carry the previous label
BACKTRACE_ORDER = (WEST, NORTH, EAST, SOUTH)


class UnreachableExit(MazeError, RuntimeError):
    """Raised when the wavefront cannot reach the exit (disconnected grid)."""


class Solution(NamedTuple):
    overlay: np.ndarray  # (width, height) uint8, 1 on the path
    step_grid: np.ndarray  # (width, height) int, 0 = unreached, start = 1
    steps: int  # Number of wavefront iterations


def expand_wavefront(grid: MazeGrid, start: Coord, exit_cell: Coord) -> Tuple[np.ndarray, int]:
    """
    Lee forward propagation.

    Labels start with 1; iteration m labels every unlabelled, passable
    neighbour of the cells labelled m with m + 1, and the expansion stops
    after the first iteration that leaves the exit labelled. Returns the
    label grid and the number of iterations performed.
    """
    start = grid.check_bounds(start)
    exit_cell = grid.check_bounds(exit_cell)

    step_grid = np.zeros((grid.width, grid.height), dtype=np.int64)
    step_grid[start] = 1
    frontier: List[Coord] = [start]  # Cells labelled exactly m
    max_steps = grid.size()

    m = 1
    while True:
        next_frontier: List[Coord] = []
        for coord in frontier:
            for _, neighbour in grid.passable_neighbours(coord):
                if step_grid[neighbour] == 0:
                    step_grid[neighbour] = m + 1
                    next_frontier.append(neighbour)

        if step_grid[exit_cell] != 0:
            return step_grid, m

        if not next_frontier or m >= max_steps:
            raise UnreachableExit(
                f"Exit {exit_cell} not reached from {start} after {m} wavefront iterations."
            )
        frontier = next_frontier
        m += 1


def backtrace(grid: MazeGrid, step_grid: np.ndarray, exit_cell: Coord) -> np.ndarray:
    """
    Lee back-trace phase: walks from the exit down the labels to the start,
    marking each visited cell with 1 in a fresh overlay.
    """
    x, y = grid.check_bounds(exit_cell)
    label = int(step_grid[x, y])
    if label <= 0:
        raise UnreachableExit(f"Exit {exit_cell} carries no wavefront label.")

    overlay = np.zeros((grid.width, grid.height), dtype=np.uint8)
    overlay[x, y] = 1

    while label > 1:
        for direction in BACKTRACE_ORDER:
            nx, ny = direction.step((x, y))
            if (
                grid.in_bounds((nx, ny))
                and not grid.wall_between((x, y), direction)
                and step_grid[nx, ny] == label - 1
                and overlay[nx, ny] == 0
            ):
                x, y = nx, ny
                break
        else:
            raise UnreachableExit(
                f"Back-trace stuck at {(x, y)} with label {label}; labels are inconsistent."
            )
        overlay[x, y] = 1
        label -= 1

    return overlay


def solve(grid: MazeGrid, start: Coord, exit_cell: Optional[Coord] = None) -> Solution:
    """
    Solves the maze from `start` to `exit_cell` (defaults to the grid's exit).
    The grid is only read; every call returns fresh arrays.
    """
    if exit_cell is None:
        exit_cell = grid.exit_cell
        if exit_cell is None:
            raise MazeError("No exit cell given and none marked on the grid.")

    if const.VERBOSE:
        print(f"--- Solving maze from {tuple(start)} to {tuple(exit_cell)} (Lee wavefront) ---")
    step_grid, steps = expand_wavefront(grid, start, exit_cell)
    if const.VERBOSE:
        print(f"  [Lee solver] Took {steps} steps for the solution")

    overlay = backtrace(grid, step_grid, exit_cell)
    if const.VERBOSE:
        print(f"  Path length: {int(overlay.sum())} cells.")
    return Solution(overlay, step_grid, steps)


def overlay_path(grid: MazeGrid, overlay: np.ndarray, start: Coord, exit_cell: Coord) -> List[Coord]:
    """Returns the overlay cells as an ordered walk from start to exit."""
    start = grid.check_bounds(start)
    exit_cell = grid.check_bounds(exit_cell)
    if not overlay[start] or not overlay[exit_cell]:
        raise ValueError("Overlay does not contain both start and exit.")

    path = [start]
    previous: Optional[Coord] = None
    current = start
    while current != exit_cell:
        step = next(
            (
                n
                for _, n in grid.passable_neighbours(current)
                if overlay[n] and n != previous
            ),
            None,
        )
        if step is None:
            raise ValueError(f"Overlay path is broken at {current}.")
        previous, current = current, step
        path.append(current)
        if len(path) > int(overlay.sum()):
            raise ValueError("Overlay path loops back on itself.")
    return path
