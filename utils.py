# utils.py
import numpy as np
from collections import deque

from grid_core import EAST, SOUTH, Coord, MazeGrid


def bfs_distances(grid: MazeGrid, start: Coord) -> np.ndarray:
    """
    Breadth-First Search over open passages. Returns a (width, height) array
    of hop counts from start, -1 for cells that cannot be reached.
    """
    start = grid.check_bounds(start)
    distances = np.full((grid.width, grid.height), -1, dtype=np.int64)
    distances[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for _, neighbour in grid.passable_neighbours(current):
            if distances[neighbour] == -1:  # Not visited yet
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)

    return distances


def count_passages(grid: MazeGrid) -> int:
    """Counts open walls between adjacent cells (each pair counted once)."""
    passages = 0
    for cell in grid.get_all_cells():
        # Only look east and south so every pair is seen a single time
        if cell.x + 1 < grid.width and not cell.has_wall(EAST):
            passages += 1
        if cell.y + 1 < grid.height and not cell.has_wall(SOUTH):
            passages += 1
    return passages


def walls_consistent(grid: MazeGrid) -> bool:
    """Checks that every shared wall is seen identically from both sides."""
    for cell in grid.get_all_cells():
        for direction in (EAST, SOUTH):
            other = grid.neighbour(cell.coords, direction)
            if other is None:
                continue
            if cell.has_wall(direction) != grid.get_cell(other).has_wall(direction.opposite):
                return False
    return True


def is_perfect_maze(grid: MazeGrid) -> bool:
    """Connected, acyclic and wall-consistent: a spanning tree of the cells."""
    if not walls_consistent(grid):
        return False
    if count_passages(grid) != grid.size() - 1:
        return False
    return bool(np.all(bfs_distances(grid, (0, 0)) >= 0))
