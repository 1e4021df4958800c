# text_display.py
import numpy as np
from typing import Optional

# Import from other project modules
import constants as const
from grid_core import MazeGrid


def _cell_body(grid: MazeGrid, x: int, y: int, overlay: Optional[np.ndarray]) -> str:
    cell = grid.cells[x][y]
    if cell.is_exit:
        return const.TXT_EXIT
    for marker in sorted(cell.markers):
        if marker in const.TXT_MARKER_LABELS:
            return const.TXT_MARKER_LABELS[marker]
    if overlay is not None and overlay[x, y]:
        return const.TXT_PATH
    return const.TXT_EMPTY


def render_maze(grid: MazeGrid, overlay: Optional[np.ndarray] = None) -> str:
    """
    Returns the ASCII drawing of the maze. Every row is drawn as a north edge
    line (corners and north walls) followed by a west edge line (west walls and
    cell contents); a closing border row ends the drawing.
    Unlike a bare corner row of `*` and three spaces per cell, the north edge
    line draws `---` under every north wall so passages can be read off it.
    """
    if overlay is not None and overlay.shape != (grid.width, grid.height):
        raise ValueError(
            f"Overlay shape {overlay.shape} does not match grid {grid.width}x{grid.height}."
        )

    lines = []
    for y in range(grid.height):
        # North edge
        north = ""
        for x in range(grid.width):
            wall = grid.cells[x][y].wall_north
            north += const.TXT_CORNER + (const.TXT_HWALL if wall else const.TXT_HOPEN)
        lines.append(north + const.TXT_CORNER)

        # West edge and contents
        west = ""
        for x in range(grid.width):
            wall = grid.cells[x][y].wall_west
            west += (const.TXT_VWALL if wall else const.TXT_VOPEN) + _cell_body(grid, x, y, overlay)
        east_wall = grid.cells[grid.width - 1][y].wall_east
        lines.append(west + (const.TXT_VWALL if east_wall else const.TXT_VOPEN))

    # Bottom line
    lines.append((const.TXT_CORNER + const.TXT_HWALL) * grid.width + const.TXT_CORNER)
    return "\n".join(lines) + "\n"


def render_solution(overlay: np.ndarray) -> str:
    """Numeric dump of an overlay (or step grid), one line per maze row."""
    width, height = overlay.shape
    lines = []
    for y in range(height):
        lines.append(const.TXT_SOLUTION_SEPARATOR.join(str(int(overlay[x, y])) for x in range(width)))
    return "\n".join(lines) + "\n"


def display_maze(grid: MazeGrid, overlay: Optional[np.ndarray] = None):
    """Prints the maze on the console."""
    print(render_maze(grid, overlay), end="")


def display_solution(overlay: np.ndarray):
    """Prints the overlay on the console for control."""
    print(render_solution(overlay), end="")
