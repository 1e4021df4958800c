# geometry.py
from typing import List, Tuple

# Import from other project modules
from grid_core import MazeGrid

Point2D = Tuple[float, float]
Segment2D = Tuple[Point2D, Point2D]


def extract_wall_segments(grid: MazeGrid) -> List[Segment2D]:
    """
    Extracts 2D wall CENTERLINE segments in cell units, ((x1, y1), (x2, y2))
    with y growing southwards. Each cell contributes its north and west walls;
    the last row adds south walls and the last column adds east walls, so
    every shared wall appears exactly once.
    """
    wall_segments: List[Segment2D] = []
    for cell in grid.get_all_cells():
        x, y = cell.x, cell.y
        if cell.wall_north:
            wall_segments.append(((x, y), (x + 1, y)))
        if cell.wall_west:
            wall_segments.append(((x, y), (x, y + 1)))
        if y == grid.height - 1 and cell.wall_south:
            wall_segments.append(((x, y + 1), (x + 1, y + 1)))
        if x == grid.width - 1 and cell.wall_east:
            wall_segments.append(((x + 1, y), (x + 1, y + 1)))
    return wall_segments


def extract_wall_bases_2d(
    grid: MazeGrid, wall_thickness: float, cell_size: float
) -> List[Tuple[Point2D, Point2D, Point2D, Point2D]]:
    """
    Turns every wall centerline into a rectangular base polygon (4 vertices,
    counter-clockwise) in world units with y pointing north. Bases are
    lengthened by half a thickness at both ends so corners close up.
    """
    if wall_thickness <= 0 or cell_size <= 0:
        raise ValueError("Wall thickness and cell size must be positive.")

    half = wall_thickness / 2.0
    bases = []
    for (x1, y1), (x2, y2) in extract_wall_segments(grid):
        # Flip rows so the north edge ends up at the top
        wx1, wx2 = sorted((x1 * cell_size, x2 * cell_size))
        wy1, wy2 = sorted(((grid.height - y1) * cell_size, (grid.height - y2) * cell_size))
        x_min, x_max = wx1 - half, wx2 + half
        y_min, y_max = wy1 - half, wy2 + half
        bases.append(((x_min, y_min), (x_max, y_min), (x_max, y_max), (x_min, y_max)))
    return bases
