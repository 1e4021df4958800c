# visualization.py
import matplotlib
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors
import matplotlib.patches as mpatches
import numpy as np
from typing import Optional, Tuple

# Import from other project modules
from grid_core import MazeGrid
from geometry import extract_wall_segments
import constants as const


# --- Visualization Helpers ---
def _setup_plot(grid: MazeGrid) -> Tuple[plt.Figure, plt.Axes]:
    """Creates an axis in cell units with row 0 at the top."""
    scale = min(
        const.VIS_CELL_SIZE_INCHES,
        const.VIS_MAX_FIG_INCHES / max(grid.width, grid.height),
    )
    fig, ax = plt.subplots(figsize=(max(2.0, grid.width * scale), max(2.0, grid.height * scale)))
    ax.set_xlim(-0.25, grid.width + 0.25)
    ax.set_ylim(grid.height + 0.25, -0.25)  # Inverted: north edge on top
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _check_shape(grid: MazeGrid, array: np.ndarray, what: str):
    if array.shape != (grid.width, grid.height):
        raise ValueError(
            f"{what} shape {array.shape} does not match grid {grid.width}x{grid.height}."
        )


def _draw_solution(ax: plt.Axes, overlay: np.ndarray):
    """Fills every cell marked in the overlay."""
    xs, ys = np.nonzero(overlay)
    for x, y in zip(xs, ys):
        ax.add_patch(
            mpatches.Rectangle((x, y), 1, 1, facecolor=const.VIS_SOLUTION_COLOR, edgecolor="none")
        )
    return len(xs)


def _draw_walls(ax: plt.Axes, grid: MazeGrid):
    wall_segments = extract_wall_segments(grid)
    if const.VERBOSE:
        print(f"  Visualizing {len(wall_segments)} wall segments...")
    for (x1, y1), (x2, y2) in wall_segments:
        ax.plot(
            [x1, x2],
            [y1, y2],
            const.VIS_WALL_LINE_STYLE,
            lw=const.VIS_WALL_LINE_LW,
            alpha=const.VIS_WALL_LINE_ALPHA,
            solid_capstyle="projecting",
        )


def _draw_exit_and_markers(ax: plt.Axes, grid: MazeGrid):
    """Exit as a filled square, markers as circles."""
    if grid.exit_cell:
        x, y = grid.exit_cell
        inset = (1 - const.VIS_MARKER_SIZE_RATIO) / 2
        ax.add_patch(
            mpatches.Rectangle(
                (x + inset, y + inset),
                const.VIS_MARKER_SIZE_RATIO,
                const.VIS_MARKER_SIZE_RATIO,
                facecolor=const.VIS_EXIT_COLOR,
                edgecolor="none",
                label="Exit",
            )
        )
    for cell in grid.get_all_cells():
        for marker in sorted(cell.markers):
            ax.add_patch(
                mpatches.Circle(
                    (cell.x + 0.5, cell.y + 0.5),
                    const.VIS_MARKER_SIZE_RATIO / 2,
                    facecolor=const.VIS_MARKER_COLORS.get(marker, "orange"),
                    edgecolor=const.VIS_MARKER_EDGE_COLOR,
                    lw=1.0,
                    label=marker,
                )
            )


# --- Main Visualization Functions ---

def visualize_maze(
    grid: MazeGrid,
    overlay: Optional[np.ndarray] = None,
    message: Optional[str] = const.VIS_DEFAULT_MESSAGE,
    filename: str = "maze.png",
) -> str:
    """
    Renders the maze walls, exit and markers, plus the solution overlay when
    one is given. The message is shown as the title.
    """
    if const.VERBOSE:
        print(f"--- Generating Maze Visualization: {filename} ---")
    fig, ax = _setup_plot(grid)
    try:
        if overlay is not None:
            _check_shape(grid, overlay, "Overlay")
            count = _draw_solution(ax, overlay)
            if const.VERBOSE:
                print(f"  Visualizing solution overlay ({count} cells)...")
        _draw_walls(ax, grid)
        _draw_exit_and_markers(ax, grid)
        if message:
            ax.set_title(message)
        fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    if const.VERBOSE:
        print(f"  Maze visualization saved to {filename}")
    return filename


def visualize_wavefront(
    grid: MazeGrid, step_grid: np.ndarray, filename: str = "maze_wavefront.png"
) -> str:
    """Colors every cell by its wavefront label; unreached cells stay grey."""
    if const.VERBOSE:
        print(f"--- Generating Wavefront Visualization: {filename} ---")
    _check_shape(grid, step_grid, "Step grid")
    reached = step_grid > 0
    max_label = int(step_grid.max()) if reached.any() else 1

    fig, ax = _setup_plot(grid)
    try:
        cmap = matplotlib.colormaps[const.VIS_WAVEFRONT_CMAP].with_extremes(
            bad=const.VIS_UNREACHED_COLOR
        )
        norm = mcolors.Normalize(vmin=1, vmax=max(2, max_label))
        labels = np.ma.masked_where(~reached, step_grid).T  # imshow wants rows first
        image = ax.imshow(
            labels,
            cmap=cmap,
            norm=norm,
            extent=(0, grid.width, grid.height, 0),
            interpolation="nearest",
        )
        _draw_walls(ax, grid)
        cbar = fig.colorbar(image, ax=ax, shrink=0.7, aspect=20, pad=0.04)
        cbar.set_label("Wavefront label (start = 1)")
        ax.set_title(f"Wavefront ({int(reached.sum())}/{grid.size()} Reached)")
        fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    if const.VERBOSE:
        print(f"  Wavefront visualization saved to {filename}")
    return filename
