import numpy as np
import pytest

from lee_solver import solve
from maze_gen import create_maze
from visualization import visualize_maze, visualize_wavefront


def test_visualize_maze_with_solution(tmp_path):
    grid = create_maze(6, 5, 1234)
    solution = solve(grid, (0, 0))
    filename = tmp_path / "maze.png"
    assert visualize_maze(grid, solution.overlay, "solved", str(filename)) == str(filename)
    assert filename.stat().st_size > 0


def test_visualize_maze_without_overlay(tmp_path):
    grid = create_maze(3, 3, 1)
    filename = tmp_path / "plain.png"
    visualize_maze(grid, message=None, filename=str(filename))
    assert filename.exists()


def test_visualize_wavefront(tmp_path):
    grid = create_maze(8, 8, 2)
    solution = solve(grid, (0, 0))
    filename = tmp_path / "wave.png"
    visualize_wavefront(grid, solution.step_grid, str(filename))
    assert filename.exists()


def test_mismatched_overlay_is_rejected(tmp_path):
    grid = create_maze(3, 3, 1)
    with pytest.raises(ValueError):
        visualize_maze(grid, np.zeros((4, 4)), filename=str(tmp_path / "bad.png"))
    with pytest.raises(ValueError):
        visualize_wavefront(grid, np.zeros((3, 2)), str(tmp_path / "bad_wave.png"))


def test_wavefront_emits_no_deprecation_warning(tmp_path, recwarn):
    grid = create_maze(4, 4, 3)
    solution = solve(grid, (0, 0))
    visualize_wavefront(grid, solution.step_grid, str(tmp_path / "wave.png"))
    deprecations = [w for w in recwarn if issubclass(w.category, (DeprecationWarning, PendingDeprecationWarning))]
    assert not [w for w in deprecations if w.filename.endswith("visualization.py")]
