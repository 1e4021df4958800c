import numpy as np
import pytest

import constants as const
from grid_core import MazeError, OutOfBounds, new_grid
from lee_solver import UnreachableExit, backtrace, expand_wavefront, overlay_path, solve
from maze_gen import create_maze, generate_maze
from utils import bfs_distances


def _assert_valid_path(grid, overlay, start, exit_cell):
    path = overlay_path(grid, overlay, start, exit_cell)
    assert path[0] == tuple(start)
    assert path[-1] == tuple(exit_cell)
    assert len(path) == int(overlay.sum())
    for a, b in zip(path, path[1:]):
        assert not grid.wall_towards(a, b)
        assert not grid.wall_towards(b, a)
    return path


def test_demo_maze_example():
    grid = generate_maze(5, 5, 1234)
    solution = solve(grid, (0, 0), (2, 4))
    assert 1 <= solution.steps <= 25
    assert solution.overlay[0, 0] == 1
    assert solution.overlay[2, 4] == 1
    path = _assert_valid_path(grid, solution.overlay, (0, 0), (2, 4))
    labels = [solution.step_grid[p] for p in path]
    assert labels == list(range(1, len(path) + 1))


def test_exit_defaults_to_marked_exit():
    grid = create_maze(5, 5, 1234)
    explicit = solve(grid, (0, 0), (2, 4))
    implicit = solve(grid, (0, 0))
    assert np.array_equal(explicit.overlay, implicit.overlay)
    assert explicit.steps == implicit.steps


@pytest.mark.parametrize("width, height, seed", [(5, 5, 1234), (8, 6, 1), (1, 9, 4), (9, 1, 4), (15, 15, 77)])
def test_matches_independent_bfs(width, height, seed):
    grid = generate_maze(width, height, seed)
    corners = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1), (width // 2, height // 2)]
    for start in corners:
        distances = bfs_distances(grid, start)
        for exit_cell in corners:
            solution = solve(grid, start, exit_cell)
            distance = int(distances[exit_cell])
            assert int(solution.overlay.sum()) == distance + 1
            assert solution.steps == max(distance, 1)
            assert solution.steps <= grid.size()
            _assert_valid_path(grid, solution.overlay, start, exit_cell)

            labelled = solution.step_grid > 0
            assert np.array_equal(solution.step_grid[labelled], distances[labelled] + 1)


def test_overlay_is_binary_and_shaped_like_grid():
    grid = generate_maze(7, 4, 2)
    solution = solve(grid, (0, 0), (6, 3))
    assert solution.overlay.shape == (7, 4)
    assert solution.step_grid.shape == (7, 4)
    assert set(np.unique(solution.overlay)) <= {0, 1}


def test_solve_is_idempotent_and_read_only():
    grid = create_maze(10, 10, 1234)
    walls = grid.wall_layout()
    first = solve(grid, (0, 0))
    second = solve(grid, (0, 0))
    assert np.array_equal(first.overlay, second.overlay)
    assert np.array_equal(first.step_grid, second.step_grid)
    assert first.steps == second.steps
    assert first.overlay is not second.overlay
    assert np.array_equal(walls, grid.wall_layout())


def test_start_equals_exit():
    grid = generate_maze(4, 4, 9)
    solution = solve(grid, (2, 1), (2, 1))
    assert solution.steps == 1
    assert int(solution.overlay.sum()) == 1
    assert solution.overlay[2, 1] == 1


def test_single_cell_maze():
    grid = create_maze(1, 1)
    solution = solve(grid, (0, 0))
    assert solution.steps == 1
    assert solution.overlay.tolist() == [[1]]


def test_corridor_maze():
    grid = generate_maze(1, 6, 11)
    solution = solve(grid, (0, 0), (0, 5))
    assert solution.steps == 5
    assert solution.overlay.tolist() == [[1, 1, 1, 1, 1, 1]]
    assert solution.step_grid.tolist() == [[1, 2, 3, 4, 5, 6]]


def test_tie_break_prefers_west(open_square):
    # Both (1, 0) and (0, 1) carry label 2; the back-trace looks west first
    solution = solve(open_square, (0, 0), (1, 1))
    assert solution.steps == 2
    assert solution.overlay.tolist() == [[1, 1], [0, 1]]


def test_tie_break_east_before_south():
    grid = new_grid(2, 2)
    grid.carve_passage((1, 1), (1, 0))
    grid.carve_passage((1, 1), (0, 1))
    grid.carve_passage((1, 0), (0, 0))
    grid.carve_passage((0, 1), (0, 0))
    # From the exit (0, 0) the neighbours east and south both carry label 2
    solution = solve(grid, (1, 1), (0, 0))
    assert solution.overlay.tolist() == [[1, 0], [1, 1]]


def test_unreachable_exit_on_closed_grid():
    grid = new_grid(3, 3)
    with pytest.raises(UnreachableExit):
        solve(grid, (0, 0), (2, 2))


def test_unreachable_exit_on_split_grid():
    grid = new_grid(4, 1)
    grid.carve_passage((0, 0), (1, 0))
    grid.carve_passage((2, 0), (3, 0))
    with pytest.raises(UnreachableExit) as exc_info:
        solve(grid, (0, 0), (3, 0))
    assert isinstance(exc_info.value, MazeError)
    assert isinstance(exc_info.value, RuntimeError)


def test_missing_exit():
    grid = generate_maze(3, 3, 1)
    with pytest.raises(MazeError):
        solve(grid, (0, 0))


def test_out_of_bounds_endpoints():
    grid = generate_maze(3, 3, 1)
    with pytest.raises(OutOfBounds):
        solve(grid, (3, 0), (0, 0))
    with pytest.raises(OutOfBounds):
        solve(grid, (0, 0), (0, -1))


def test_expand_then_backtrace():
    grid = generate_maze(6, 6, 5)
    step_grid, steps = expand_wavefront(grid, (0, 0), (5, 5))
    assert step_grid[5, 5] == steps + 1
    overlay = backtrace(grid, step_grid, (5, 5))
    assert overlay[0, 0] == 1 and overlay[5, 5] == 1
    assert int(overlay.sum()) == steps + 1


def test_backtrace_requires_labelled_exit():
    grid = generate_maze(3, 3, 1)
    with pytest.raises(UnreachableExit):
        backtrace(grid, np.zeros((3, 3), dtype=int), (2, 2))


def test_player_start_from_markers():
    grid = create_maze(9, 7, 31)
    start = grid.find_marker(const.MARKER_PLAYER1)
    solution = solve(grid, start)
    _assert_valid_path(grid, solution.overlay, start, grid.exit_cell)


def test_overlay_path_rejects_incomplete_overlay():
    grid = generate_maze(3, 3, 1)
    overlay = np.zeros((3, 3), dtype=np.uint8)
    overlay[0, 0] = 1
    with pytest.raises(ValueError):
        overlay_path(grid, overlay, (0, 0), (2, 2))


def test_exit_flag_set_on_cell_is_used():
    grid = generate_maze(3, 3, 1)
    grid.cells[2][2].is_exit = True
    solution = solve(grid, (0, 0))
    assert solution.overlay[2, 2] == 1
    _assert_valid_path(grid, solution.overlay, (0, 0), (2, 2))


def test_non_integer_start_rejected():
    grid = generate_maze(3, 3, 1)
    with pytest.raises(OutOfBounds):
        solve(grid, (0.7, 0), (2, 2))
