# main.py
import argparse
import os
import sys
import time

# Import project modules
import constants as const
from grid_core import MazeError
from maze_gen import create_maze
from lee_solver import solve
from text_display import display_maze, display_solution
from visualization import visualize_maze, visualize_wavefront
from mesh_builder import create_maze_stl


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a rectangular perfect maze and solve it with the Lee algorithm."
    )
    parser.add_argument("--width", type=int, default=const.DEFAULT_WIDTH, help="number of columns")
    parser.add_argument("--height", type=int, default=const.DEFAULT_HEIGHT, help="number of rows")
    parser.add_argument("--seed", type=int, default=const.DEFAULT_SEED, help="maze ID")
    parser.add_argument(
        "--random-start",
        action="store_true",
        help="place player1 on a random row of the first column",
    )
    parser.add_argument("--output-dir", default="output", help="where PNG/STL files go")
    parser.add_argument("--png", action="store_true", help="write maze and wavefront PNGs")
    parser.add_argument("--stl", action="store_true", help="write a printable STL model")
    parser.add_argument("--quiet", action="store_true", help="only print the maze drawings")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    start_time = time.time()
    if args.quiet:
        const.VERBOSE = False

    if const.VERBOSE:
        print("\n--- Configuration ---")
        print(f"  Size: {args.width}x{args.height}, Seed: {args.seed}, Random start: {args.random_start}")

    try:
        grid = create_maze(args.width, args.height, args.seed, fixed_positions=not args.random_start)
        start = grid.find_marker(const.MARKER_PLAYER1)
        solution = solve(grid, start)
    except MazeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    display_maze(grid)
    print()
    display_solution(solution.overlay)
    print()
    display_maze(grid, solution.overlay)

    if args.png or args.stl:
        os.makedirs(args.output_dir, exist_ok=True)
    if args.png:
        visualize_maze(
            grid,
            solution.overlay,
            message=f"Maze #{args.seed}: solved in {solution.steps} steps",
            filename=os.path.join(args.output_dir, "maze_solution.png"),
        )
        visualize_wavefront(
            grid, solution.step_grid, filename=os.path.join(args.output_dir, "maze_wavefront.png")
        )
    if args.stl:
        create_maze_stl(grid, os.path.join(args.output_dir, "maze.stl"))

    if const.VERBOSE:
        print(f"\n--- Total Execution Time: {time.time() - start_time:.2f} seconds ---")
    return 0


def main(argv=None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
