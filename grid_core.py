# grid_core.py
import numpy as np
from typing import Dict, Iterator, List, NamedTuple, Optional, Set, Tuple

# Import from other project modules
import constants as const

Coord = Tuple[int, int]  # (x, y) == (column, row), row 0 is the north edge


# --- Errors ---
class MazeError(Exception):
    """Base class for all maze related errors."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class OutOfBounds(MazeError, IndexError):
    """Raised when a coordinate lies outside [0, width) x [0, height)."""


# --- Directions ---
class Direction(NamedTuple):
    """One of the four compass directions with its wall bit and unit offset."""

    name: str
    bit: int
    dx: int
    dy: int
    opposite_index: int

    @property
    def opposite(self) -> "Direction":
        return DIRECTIONS[self.opposite_index]

    def step(self, coord: Coord) -> Coord:
        """Returns the coordinate one cell away in this direction (unchecked)."""
        return coord[0] + self.dx, coord[1] + self.dy


NORTH = Direction("N", const.WALL_NORTH, 0, -1, 1)
SOUTH = Direction("S", const.WALL_SOUTH, 0, 1, 0)
EAST = Direction("E", const.WALL_EAST, 1, 0, 3)
WEST = Direction("W", const.WALL_WEST, -1, 0, 2)

# Order matters: the generator shuffles a copy of this tuple
DIRECTIONS: Tuple[Direction, ...] = (NORTH, SOUTH, EAST, WEST)
DIRECTIONS_BY_NAME: Dict[str, Direction] = {d.name: d for d in DIRECTIONS}


def direction_between(a: Coord, b: Coord) -> Direction:
    """Returns the direction leading from cell a to the adjacent cell b."""
    offset = (b[0] - a[0], b[1] - a[1])
    for direction in DIRECTIONS:
        if (direction.dx, direction.dy) == offset:
            return direction
    raise ValueError(f"Cells {a} and {b} are not orthogonally adjacent.")


class Cell:
    """Represents a single cell of the rectangular grid."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.coords: Coord = (x, y)
        self.walls: int = const.ALL_WALLS  # Bitmask, bit set = wall present
        self.is_exit: bool = False
        self.markers: Set[str] = set()  # e.g. player1 / player2

    def has_wall(self, direction: Direction) -> bool:
        return bool(self.walls & direction.bit)

    def remove_wall(self, direction: Direction):
        self.walls &= ~direction.bit

    def is_closed(self) -> bool:
        """True while all four walls are still present."""
        return self.walls == const.ALL_WALLS

    @property
    def wall_north(self) -> bool:
        return self.has_wall(NORTH)

    @property
    def wall_south(self) -> bool:
        return self.has_wall(SOUTH)

    @property
    def wall_east(self) -> bool:
        return self.has_wall(EAST)

    @property
    def wall_west(self) -> bool:
        return self.has_wall(WEST)

    def __repr__(self) -> str:
        return f"Cell({self.x},{self.y})"


class MazeGrid:
    """
    Rectangular grid of cells, width x height, addressed by (column, row).
    Walls are only changed through carve_passage, which keeps both sides of
    a shared wall consistent. Once the generator returns, walls are read-only;
    exit and markers are placement policy, stored only as flags on the cells.
    """

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensions(f"Grid {name} must be an integer, got {value!r}.")
            if value <= 0:
                raise InvalidDimensions(f"Grid {name} must be positive, got {value}.")

        self.width = int(width)
        self.height = int(height)
        # Indexed cells[x][y] to mirror the (column, row) addressing
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for y in range(self.height)] for x in range(self.width)
        ]

    # --- Addressing ---
    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, coord: Coord) -> Coord:
        for value in coord:
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise OutOfBounds(f"Cell coordinates must be integers, got {tuple(coord)}.")
        if not self.in_bounds(coord):
            raise OutOfBounds(
                f"Cell {tuple(coord)} outside grid [0,{self.width}) x [0,{self.height})."
            )
        return int(coord[0]), int(coord[1])

    def get_cell(self, coord: Coord) -> Cell:
        x, y = self.check_bounds(coord)
        return self.cells[x][y]

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.width * self.height

    def get_all_coords(self) -> Iterator[Coord]:
        """Yields every coordinate, row by row from the north edge."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def get_all_cells(self) -> Iterator[Cell]:
        for x, y in self.get_all_coords():
            yield self.cells[x][y]

    def neighbour(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """Returns the in-bounds neighbour in the given direction, or None."""
        self.check_bounds(coord)
        target = direction.step(coord)
        return target if self.in_bounds(target) else None

    # --- Walls ---
    def wall_between(self, coord: Coord, direction: Direction) -> bool:
        """True if the cell has a wall on its `direction` side."""
        return self.get_cell(coord).has_wall(direction)

    def wall_towards(self, a: Coord, b: Coord) -> bool:
        """True if cell a has a wall on the side facing the adjacent cell b."""
        self.check_bounds(b)
        return self.wall_between(a, direction_between(a, b))

    def carve_passage(self, a: Coord, b: Coord):
        """Removes the wall shared by adjacent cells a and b on both sides."""
        cell_a = self.get_cell(a)
        cell_b = self.get_cell(b)
        direction = direction_between(cell_a.coords, cell_b.coords)
        cell_a.remove_wall(direction)
        cell_b.remove_wall(direction.opposite)

    def passable_neighbours(self, coord: Coord) -> List[Tuple[Direction, Coord]]:
        """Neighbours reachable from coord through a non-walled side."""
        cell = self.get_cell(coord)
        result = []
        for direction in DIRECTIONS:
            if cell.has_wall(direction):
                continue
            target = direction.step(cell.coords)
            if self.in_bounds(target):
                result.append((direction, target))
        return result

    def wall_layout(self) -> np.ndarray:
        """Returns a (width, height) array of wall bitmasks."""
        layout = np.zeros((self.width, self.height), dtype=np.uint8)
        for cell in self.get_all_cells():
            layout[cell.x, cell.y] = cell.walls
        return layout

    # --- Exit & Markers ---
    def _flagged_exits(self) -> List[Coord]:
        return [cell.coords for cell in self.get_all_cells() if cell.is_exit]

    @property
    def exit_cell(self) -> Optional[Coord]:
        """The cell flagged with is_exit, None when no cell is flagged."""
        exits = self._flagged_exits()
        if len(exits) > 1:
            raise MazeError(f"Grid has more than one exit cell: {exits}.")
        return exits[0] if exits else None

    def set_exit(self, coord: Coord):
        """Marks coord as the (single) exit of the maze."""
        target = self.get_cell(coord)
        for cell in self.get_all_cells():
            cell.is_exit = False
        target.is_exit = True

    def place_marker(self, marker: str, coord: Coord):
        """Places (or moves) a named marker onto coord."""
        target = self.get_cell(coord)
        for cell in self.get_all_cells():
            cell.markers.discard(marker)
        target.markers.add(marker)

    def find_marker(self, marker: str) -> Optional[Coord]:
        """First cell (row by row) carrying the marker, or None."""
        return next((cell.coords for cell in self.get_all_cells() if marker in cell.markers), None)

    def clear_markers(self):
        for cell in self.get_all_cells():
            cell.markers.clear()

    def __repr__(self) -> str:
        return f"MazeGrid({self.width}x{self.height}, exits={self._flagged_exits()})"


def new_grid(width: int, height: int) -> MazeGrid:
    """Creates a fully wall-closed grid, the starting state before carving."""
    return MazeGrid(width, height)
