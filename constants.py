# --- Maze Defaults ---
DEFAULT_SEED = 1234  # Published "demo" maze ID
DEFAULT_WIDTH = 20  # Number of columns (nCellsX)
DEFAULT_HEIGHT = 15  # Number of rows (nCellsY)

# --- Logging ---
VERBOSE = True  # Print progress messages for generation/solving

# --- Wall Bits (bit set = wall present) ---
WALL_NORTH = 1
WALL_SOUTH = 2
WALL_EAST = 4
WALL_WEST = 8
ALL_WALLS = WALL_NORTH | WALL_SOUTH | WALL_EAST | WALL_WEST

# --- Markers ---
MARKER_PLAYER1 = "player1"
MARKER_PLAYER2 = "player2"

# --- Text Rendering ---
TXT_CORNER = "*"
TXT_HWALL = "---"
TXT_HOPEN = "   "
TXT_VWALL = "|"
TXT_VOPEN = " "
TXT_EMPTY = "   "
TXT_PATH = " o "
TXT_EXIT = " X "
TXT_MARKER_LABELS = {MARKER_PLAYER1: " 1 ", MARKER_PLAYER2: " 2 "}
TXT_SOLUTION_SEPARATOR = " - "

# --- Visualization ---
VIS_CELL_SIZE_INCHES = 0.4
VIS_MAX_FIG_INCHES = 12.0
VIS_DPI = 150
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 2.0
VIS_WALL_LINE_ALPHA = 1.0
VIS_SOLUTION_COLOR = (200 / 255, 200 / 255, 250 / 255)
VIS_EXIT_COLOR = (100 / 255, 100 / 255, 200 / 255)
VIS_MARKER_COLORS = {MARKER_PLAYER1: "red", MARKER_PLAYER2: "yellow"}
VIS_MARKER_EDGE_COLOR = "black"
VIS_MARKER_SIZE_RATIO = 0.8  # Marker diameter relative to a cell
VIS_WAVEFRONT_CMAP = "viridis"
VIS_UNREACHED_COLOR = "lightgrey"
VIS_DEFAULT_MESSAGE = "Welcome to the Maze game !"

# --- 3D STL Export ---
MAZE_3D_CELL_SIZE = 10.0
MAZE_3D_WALL_THICKNESS = 1.2
MAZE_3D_WALL_HEIGHT = 6.0
MAZE_3D_BASE_HEIGHT = MAZE_3D_WALL_HEIGHT / 3.0
