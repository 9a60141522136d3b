# --- Grid Structure ---
DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10
DEFAULT_ALGORITHM = "recursive_backtracker"

# --- Cell Directions ---
DIR_NORTH = "N"
DIR_SOUTH = "S"
DIR_WEST = "W"
DIR_EAST = "E"
# Order matters: random neighbour choices index into this sequence.
NEIGHBOUR_ORDER = (DIR_NORTH, DIR_SOUTH, DIR_WEST, DIR_EAST)

# --- Sidewinder ---
SIDEWINDER_CLOSE_PROBABILITY = 0.5

# --- Text Display ---
DISPLAY_CELL_BODY = "   "
DISPLAY_CORNER = "+"
DISPLAY_VERTICAL_WALL = "|"
DISPLAY_HORIZONTAL_WALL = "---"
DISPLAY_OPEN_EAST = " "
DISPLAY_OPEN_SOUTH = "   "

# --- 2D Geometry / STL Export ---
DEFAULT_CELL_SIZE = 1.0
MAZE_2D_WALL_THICKNESS = 0.15
MAZE_2D_WALL_HEIGHT = 0.6
MAZE_2D_BASE_HEIGHT = MAZE_2D_WALL_HEIGHT / 3.0  # Configurable base height

# --- Tolerances ---
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons
MESH_VERTEX_DISTANCE_TOLERANCE_SQ = (
    1e-12  # Squared tolerance for merging/checking degenerate
)

# --- Visualization ---
VIS_FIGURE_SIZE = (10, 10)
VIS_DPI = 150
VIS_CONN_UNREACHABLE_COLOR = "lightgrey"
VIS_CONN_COLORMAP = "viridis"
VIS_LINK_LINE_STYLE = "g-"
VIS_LINK_LINE_LW = 1.0
VIS_LINK_LINE_ALPHA = 0.7
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 1.5
VIS_WALL_LINE_ALPHA = 0.7  # Used in solution plot walls
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_SOLUTION_ENTRY_MARKER_SIZE = 8
VIS_SOLUTION_ENTRY_MFC = "lime"
VIS_SOLUTION_ENTRY_MEC = "black"
VIS_SOLUTION_EXIT_MARKER_SIZE = 8
VIS_SOLUTION_EXIT_MFC = "red"
VIS_SOLUTION_EXIT_MEC = "black"
