import logging

# Grid settings
# Number of cells per row and per column
GRID_WIDTH = 10
GRID_HEIGHT = 10
# Size of each grid cell in pixels
CELL_SIZE = 40

# Screen settings
SCREEN_WIDTH = GRID_WIDTH * CELL_SIZE
SCREEN_HEIGHT = GRID_HEIGHT * CELL_SIZE
FPS = 60
WINDOW_CAPTION = "A* Grid Pathfinder"

# Search animation
# Delay between two observable search steps (milliseconds)
STEP_DELAY_MS = 100

# Colors, one per cell role
EMPTY_COLOR = (255, 255, 255)
WALL_COLOR = (80, 80, 80)
START_COLOR = (0, 255, 0)
GOAL_COLOR = (255, 0, 0)
VISITED_COLOR = (0, 0, 255)
PATH_COLOR = (255, 255, 0)
# Cell border drawn around every cell
BORDER_COLOR = (40, 40, 40)
BORDER_WIDTH = 1

# Preset layout (row, col) loaded on startup when LOAD_PRESET is True
LOAD_PRESET = False
PRESET_START = (2, 0)
PRESET_GOAL = (9, 9)
PRESET_WALLS = ((2, 2), (2, 3), (1, 2))

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
