GRID_ROWS = 10
GRID_COLS = 6
INITIAL_ROWS = 4
MIN_VALUE = 1
MAX_VALUE = 9

# Target used when the grid has no blocks to draw a sum from.
DEFAULT_TARGET = 10
# Bounds (inclusive) on how many blocks contribute to a generated target.
TARGET_MIN_BLOCKS = 2
TARGET_MAX_BLOCKS = 4

POINTS_PER_BLOCK = 10

# Timed mode countdown, in whole seconds.
MAX_TIME = 10
TIME_CRITICAL_THRESHOLD = 3
CLOCK_INTERVAL = 1.0

HIGH_SCORE_KEY = "sum-match-highscore"
SCORE_LABEL_DIGITS = 6

TILE_SIZE = 56
BOTTOM_MARGIN = 70
# Space reserved above the board for the target, score and timer bar.
HEADER_HEIGHT = 130

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.95
