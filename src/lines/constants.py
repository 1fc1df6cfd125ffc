GRID_WIDTH = 9
GRID_HEIGHT = 9

# Minimum number of same-colored pieces in a line that get destroyed.
MIN_RUN_LENGTH = 5
# Pieces dropped onto the board after every turn without a match.
SPAWN_COUNT = 3
COMBO_GROWTH = 1.5
# Seconds the board stays locked between an accepted move and turn resolution.
LOCK_DURATION = 0.8

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 760
WINDOW_TITLE = "Five Lines"
BOTTOM_MARGIN = 20
# Height reserved above the board for the next-pieces preview and score line.
HUD_HEIGHT = 120
BOARD_MAX_WIDTH_PCT = 0.95
BOARD_MAX_HEIGHT_PCT = 0.95
MIN_TILE_SIZE = 20
