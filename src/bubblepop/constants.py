GRID_ROWS = 10
GRID_COLS = 10
COLOR_COUNT = 5
EMPTY = 0

# Selection score = n * (n - 1) * SCORE_FACTOR for a group of n bubbles.
SCORE_FACTOR = 10
MIN_GROUP_SIZE = 2

# Logical canvas; window coordinates are scaled by window width / CANVAS_WIDTH.
CANVAS_WIDTH = 640
CANVAS_HEIGHT = 960
CELL_SIZE = 64

# Distance from the canvas top to the first grid row.
PLAYGROUND_OFFSET = 150

# Frames are (x, y, width, height) in canvas coordinates, origin top-left.
PLAYGROUND_FRAME = (0, 130, 640, 640)
NEW_GAME_BUTTON_FRAME = (200, 815, 240, 119)

# Text anchors for the score header.
SCORE_TEXT_POS = (147, 67)
SELECTION_TEXT_POS = (487, 67)

BACKGROUND_COLOR = (44, 19, 60)  # #2c133c
BUBBLE_COLORS = {
    1: (214, 62, 76),
    2: (76, 175, 80),
    3: (66, 133, 244),
    4: (245, 196, 50),
    5: (171, 71, 188),
}
