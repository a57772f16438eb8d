"""
Game constants for termsnake.
"""

# Movement directions (terminal coordinates: y grows downwards)
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Commands beyond movement
RESTART = "RESTART"
QUIT = "QUIT"
VALID_COMMANDS = VALID_MOVES | {RESTART, QUIT}

# Board layout
BOARD_MARGIN = 2
MIN_COLS = 30
MIN_ROWS = 10

# Glyphs
HEAD_GLYPH = "◍"
BODY_GLYPH = "●"
TARGET_GLYPH = "◆"

# Tunables (overridable through config)
MAX_DELAY_MS = 120
MIN_DELAY_MS = 50
POLL_TIMEOUT_MS = 20
SPAWN_ATTEMPTS = 1000
