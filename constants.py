"""Game-wide constants for Whack-a-Mole.

Playfield dimensions, hole layout, timing and scoring knobs, overlay text
positions, glyphs, and logging configuration.
"""
import os

WIDTH, HEIGHT = 70, 25             # terminal cells
DIVIDER_COLUMN = 40                # splits the holes from the side panel
WINDOW_TITLE = "Whack-a-Mole"

# Game Settings
TICK_SECONDS = 1.0                 # spawner and countdown period
INITIAL_TIME = 60                  # seconds on the clock
HIT_POINTS = 10
WIN_SCORE = 1024                   # banner shows once scores go above this
MIN_MOLES_PER_TICK = 1
MAX_MOLES_PER_TICK = 6

# Hole layout (3 x 3, row-major)
HOLE_COUNT = 9
HOLE_COLUMNS = 3
HOLE_TOP = 3
HOLE_LEFT = 3
HOLE_WIDTH = 8
HOLE_HEIGHT = 4
HOLE_STEP_X = 12
HOLE_STEP_Y = 6

# Side panel overlay (x, y)
PANEL_X = 50
GAME_OVER_POS = (PANEL_X, 5)
SCORE_POS = (PANEL_X, 9)
TIME_POS = (PANEL_X, 11)
HELP_POS = (PANEL_X, 13)
FIELD_WIDTH = 16                   # overlay fields are padded to this

# Glyphs
EMPTY_GLYPH = " "
MOLE_GLYPH = "@"
STRUCK_GLYPH = "X"

QUIT_KEY = "q"

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(__file__), "log.md")
