"""
Tuning constants for the island animation.
"""

# --- Timing ---
FRAME_RATE = 10  # Physics constants below are tuned per frame at this rate
FRAME_DELAY = 1.0 / FRAME_RATE

# --- Geometry ---
SUBROWS = 8  # Height/position precision: 8 sub-units per character cell

# --- Water Physics ---
WATER_TENSION = 0.025
WATER_DAMPENING = 0.025
WATER_SPREAD = 0.25
WATER_SUBSTEPS = 8  # Diffusion passes per frame
WATER_BASELINE = 8.0  # One row of water after every resize

# --- Drips ---
GRAVITY = 9.8 / FRAME_RATE
DRIP_START_ROW = 2  # Drips start this many rows above the bottom

# --- Cloud ---
CLOUD_SPEED = 10.0 / FRAME_RATE
CLOUD_WIDTH = 5
DROP_DELAY = 30  # Frames between drips
DROP_OFFSET = 2  # Drip column relative to the cloud's left edge

# --- Glyphs ---
DRIP_CHAR = "●"
CLOUD_CHARS = (
    " @@@ ",
    "@@@@@",
    " @@@ ",
)
WATER_CHARS = "▁▂▃▄▅▆▇█"

# --- ANSI Colors ---
FG_COLORS = (30, 31, 32, 33, 34, 35, 36, 37, 90, 91, 92, 93, 94, 95, 96, 97)
BG_COLORS = (40, 41, 42, 43, 44, 45, 46, 47, 100, 101, 102, 103, 104, 105, 106, 107)

BLACK = 0
GREEN = 2
YELLOW = 3
BLUE = 4
BRIGHT_YELLOW = 11
BRIGHT_WHITE = 15
