"""Simulation-wide constants.

Physics runs in a unit system where the gravitational constant is 1; scale
masses and distances to match real units if needed.
"""

import numpy as np

# --- Physics ---
G = 1.0
BODY_COUNT = 3
ALIGN_AXIS = np.array([1.0, 0.0, 0.0])

# --- Time stepping ---
TIME_STEP_BASE = 0.001
SPEED_FACTOR = 1
MIN_SPEED_FACTOR = 1
MAX_SPEED_FACTOR = 200

# --- Window / UI ---
WIDTH = 1280
HEIGHT = 800
UI_SIDEBAR_WIDTH = 280
FPS = 60
FONT_SIZE = 16

# --- Camera ---
ZOOM_BASE = 12.0
MIN_ZOOM = 0.5
MAX_ZOOM = 200.0
ZOOM_STEP = 1.1
CAMERA_SMOOTHING = 0.15
DEFAULT_YAW = 0.0
DEFAULT_PITCH = 1.1
ROTATE_SPEED = 0.005

# --- Trails ---
SHOW_TRAILS = True
DEFAULT_TRAIL_LENGTH = 400
MIN_TRAIL_LENGTH = 10
MAX_TRAIL_LENGTH = 5000

# --- Energy monitor ---
ENERGY_HISTORY_POINTS = 500
ENERGY_PLOT_HEIGHT = 80

# --- Presets / IO ---
DEFAULT_PRESET = "Sun-Earth-Moon"
DEFAULT_SAVE_FILE = "tribody_save.json"

# --- Colours ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (60, 60, 60)
SUN_YELLOW = (255, 220, 120)
EARTH_BLUE = (80, 140, 255)
MOON_GRAY = (200, 200, 200)
STAR_RED = (255, 120, 100)
STAR_GREEN = (140, 255, 160)
