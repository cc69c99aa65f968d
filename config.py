# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, log_debug() appends a
# timestamped trace to logs/debug.txt. Disabled by default for normal play.
LOG_ENABLED = bool(int(os.getenv("PENGER_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Actor image, loaded once before the loop starts
ASSET_PATH = os.getenv(
    "PENGER_ASSET_PATH",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets", "penger.png"),
)

# Initial window size; the play area is fitted inside it at ASPECT_RATIO
WIDTH = 1280
HEIGHT = 720
ASPECT_RATIO = 16 / 9

# Frames per second cap handed to pygame's clock
FPS = 60

# Thrust key, a pygame key constant name
THRUST_KEY_NAME = os.getenv("PENGER_THRUST_KEY", "K_SPACE")

# Physics (pixels and milliseconds)
GRAVITY = 0.0004
PENGER_JET_PROPULSION_ACCELERATION = -0.004
MAX_VELOCITY = 2.0
SCROLL_SPEED = 0.25

# Frame deltas above this are treated as a stall (backgrounded window, drag)
MAX_FRAME_DT_MS = 100.0

# Actor
PENGER_SCALE = 0.75
PENGER_START_X = 10.0
PENGER_START_Y = 0.0

# Obstacles
OBSTACLE_WIDTH = 30
OBSTACLE_HEIGHT = 160
OBSTACLE_COUNT = 1
OBSTACLE_SPAWN_OFFSET = 0.1

# Scoring
SCORE_INCREMENT = 10

# Colours
BACKGROUND_COLOR = (211, 211, 211)   # lightgray
OBSTACLE_COLOR = (255, 0, 0)
SCORE_COLOR = (0, 0, 0)
LETTERBOX_COLOR = (0, 0, 0)

# HUD
SCORE_FONT = "serif"
SCORE_FONT_SIZE = 16
SCORE_RIGHT_MARGIN = 100
SCORE_BASELINE_Y = 20
