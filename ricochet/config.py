"""Tunable constants for board generation, search and replay.

Search and replay budgets can be overridden through environment variables:
    RICOCHET_MAX_DEPTH       (default: 20)
    RICOCHET_TIME_LIMIT_MS   (default: 800)
    RICOCHET_REPLAY_DELAY    (default: 0.7 seconds)
"""

import os

# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------
GRID_SIZE = 16
MIN_GRID_SIZE = 4
TEMPLATE_SIZE = 8

# ---------------------------------------------------------------------------
# Generation retry guards
# ---------------------------------------------------------------------------
QUADRANT_GUARD = 5000
BOARD_SCAN_GUARD = 10000
OBSTACLE_GUARD = 5000
TARGET_REPICK_GUARD = 200
FEATURE_GUARD = 5000

OBSTACLE_MIN = 10
OBSTACLE_SPREAD = 3      # 10~12 obstacles
MIRROR_MIN = 3
MIRROR_SPREAD = 3        # 3~5 mirrors

# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------
SLIDE_GUARD = 1000

# ---------------------------------------------------------------------------
# Search / replay
# ---------------------------------------------------------------------------
DEFAULT_MAX_DEPTH = int(os.environ.get("RICOCHET_MAX_DEPTH", "20"))
MAX_SEARCH_DEPTH = 256   # recursion bound
DEFAULT_TIME_LIMIT_MS = int(os.environ.get("RICOCHET_TIME_LIMIT_MS", "800"))
REPLAY_DELAY = float(os.environ.get("RICOCHET_REPLAY_DELAY", "0.7"))
