"""
Configuration constants for the gridpath search engine.

All defaults and tunable parameters are defined here. Values can be
overridden through environment variables (or a project-level .env file),
which is how the command line host and the benchmark pick their defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env with GRIDPATH_* overrides
load_dotenv(PROJECT_ROOT / ".env")

# Directory holding example ASCII boards for the CLI
LAYOUTS_DIR = PROJECT_ROOT / "layouts"

# =============================================================================
# Grid Configuration
# =============================================================================

# Board size used when no layout is given (the original board was 48x24)
DEFAULT_GRID_WIDTH = int(os.environ.get("GRIDPATH_GRID_WIDTH", "48"))
DEFAULT_GRID_HEIGHT = int(os.environ.get("GRIDPATH_GRID_HEIGHT", "24"))

# Orthogonal neighbor offsets in lookup order: N, E, S, W.
# The order decides heap tie-breaks, so changing it changes search traces.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
)

# =============================================================================
# Distance Configuration
# =============================================================================

# distance = DIAGONAL_COST * min(dx, dy) + STRAIGHT_COST * (max - min)
DIAGONAL_COST = 1.4
STRAIGHT_COST = 1.0

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when the host does not pick one
DEFAULT_ALGORITHM = os.environ.get("GRIDPATH_ALGORITHM", "astar")

# Seconds between steps for paced hosts (never read by the engine itself)
DEFAULT_STEP_INTERVAL = float(os.environ.get("GRIDPATH_STEP_INTERVAL", "0.0"))

# =============================================================================
# Rendering Configuration
# =============================================================================

# Glyphs for ASCII boards (parsing and rendering share the same alphabet)
GLYPH_OPEN = "."
GLYPH_BLOCKED = "#"
GLYPH_START = "S"
GLYPH_GOAL = "G"
GLYPH_FRONTIER = "+"
GLYPH_EXPLORED = "o"
GLYPH_PATH = "*"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
