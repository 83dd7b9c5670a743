"""
Configuration
=============
Central registry for the fixed sizes, pacing delays and file paths the
visualizer uses.  A few values can be overridden from the environment:

    VISUALIZER_HISTORY_PATH   where finished sorts are logged
    VISUALIZER_LOG_LEVEL      DEBUG / INFO / WARNING …
    VISUALIZER_HOST, VISUALIZER_PORT, VISUALIZER_DEBUG   dev server
"""
import logging
import os
from pathlib import Path

# Pathfinding board
GRID_ROWS: int = 20
GRID_COLS: int = 20
WALL_PROBABILITY: float = 0.3

# Sorting input
DEFAULT_ARRAY_LENGTH: int = 50
ARRAY_MIN_VALUE: int = 1
ARRAY_MAX_VALUE: int = 100

# Pacing (milliseconds per emitted step)
TRAVERSAL_DELAY_MS: int = 10
SORT_DELAY_MS: int = 50

# Default algorithm selections
DEFAULT_TRAVERSAL: str = "dfs"
DEFAULT_SORT: str = "bubble"

PROJECT_ROOT: Path = Path(__file__).resolve().parent
HISTORY_PATH: str = os.environ.get(
    "VISUALIZER_HISTORY_PATH", str(PROJECT_ROOT / "sorting_history.json")
)

LOG_LEVEL: int = getattr(logging, os.environ.get("VISUALIZER_LOG_LEVEL", "INFO").upper(), logging.INFO)

HOST: str = os.environ.get("VISUALIZER_HOST", "0.0.0.0")
PORT: int = int(os.environ.get("VISUALIZER_PORT", "5000"))
DEBUG: bool = os.environ.get("VISUALIZER_DEBUG", "1") not in ("0", "false", "False")
