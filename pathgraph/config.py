"""
Configuration constants for pathgraph.

Defaults for graph construction, the command-line demo, and logging.
Environment variables override where noted.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathgraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env file read by scripts
ENV_FILE = PROJECT_ROOT / ".env"

# =============================================================================
# Graph Configuration
# =============================================================================

# Directedness used when Graph() is constructed without arguments
DEFAULT_DIRECTED = False

# =============================================================================
# Demo Configuration
# =============================================================================

# Number of random points scattered on the demo canvas
DEMO_NODE_COUNT = int(os.environ.get("PATHGRAPH_NODE_COUNT", "60"))

# Side length of the square demo canvas
DEMO_CANVAS_SIZE = 100.0

# Points closer than this are joined by an edge
DEMO_CONNECT_RADIUS = 22.0

# RNG seed for reproducible demo graphs (unset = random)
DEMO_SEED = os.environ.get("PATHGRAPH_SEED")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Shared log line format for scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
