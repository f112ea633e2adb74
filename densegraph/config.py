"""
Configuration constants for densegraph.

Sentinels, defaults, and tunable parameters are defined here.
The log level can be overridden from the environment - the library
never installs logging handlers on its own.
"""

import logging
import math
import os

# =============================================================================
# Graph Configuration
# =============================================================================

# Vertex numbers are allocated densely starting here
FIRST_VERTEX = 1

# "No vertex" sentinel (e.g. predecessor of the source, unset destination)
NO_VERTEX = 0

# "No edge" sentinel returned by edge_id() lookups
NO_EDGE = 0

# First identifier handed out by a fresh graph's edge counter
FIRST_EDGE_ID = 1

# =============================================================================
# Traversal Configuration
# =============================================================================

# Fringe discipline used when none is supplied
DEFAULT_FRINGE = "fifo"

# =============================================================================
# Shortest Path Configuration
# =============================================================================

# Distance of a vertex not (yet) reached from the source
UNREACHABLE = math.inf

# Weight of an edge with no explicit weight in an EdgeWeights table
DEFAULT_EDGE_WEIGHT = 1.0

# Weighted A* epsilon: f(n) = g(n) + EPSILON * h(n)
# Values above 1 trade optimality for speed (inadmissible)
ASTAR_EPSILON = 1.0

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("DENSEGRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Attach a basic handler to the root logger (opt-in, for scripts and REPLs)."""
    logging.basicConfig(
        level=level if level is not None else LOG_LEVEL,
        format=LOG_FORMAT,
    )
