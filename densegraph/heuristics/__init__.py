"""
Heuristics module.

Provides heuristic functions for guiding A* search:
- ZeroHeuristic: No guidance (Dijkstra's algorithm)
- TableHeuristic: Precomputed per-vertex estimates
- EuclideanHeuristic: Straight-line distance between vertex coordinates
- ManhattanHeuristic: Taxicab distance between vertex coordinates
- WeightedHeuristic: Epsilon-scaled wrapper (weighted A*)
"""

from densegraph.heuristics.base import (
    Heuristic,
    TableHeuristic,
    WeightedHeuristic,
    ZeroHeuristic,
)
from densegraph.heuristics.geometric import EuclideanHeuristic, ManhattanHeuristic

__all__ = [
    "Heuristic",
    "ZeroHeuristic",
    "TableHeuristic",
    "EuclideanHeuristic",
    "ManhattanHeuristic",
    "WeightedHeuristic",
    "get_heuristic",
]


def get_heuristic(name: str, **kwargs) -> Heuristic:
    """
    Get a heuristic by name.

    Args:
        name: Heuristic identifier (zero, table, euclidean, manhattan, weighted)
        **kwargs: Passed to the heuristic constructor (e.g., coords, dest)

    Returns:
        Instantiated heuristic

    Raises:
        ValueError: If heuristic name is unknown
    """
    heuristics = {
        "zero": ZeroHeuristic,
        "table": TableHeuristic,
        "euclidean": EuclideanHeuristic,
        "manhattan": ManhattanHeuristic,
        "weighted": WeightedHeuristic,
    }

    if name not in heuristics:
        available = ", ".join(heuristics.keys())
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")

    # Zero takes no arguments
    if name == "zero":
        return ZeroHeuristic()

    return heuristics[name](**kwargs)
