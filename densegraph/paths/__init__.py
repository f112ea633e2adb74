"""
Shortest paths module.

Provides a unified Dijkstra / A* search engine:
- ShortestPaths: Single-source search, optionally to one destination
- PathStore / DictPathStore / ArrayPathStore: Where results are kept
- EdgeWeights: Per-edge weight table usable as the weight function
- PathResult: A found path with its total weight
- dijkstra / astar: Build and run a search in one call
"""

from densegraph.paths.engine import ShortestPaths, astar, dijkstra
from densegraph.paths.state import PathResult
from densegraph.paths.stores import ArrayPathStore, DictPathStore, EdgeWeights, PathStore

__all__ = [
    "ShortestPaths",
    "dijkstra",
    "astar",
    "PathResult",
    "PathStore",
    "DictPathStore",
    "ArrayPathStore",
    "EdgeWeights",
]
