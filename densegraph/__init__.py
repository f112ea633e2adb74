"""
densegraph.

Directed and undirected graphs over densely-numbered integer vertices,
with a hook-driven traversal engine (BFS, DFS, best-first) and a unified
Dijkstra / A* shortest-path engine.
"""

from densegraph.graph import Graph, UnknownVertexError, directed_graph, undirected_graph
from densegraph.paths import ShortestPaths, astar, dijkstra
from densegraph.traversal import Traversal, breadth_first_traversal, depth_first_traversal

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "UnknownVertexError",
    "directed_graph",
    "undirected_graph",
    "Traversal",
    "breadth_first_traversal",
    "depth_first_traversal",
    "ShortestPaths",
    "dijkstra",
    "astar",
]
