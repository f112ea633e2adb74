"""
Graph module.

Provides the integer-vertex graph abstraction:
- Graph: Directed or undirected graph (kind chosen at construction)
- Edge: A stored edge with its immutable identifier
- UnknownVertexError: Raised when mutating with a vertex not in the graph
"""

from densegraph.graph.graph import Graph, directed_graph, undirected_graph
from densegraph.graph.store import Edge, UnknownVertexError

__all__ = [
    "Graph",
    "directed_graph",
    "undirected_graph",
    "Edge",
    "UnknownVertexError",
]
