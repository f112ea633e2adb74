"""
Storage for shortest-path search results and edge weights.

A PathStore records, per vertex, the best known distance from the source
and the predecessor on that path. The search engine only talks to the
PathStore interface, so clients can keep results wherever suits them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from densegraph.config import DEFAULT_EDGE_WEIGHT, NO_EDGE, NO_VERTEX, UNREACHABLE

if TYPE_CHECKING:
    from densegraph.graph import Graph


class PathStore(ABC):
    """Per-vertex distance and predecessor storage."""

    @abstractmethod
    def reset(self, graph: Graph) -> None:
        """Prepare storage for every vertex currently in graph."""
        ...

    @abstractmethod
    def get_distance(self, v: int) -> float:
        """Best known distance to v, or UNREACHABLE if v is unknown."""
        ...

    @abstractmethod
    def set_distance(self, v: int, distance: float) -> None:
        ...

    @abstractmethod
    def get_predecessor(self, v: int) -> int:
        """Predecessor of v on its best path, or NO_VERTEX (0)."""
        ...

    @abstractmethod
    def set_predecessor(self, v: int, u: int) -> None:
        ...


class DictPathStore(PathStore):
    """PathStore backed by two dicts; unknown vertices read as unreached."""

    def __init__(self) -> None:
        self._distances: dict[int, float] = {}
        self._predecessors: dict[int, int] = {}

    def reset(self, graph: Graph) -> None:
        self._distances.clear()
        self._predecessors.clear()

    def get_distance(self, v: int) -> float:
        return self._distances.get(v, UNREACHABLE)

    def set_distance(self, v: int, distance: float) -> None:
        self._distances[v] = distance

    def get_predecessor(self, v: int) -> int:
        return self._predecessors.get(v, NO_VERTEX)

    def set_predecessor(self, v: int, u: int) -> None:
        self._predecessors[v] = u


class ArrayPathStore(PathStore):
    """
    PathStore backed by numpy arrays indexed by vertex number.

    Vertex v lives at index v - 1. Arrays are resized to the graph's
    max_vertex() on every reset().
    """

    def __init__(self) -> None:
        self._distances = np.full(0, UNREACHABLE, dtype=np.float64)
        self._predecessors = np.zeros(0, dtype=np.int64)

    def reset(self, graph: Graph) -> None:
        size = graph.max_vertex()
        self._distances = np.full(size, UNREACHABLE, dtype=np.float64)
        self._predecessors = np.zeros(size, dtype=np.int64)

    def _in_range(self, v: int) -> bool:
        return 1 <= v <= len(self._distances)

    def get_distance(self, v: int) -> float:
        if not self._in_range(v):
            return UNREACHABLE
        return float(self._distances[v - 1])

    def set_distance(self, v: int, distance: float) -> None:
        self._distances[v - 1] = distance

    def get_predecessor(self, v: int) -> int:
        if not self._in_range(v):
            return NO_VERTEX
        return int(self._predecessors[v - 1])

    def set_predecessor(self, v: int, u: int) -> None:
        self._predecessors[v - 1] = u

    @property
    def distances(self) -> np.ndarray:
        """Read-only copy of the distance array (index v - 1)."""
        return self._distances.copy()


class EdgeWeights:
    """
    Edge weights for one graph, keyed by edge id.

    Calling the table as weights(u, v) gives the weight of edge (u, v):
    the stored weight, the default for edges never assigned one, or
    UNREACHABLE when the edge does not exist. Because weights follow
    edge ids, an undirected edge has one weight in both directions.
    """

    def __init__(self, graph: Graph, default: float = DEFAULT_EDGE_WEIGHT) -> None:
        self.graph = graph
        self.default = default
        self._weights: dict[int, float] = {}

    def add(self, u: int, v: int, weight: float) -> int:
        """Add edge (u, v) to the graph if needed, set its weight, and return its id."""
        edge_id = self.graph.add(u, v)
        self._weights[edge_id] = weight
        return edge_id

    def set(self, u: int, v: int, weight: float) -> None:
        """
        Set the weight of edge (u, v).

        Raises:
            ValueError: If (u, v) is not an edge of the graph
        """
        edge_id = self.graph.edge_id(u, v)
        if edge_id == NO_EDGE:
            raise ValueError(f"No edge ({u}, {v}) in graph")
        self._weights[edge_id] = weight

    def discard(self, u: int, v: int) -> None:
        """Remove edge (u, v) from the graph and drop its weight. No-op if absent."""
        edge_id = self.graph.edge_id(u, v)
        if edge_id == NO_EDGE:
            return
        self.graph.remove(u, v)
        self._weights.pop(edge_id, None)

    def prune(self) -> int:
        """
        Drop weights of edges no longer in the graph.

        Edges removed through the graph itself (including by vertex removal)
        leave their weights behind.

        Returns:
            Number of entries dropped
        """
        live = {self.graph.edge_id(u, v) for u, v in self.graph.edges()}
        dead = [edge_id for edge_id in self._weights if edge_id not in live]
        for edge_id in dead:
            del self._weights[edge_id]
        return len(dead)

    def get(self, u: int, v: int) -> float:
        edge_id = self.graph.edge_id(u, v)
        if edge_id == NO_EDGE:
            return UNREACHABLE
        return self._weights.get(edge_id, self.default)

    def __call__(self, u: int, v: int) -> float:
        return self.get(u, v)
