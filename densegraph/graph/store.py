"""
Vertex and edge storage for densely-numbered graphs.

Vertices are positive integers handed out by add_vertex(), always the
smallest number not currently in use. Edges carry an identifier drawn
from a per-store counter that is never rewound, so removed edges never
share an id with later ones.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from densegraph.config import FIRST_EDGE_ID, FIRST_VERTEX, NO_EDGE

logger = logging.getLogger(__name__)


class UnknownVertexError(ValueError):
    """Raised when a mutating operation names a vertex that is not live."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} is not in the graph")
        self.vertex = vertex


@dataclass(frozen=True)
class Edge:
    """
    A stored edge.

    Attributes:
        source: First endpoint (the tail, for directed graphs)
        dest: Second endpoint (the head, for directed graphs)
        edge_id: Identifier assigned when the edge was created
    """

    source: int
    dest: int
    edge_id: int

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.source, self.dest)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.dest

    def touches(self, v: int) -> bool:
        """Whether v is either endpoint."""
        return self.source == v or self.dest == v


class VertexEdgeStore:
    """
    Owns the live vertex numbers and the edge list of one graph.

    Attributes:
        directed: Whether (u, v) and (v, u) are distinct edges
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        # Sorted ascending so the smallest free number is found by a scan
        self._vertices: list[int] = []
        self._vertex_set: set[int] = set()
        # Insertion-ordered; keyed by the normalized endpoint pair
        self._edges: dict[tuple[int, int], Edge] = {}
        self._next_edge_id = FIRST_EDGE_ID

    # =========================================================================
    # Vertices
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def max_vertex(self) -> int:
        """Largest live vertex number, or 0 if the store is empty."""
        return self._vertices[-1] if self._vertices else 0

    def has_vertex(self, v: int) -> bool:
        return v in self._vertex_set

    def add_vertex(self) -> int:
        """Allocate and return the smallest positive vertex number not in use."""
        candidate = FIRST_VERTEX
        for existing in self._vertices:
            if existing != candidate:
                break
            candidate += 1

        bisect.insort(self._vertices, candidate)
        self._vertex_set.add(candidate)
        logger.debug(f"Added vertex {candidate}")
        return candidate

    def remove_vertex(self, v: int) -> None:
        """Remove v and every edge touching it. No-op if v is absent."""
        if v not in self._vertex_set:
            return

        self._vertices.remove(v)
        self._vertex_set.discard(v)

        doomed = [key for key, edge in self._edges.items() if edge.touches(v)]
        for key in doomed:
            del self._edges[key]

        logger.debug(f"Removed vertex {v} and {len(doomed)} incident edge(s)")

    def iter_vertices(self) -> Iterator[int]:
        """Live vertices in ascending order (iterates over a snapshot)."""
        return iter(list(self._vertices))

    # =========================================================================
    # Edges
    # =========================================================================

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _key(self, u: int, v: int) -> tuple[int, int]:
        if self.directed or u <= v:
            return (u, v)
        return (v, u)

    def find_edge(self, u: int, v: int) -> Edge | None:
        """Return the edge joining u and v, or None."""
        return self._edges.get(self._key(u, v))

    def add_edge(self, u: int, v: int) -> int:
        """
        Add an edge from u to v, or return the id of the existing one.

        Raises:
            UnknownVertexError: If u or v is not a live vertex
        """
        for endpoint in (u, v):
            if endpoint not in self._vertex_set:
                raise UnknownVertexError(endpoint)

        key = self._key(u, v)
        existing = self._edges.get(key)
        if existing is not None:
            return existing.edge_id

        edge = Edge(source=u, dest=v, edge_id=self._next_edge_id)
        self._next_edge_id += 1
        self._edges[key] = edge
        logger.debug(f"Added edge {u}->{v} (id {edge.edge_id})")
        return edge.edge_id

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge joining u and v. No-op if absent."""
        self._edges.pop(self._key(u, v), None)

    def edge_id(self, u: int, v: int) -> int:
        """Identifier of the edge joining u and v, or NO_EDGE (0)."""
        edge = self.find_edge(u, v)
        return edge.edge_id if edge is not None else NO_EDGE

    def iter_edges(self) -> Iterator[Edge]:
        """Stored edges in insertion order (iterates over a snapshot)."""
        return iter(list(self._edges.values()))
