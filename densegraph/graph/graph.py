"""
Directed and undirected graphs over densely-numbered integer vertices.

A single Graph class serves both kinds; the `directed` flag chosen at
construction changes the meaning of degree, adjacency, containment and
removal queries but not the storage.

Usage:
    from densegraph.graph import directed_graph

    g = directed_graph()
    a, b = g.add(), g.add()
    g.add(a, b)
    list(g.successors(a))   # [2]
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import overload

from densegraph.graph.store import UnknownVertexError, VertexEdgeStore


class Graph:
    """
    An unlabeled graph whose vertices are positive integers.

    Self edges are allowed. Vertex payloads, labels and weights belong to
    the client and are keyed externally by vertex number or edge id.
    """

    def __init__(self, directed: bool = True) -> None:
        self._store = VertexEdgeStore(directed=directed)

    @property
    def is_directed(self) -> bool:
        return self._store.directed

    # =========================================================================
    # Sizes
    # =========================================================================

    def vertex_size(self) -> int:
        """Number of live vertices."""
        return self._store.vertex_count

    def max_vertex(self) -> int:
        """Largest live vertex number, or 0 if the graph is empty."""
        return self._store.max_vertex

    def edge_size(self) -> int:
        """Number of edges (an undirected edge counts once)."""
        return self._store.edge_count

    def __len__(self) -> int:
        return self._store.vertex_count

    # =========================================================================
    # Degrees
    # =========================================================================

    def out_degree(self, v: int) -> int:
        """
        Number of outgoing edges of v (incident edges, if undirected).

        A self loop counts once. Returns 0 if v is not in the graph.
        """
        if not self._store.has_vertex(v):
            return 0
        if self.is_directed:
            return sum(1 for e in self._store.iter_edges() if e.source == v)
        return sum(1 for e in self._store.iter_edges() if e.touches(v))

    def in_degree(self, v: int) -> int:
        """
        Number of incoming edges of v (incident edges, if undirected).

        A self loop counts once. Returns 0 if v is not in the graph.
        """
        if not self.is_directed:
            return self.out_degree(v)
        if not self._store.has_vertex(v):
            return 0
        return sum(1 for e in self._store.iter_edges() if e.dest == v)

    def degree(self, v: int) -> int:
        """Synonym for out_degree()."""
        return self.out_degree(v)

    # =========================================================================
    # Containment
    # =========================================================================

    @overload
    def contains(self, u: int) -> bool: ...

    @overload
    def contains(self, u: int, v: int) -> bool: ...

    def contains(self, u: int, v: int | None = None) -> bool:
        """With one argument, whether u is a vertex; with two, whether edge (u, v) exists."""
        if v is None:
            return self._store.has_vertex(u)
        return self._store.find_edge(u, v) is not None

    def __contains__(self, item: object) -> bool:
        if isinstance(item, tuple) and len(item) == 2:
            return self.contains(item[0], item[1])
        if isinstance(item, int):
            return self.contains(item)
        return False

    def check_vertex(self, v: int) -> None:
        """Raise UnknownVertexError unless v is in the graph."""
        if not self._store.has_vertex(v):
            raise UnknownVertexError(v)

    def edge_id(self, u: int, v: int) -> int:
        """Identifier of edge (u, v), or 0 if there is no such edge."""
        return self._store.edge_id(u, v)

    # =========================================================================
    # Mutation
    # =========================================================================

    @overload
    def add(self) -> int: ...

    @overload
    def add(self, u: int, v: int) -> int: ...

    def add(self, u: int | None = None, v: int | None = None) -> int:
        """
        Add a vertex, or an edge between two existing vertices.

        With no arguments, returns the new vertex number. With two, returns
        the id of edge (u, v), reusing the id if the edge already exists.

        Raises:
            UnknownVertexError: If u or v is not in the graph
        """
        if u is None and v is None:
            return self._store.add_vertex()
        if u is None or v is None:
            raise TypeError("add() takes either no arguments or both endpoints")
        return self._store.add_edge(u, v)

    @overload
    def remove(self, u: int) -> None: ...

    @overload
    def remove(self, u: int, v: int) -> None: ...

    def remove(self, u: int, v: int | None = None) -> None:
        """Remove vertex u (and its edges), or edge (u, v). Absent items are ignored."""
        if v is None:
            self._store.remove_vertex(u)
        else:
            self._store.remove_edge(u, v)

    # =========================================================================
    # Iteration
    # =========================================================================

    def vertices(self) -> Iterator[int]:
        """All vertices in ascending order."""
        return self._store.iter_vertices()

    def edges(self) -> Iterator[tuple[int, int]]:
        """All edges as (u, v) pairs, in insertion order."""
        return (edge.endpoints for edge in self._store.iter_edges())

    def successors(self, v: int) -> Iterator[int]:
        """
        Vertices reachable from v by one edge, in edge insertion order.

        For undirected graphs these are all neighbors of v.
        """
        for edge in self._store.iter_edges():
            if edge.source == v:
                yield edge.dest
            elif not self.is_directed and edge.dest == v:
                yield edge.source

    def predecessors(self, v: int) -> Iterator[int]:
        """
        Vertices with an edge into v, in edge insertion order.

        Identical to successors() for undirected graphs. For directed graphs
        this scans every edge.
        """
        if not self.is_directed:
            yield from self.successors(v)
            return
        for edge in self._store.iter_edges():
            if edge.dest == v:
                yield edge.source

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed else "undirected"
        return f"Graph({kind}, vertices={self.vertex_size()}, edges={self.edge_size()})"


def directed_graph() -> Graph:
    """A new, empty directed graph."""
    return Graph(directed=True)


def undirected_graph() -> Graph:
    """A new, empty undirected graph."""
    return Graph(directed=False)
