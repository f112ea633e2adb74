"""
Shortest paths through an edge-weighted graph.

One engine covers both Dijkstra's algorithm and A* search: candidates are
ordered by distance(v) + heuristic(v), and the heuristic defaults to zero.
The client supplies the edge weights as a function, may supply a heuristic
estimating the remaining distance to the destination, and may choose where
distances and predecessors are stored.

Usage:
    from densegraph.paths import ShortestPaths

    paths = ShortestPaths(g, source=1, dest=5, weight=weights)
    paths.set_paths()
    paths.path_to()        # [1, 3, 5]
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from densegraph.config import NO_VERTEX, UNREACHABLE
from densegraph.graph import UnknownVertexError
from densegraph.heuristics import ZeroHeuristic
from densegraph.paths.state import PathResult
from densegraph.paths.stores import DictPathStore, PathStore

if TYPE_CHECKING:
    from densegraph.graph import Graph

logger = logging.getLogger(__name__)

WeightFunction = Callable[[int, int], float]
HeuristicFunction = Callable[[int], float]


class ShortestPaths:
    """
    Best paths in a graph from one source, optionally to one destination.

    With a destination, the search stops as soon as the destination is
    taken off the queue. The heuristic must never overestimate the true
    remaining distance to the destination, or A* may return a suboptimal
    path; this is not checked.

    Attributes:
        graph: The graph being searched
        store: Where distances and predecessors are kept
    """

    def __init__(
        self,
        graph: Graph,
        source: int,
        dest: int = NO_VERTEX,
        *,
        weight: WeightFunction,
        heuristic: HeuristicFunction | None = None,
        store: PathStore | None = None,
    ) -> None:
        self.graph = graph
        self._source = source
        self._dest = dest
        self._weight = weight
        self._heuristic = heuristic if heuristic is not None else ZeroHeuristic()
        self.store = store if store is not None else DictPathStore()
        self._ready = False

    @property
    def source(self) -> int:
        return self._source

    @property
    def dest(self) -> int:
        """Destination vertex, or 0 if the search covers every vertex."""
        return self._dest

    # =========================================================================
    # Search
    # =========================================================================

    def set_paths(self) -> None:
        """
        Run the search. Must be called before distance() or path_to().

        Raises:
            UnknownVertexError: If the source is not in the graph
        """
        if not self.graph.contains(self._source):
            raise UnknownVertexError(self._source)

        self.store.reset(self.graph)
        for v in self.graph.vertices():
            self.store.set_distance(v, UNREACHABLE)
            self.store.set_predecessor(v, NO_VERTEX)
        self.store.set_distance(self._source, 0.0)

        # Lazy deletion: a vertex's live entry is the one whose counter
        # matches queued[v]; older entries are skipped when popped.
        heap: list[tuple[float, int, int]] = []
        queued: dict[int, int] = {}
        counter = itertools.count()

        def enqueue(v: int) -> None:
            order = next(counter)
            queued[v] = order
            heapq.heappush(heap, (self.store.get_distance(v) + self._heuristic(v), order, v))

        enqueue(self._source)
        settled = 0

        while heap:
            _, order, u = heapq.heappop(heap)
            if queued.get(u) != order:
                continue
            del queued[u]
            settled += 1

            if u == self._dest:
                break

            base = self.store.get_distance(u)
            for v in self.graph.successors(u):
                candidate = base + self._weight(u, v)
                if candidate < self.store.get_distance(v):
                    self.store.set_distance(v, candidate)
                    self.store.set_predecessor(v, u)
                    enqueue(v)

        self._ready = True
        logger.debug(
            f"Shortest paths from {self._source}: settled {settled} vertex(es)"
            + (f", destination {self._dest}" if self._dest != NO_VERTEX else "")
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def get_weight(self, v: int) -> float:
        """Best known distance from the source to v (UNREACHABLE if none)."""
        return self.store.get_distance(v)

    distance = get_weight

    def get_predecessor(self, v: int) -> int:
        """Vertex before v on its best path, or 0 if none."""
        return self.store.get_predecessor(v)

    def _resolve_target(self, v: int | None) -> int:
        if not self._ready:
            raise RuntimeError("set_paths() must be called before querying paths")
        if v is None:
            if self._dest == NO_VERTEX:
                raise ValueError("No destination vertex was given")
            return self._dest
        return v

    def path_to(self, v: int | None = None) -> list[int]:
        """
        Vertices on the best path from the source to v, source first.

        Args:
            v: Target vertex; defaults to the destination

        Raises:
            RuntimeError: If set_paths() has not been run
            ValueError: If v is unreachable, or v is omitted with no destination
        """
        target = self._resolve_target(v)
        if target == self._source:
            return [self._source]
        if self.store.get_distance(target) == UNREACHABLE:
            logger.warning(f"No path from {self._source} to {target}")
            raise ValueError(f"Vertex {target} is not reachable from {self._source}")

        path = [target]
        predecessor = self.store.get_predecessor(target)
        while predecessor != self._source:
            path.append(predecessor)
            predecessor = self.store.get_predecessor(predecessor)
        path.append(self._source)
        path.reverse()
        return path

    def result(self, v: int | None = None) -> PathResult:
        """The best path to v (default: the destination) with its total weight."""
        target = self._resolve_target(v)
        return PathResult(
            source=self._source,
            target=target,
            path=self.path_to(target),
            distance=self.store.get_distance(target),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={self._source}, dest={self._dest})"


def dijkstra(
    graph: Graph,
    source: int,
    weight: WeightFunction,
    dest: int = NO_VERTEX,
    store: PathStore | None = None,
) -> ShortestPaths:
    """Run Dijkstra's algorithm from source and return the finished search."""
    paths = ShortestPaths(graph, source, dest, weight=weight, store=store)
    paths.set_paths()
    return paths


def astar(
    graph: Graph,
    source: int,
    dest: int,
    weight: WeightFunction,
    heuristic: HeuristicFunction,
    store: PathStore | None = None,
) -> ShortestPaths:
    """Run A* search from source to dest and return the finished search."""
    paths = ShortestPaths(graph, source, dest, weight=weight, heuristic=heuristic, store=store)
    paths.set_paths()
    return paths
