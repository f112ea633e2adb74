"""
Generalized graph traversal.

At any moment there is a collection of pending vertices, the fringe.
Traversal repeatedly removes a vertex from the fringe, visits it if it
is unmarked, and schedules its successors. Clients shape the walk with
hook functions instead of subclassing:

- visit(v): called when v is first reached; return False to stop
- should_post_visit(v): whether v is revisited after its successors
- post_visit(v): the revisit itself; return False to stop
- process_successor(u, v): whether successor v of u enters the fringe
- reverse_successors(v): whether successors of v are scheduled in reverse

Marks and post-visits survive between traverse() calls, so a traversal can be
interrupted and resumed, or extended after the graph grows.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from densegraph.traversal.fringe import FifoFringe, Fringe, LifoFringe, PriorityFringe

if TYPE_CHECKING:
    from densegraph.graph import Graph

logger = logging.getLogger(__name__)

VertexHook = Callable[[int], object]
VertexPredicate = Callable[[int], bool]
SuccessorHook = Callable[[int, int], bool]


class Traversal:
    """
    A traversal of one graph through one fringe.

    Attributes:
        graph: The graph being traversed
        fringe: Pending vertices; its discipline sets the visiting order
    """

    def __init__(
        self,
        graph: Graph,
        fringe: Fringe,
        *,
        visit: VertexHook | None = None,
        should_post_visit: VertexPredicate | None = None,
        post_visit: VertexHook | None = None,
        process_successor: SuccessorHook | None = None,
        reverse_successors: VertexPredicate | None = None,
    ) -> None:
        self.graph = graph
        self.fringe = fringe
        self._visit = visit
        self._should_post_visit = should_post_visit
        self._post_visit = post_visit
        self._process_successor = process_successor
        self._reverse_successors = reverse_successors

        self._marked: set[int] = set()
        self._visited: list[int] = []
        self._post_visited: list[int] = []
        self._post_visited_set: set[int] = set()

    # =========================================================================
    # State
    # =========================================================================

    def clear(self) -> None:
        """Forget marks and post-visits and empty the fringe."""
        self._marked = set()
        self._post_visited_set = set()
        self.fringe.clear()

    def marked(self, v: int) -> bool:
        """Whether v has been marked by this or an earlier traverse() call."""
        return v in self._marked

    def mark(self, v: int) -> None:
        self._marked.add(v)

    @property
    def visited(self) -> list[int]:
        """Vertices visited during the latest traverse() call, in order."""
        return list(self._visited)

    @property
    def post_visited(self) -> list[int]:
        """Vertices post-visited during the latest traverse() call, in order."""
        return list(self._post_visited)

    # =========================================================================
    # Hooks
    # =========================================================================

    def _call_visit(self, v: int) -> bool:
        if self._visit is None:
            return True
        return self._visit(v) is not False

    def _call_post_visit(self, v: int) -> bool:
        if self._post_visit is None:
            return True
        return self._post_visit(v) is not False

    def _wants_post_visit(self, v: int) -> bool:
        return self._should_post_visit is not None and bool(self._should_post_visit(v))

    def _accepts_successor(self, u: int, v: int) -> bool:
        if self._process_successor is None:
            return not self.marked(v)
        return bool(self._process_successor(u, v))

    def _schedule_successors(self, u: int) -> None:
        successors = list(self.graph.successors(u))
        if self._reverse_successors is not None and self._reverse_successors(u):
            successors.reverse()
        for v in successors:
            if self._accepts_successor(u, v):
                self.fringe.push(v)

    # =========================================================================
    # Traversal
    # =========================================================================

    def traverse(self, start: int | Iterable[int] = ()) -> bool:
        """
        Add start vertices to the fringe and run until it empties or a hook stops.

        Args:
            start: A vertex or an iterable of vertices. Empty resumes a
                previously interrupted traversal.

        Returns:
            True if the fringe was exhausted, False if a hook stopped the walk
        """
        if isinstance(start, numbers.Integral):
            self.fringe.push(int(start))
        else:
            self.fringe.extend(start)

        self._visited = []
        self._post_visited = []
        logger.debug(f"Traversal starting with {len(self.fringe)} pending vertex(es)")

        while self.fringe:
            v = self.fringe.pop()
            if not self.marked(v):
                self.mark(v)
                keep_going = self._call_visit(v)
                self._visited.append(v)
                if not keep_going:
                    logger.debug(f"Traversal stopped by visit({v})")
                    return False
                if self._wants_post_visit(v):
                    self.fringe.push(v)
                self._schedule_successors(v)
            elif self._wants_post_visit(v) and v not in self._post_visited_set:
                keep_going = self._call_post_visit(v)
                self._post_visited.append(v)
                self._post_visited_set.add(v)
                if not keep_going:
                    logger.debug(f"Traversal stopped by post_visit({v})")
                    return False

        logger.debug(f"Traversal finished after visiting {len(self._visited)} vertex(es)")
        return True


def breadth_first_traversal(graph: Graph, **hooks) -> Traversal:
    """A traversal that visits vertices in breadth-first order."""
    return Traversal(graph, FifoFringe(), **hooks)


def depth_first_traversal(graph: Graph, **hooks) -> Traversal:
    """
    A traversal that visits vertices in depth-first order.

    Post-visiting is on by default, so post_visit sees vertices in DFS
    finishing order.
    """
    hooks.setdefault("should_post_visit", lambda v: True)
    return Traversal(graph, LifoFringe(), **hooks)


def priority_traversal(graph: Graph, key: Callable[[int], float], **hooks) -> Traversal:
    """A traversal that always expands the pending vertex with the smallest key."""
    return Traversal(graph, PriorityFringe(key), **hooks)
