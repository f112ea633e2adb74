"""
Fringe disciplines for the traversal engine.

The fringe holds vertices waiting to be processed. The order in which it
gives them back decides the search strategy: FIFO gives breadth-first,
LIFO gives depth-first, a priority key gives best-first.
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable

from densegraph.config import DEFAULT_FRINGE


class Fringe(ABC):
    """
    Abstract collection of pending vertices.

    Subclasses decide which vertex pop() hands back next.
    """

    @abstractmethod
    def push(self, v: int) -> None:
        """Add vertex v. Duplicates are allowed."""
        ...

    @abstractmethod
    def pop(self) -> int:
        """
        Remove and return the next vertex.

        Raises:
            IndexError: If the fringe is empty
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every pending vertex."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def extend(self, vertices: Iterable[int]) -> None:
        """Push each vertex in order."""
        for v in vertices:
            self.push(v)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"


class FifoFringe(Fringe):
    """First in, first out (breadth-first order)."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, v: int) -> None:
        self._queue.append(v)

    def pop(self) -> int:
        if not self._queue:
            raise IndexError("pop from an empty fringe")
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFringe(Fringe):
    """Last in, first out (depth-first order)."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, v: int) -> None:
        self._stack.append(v)

    def pop(self) -> int:
        if not self._stack:
            raise IndexError("pop from an empty fringe")
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFringe(Fringe):
    """
    Smallest key first; equal keys come out in insertion order.

    The key is evaluated once, when the vertex is pushed.
    """

    def __init__(self, key: Callable[[int], float]) -> None:
        if not callable(key):
            raise ValueError("PriorityFringe requires a callable key")
        self._key = key
        self._heap: list[tuple[float, int, int]] = []
        self._counter = itertools.count()

    def push(self, v: int) -> None:
        heapq.heappush(self._heap, (self._key(v), next(self._counter), v))

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty fringe")
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)


def get_fringe(name: str = DEFAULT_FRINGE, **kwargs) -> Fringe:
    """
    Get a fringe by name.

    Args:
        name: Fringe identifier (fifo, bfs, lifo, dfs, priority); defaults to
            DEFAULT_FRINGE
        **kwargs: Passed to the fringe constructor (e.g., key for priority)

    Returns:
        A new, empty fringe

    Raises:
        ValueError: If fringe name is unknown
    """
    fringes: dict[str, type[Fringe]] = {
        "fifo": FifoFringe,
        "bfs": FifoFringe,
        "lifo": LifoFringe,
        "dfs": LifoFringe,
        "priority": PriorityFringe,
    }

    if name not in fringes:
        available = ", ".join(fringes.keys())
        raise ValueError(f"Unknown fringe '{name}'. Available: {available}")

    return fringes[name](**kwargs)
