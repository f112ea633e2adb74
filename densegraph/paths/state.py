"""
Result dataclasses for shortest-path searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PathResult:
    """
    A best path found by a search.

    Attributes:
        source: Vertex the search started from
        target: Vertex the path ends at
        path: Vertices from source to target, inclusive
        distance: Total weight of the path
    """

    source: int
    target: int
    path: list[int] = field(default_factory=list)
    distance: float = 0.0

    @property
    def hops(self) -> int:
        """Number of edges on the path."""
        return max(len(self.path) - 1, 0)

    def __str__(self) -> str:
        route = " -> ".join(str(v) for v in self.path)
        return f"{route} (distance {self.distance:g})"
