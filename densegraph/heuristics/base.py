"""
Heuristic base class and simple heuristics for A* search.

A heuristic estimates the remaining distance from a vertex to the search
destination. A* returns optimal paths only when the estimate never
exceeds the true remaining distance (an admissible heuristic).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from densegraph.config import ASTAR_EPSILON


class Heuristic(ABC):
    """
    Abstract per-vertex distance estimate.

    Instances are callable, so they can be passed anywhere a plain
    `heuristic(v) -> float` function is accepted.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'zero', 'euclidean')."""
        ...

    @abstractmethod
    def estimate(self, v: int) -> float:
        """Estimated remaining distance from v to the destination."""
        ...

    def __call__(self, v: int) -> float:
        return self.estimate(v)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class ZeroHeuristic(Heuristic):
    """Always 0. Turns A* into Dijkstra's algorithm."""

    @property
    def name(self) -> str:
        return "zero"

    def estimate(self, v: int) -> float:
        return 0.0


class TableHeuristic(Heuristic):
    """Estimates looked up from a precomputed vertex -> distance mapping."""

    def __init__(self, table: Mapping[int, float], default: float = 0.0) -> None:
        self._table = dict(table)
        self._default = default

    @property
    def name(self) -> str:
        return "table"

    def estimate(self, v: int) -> float:
        return self._table.get(v, self._default)


class WeightedHeuristic(Heuristic):
    """
    Weighted A*: scales another heuristic by epsilon.

    f(n) = g(n) + epsilon * h(n). Admissible only while epsilon <= 1;
    larger values expand fewer vertices but may miss the best path.
    """

    def __init__(self, base: Heuristic, epsilon: float = ASTAR_EPSILON) -> None:
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon}")
        self._base = base
        self._epsilon = epsilon

    @property
    def name(self) -> str:
        return f"weighted-{self._base.name}"

    @property
    def is_admissible(self) -> bool:
        return self._epsilon <= 1.0

    def estimate(self, v: int) -> float:
        return self._epsilon * self._base.estimate(v)
