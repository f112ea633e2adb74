"""
Coordinate-based heuristics.

For graphs whose vertices sit at points in space (grids, road maps), the
straight-line or taxicab distance to the destination is a natural lower
bound on the remaining path weight, provided each edge weighs at least
the distance between its endpoints.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np

from densegraph.heuristics.base import Heuristic


class _CoordinateHeuristic(Heuristic):
    """Shared coordinate handling; vertices without coordinates estimate 0."""

    def __init__(self, coords: Mapping[int, Sequence[float]], dest: int) -> None:
        if dest not in coords:
            raise ValueError(f"Destination {dest} has no coordinates")
        self._coords = {v: np.asarray(p, dtype=np.float64) for v, p in coords.items()}
        self._dest = dest
        self._target = self._coords[dest]

    @property
    def dest(self) -> int:
        return self._dest

    def _offset(self, v: int) -> np.ndarray | None:
        point = self._coords.get(v)
        if point is None:
            return None
        return point - self._target


class EuclideanHeuristic(_CoordinateHeuristic):
    """Straight-line distance to the destination."""

    @property
    def name(self) -> str:
        return "euclidean"

    def estimate(self, v: int) -> float:
        offset = self._offset(v)
        if offset is None:
            return 0.0
        return float(np.linalg.norm(offset))


class ManhattanHeuristic(_CoordinateHeuristic):
    """Sum of per-axis distances to the destination (grid movement)."""

    @property
    def name(self) -> str:
        return "manhattan"

    def estimate(self, v: int) -> float:
        offset = self._offset(v)
        if offset is None:
            return 0.0
        return float(np.abs(offset).sum())
