"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from densegraph.graph import Graph, directed_graph, undirected_graph
from densegraph.paths import EdgeWeights


def build_star(graph: Graph, size: int = 4) -> Graph:
    """Add vertices 1..size and edges 1->1, 1->2, ..., 1->size."""
    for _ in range(size):
        graph.add()
    for v in range(1, size + 1):
        graph.add(1, v)
    return graph


@pytest.fixture
def directed_star() -> Graph:
    """Directed graph with vertices 1..4 and edges 1->1, 1->2, 1->3, 1->4."""
    return build_star(directed_graph())


@pytest.fixture
def undirected_star() -> Graph:
    """Undirected graph with vertices 1..4 and edges 1-1, 1-2, 1-3, 1-4."""
    return build_star(undirected_graph())


@pytest.fixture
def traversal_graph() -> Graph:
    """Directed graph: 1->1, 1->2, 1->3, 1->4, 2->5, 3->6."""
    g = directed_graph()
    for _ in range(6):
        g.add()
    for v in range(1, 5):
        g.add(1, v)
    g.add(2, 5)
    g.add(3, 6)
    return g


@pytest.fixture
def grid() -> tuple[Graph, EdgeWeights, dict[int, tuple[float, float]]]:
    """
    Undirected 4x4 grid with unit-length spacing.

    Vertex (row, col) is numbered row * 4 + col + 1. Horizontal edges weigh
    1, vertical edges weigh 2, except a cheap vertical corridor down column 3
    (weight 1). Returns the graph, its weights, and vertex coordinates.
    """
    g = undirected_graph()
    coords: dict[int, tuple[float, float]] = {}
    for row in range(4):
        for col in range(4):
            v = g.add()
            coords[v] = (float(col), float(row))

    weights = EdgeWeights(g)
    for row in range(4):
        for col in range(4):
            v = row * 4 + col + 1
            if col < 3:
                weights.add(v, v + 1, 1.0)
            if row < 3:
                weights.add(v, v + 4, 1.0 if col == 3 else 2.0)
    return g, weights, coords
