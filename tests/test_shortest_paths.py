"""
Unit tests for the ShortestPaths engine (Dijkstra and A*).
"""

import math

import pytest

from densegraph.graph import UnknownVertexError, directed_graph
from densegraph.heuristics import EuclideanHeuristic, ManhattanHeuristic, TableHeuristic
from densegraph.paths import (
    ArrayPathStore,
    DictPathStore,
    EdgeWeights,
    PathResult,
    ShortestPaths,
    astar,
    dijkstra,
)

# Directed road network with unique shortest paths from vertex 1
ROADS = [
    (1, 2, 7.0),
    (1, 3, 9.0),
    (1, 6, 14.0),
    (2, 3, 10.0),
    (2, 4, 15.0),
    (3, 4, 11.0),
    (3, 6, 2.0),
    (6, 5, 9.0),
    (4, 5, 6.0),
]

EXPECTED_DISTANCES = {1: 0.0, 2: 7.0, 3: 9.0, 4: 20.0, 5: 20.0, 6: 11.0}
EXPECTED_PREDECESSORS = {1: 0, 2: 1, 3: 1, 4: 3, 5: 6, 6: 3}

# Lower bounds on the remaining distance to vertex 5
ROAD_ESTIMATES = {1: 15.0, 2: 20.0, 3: 10.0, 4: 5.0, 5: 0.0, 6: 9.0}


@pytest.fixture
def roads():
    """The ROADS network and its weight table."""
    g = directed_graph()
    for _ in range(6):
        g.add()
    weights = EdgeWeights(g)
    for u, v, w in ROADS:
        weights.add(u, v, w)
    return g, weights


def _snapshot(paths: ShortestPaths, g) -> tuple[dict[int, float], dict[int, int]]:
    distances = {v: paths.distance(v) for v in g.vertices()}
    predecessors = {v: paths.get_predecessor(v) for v in g.vertices()}
    return distances, predecessors


class TestDijkstra:
    """Test single-source search with no heuristic."""

    def test_distances_and_predecessors(self, roads):
        """All distances and predecessors match hand-computed values."""
        g, weights = roads
        paths = dijkstra(g, 1, weights)
        distances, predecessors = _snapshot(paths, g)
        assert distances == EXPECTED_DISTANCES
        assert predecessors == EXPECTED_PREDECESSORS

    def test_path_to(self, roads):
        """path_to walks predecessors back to the source."""
        g, weights = roads
        paths = dijkstra(g, 1, weights)
        assert paths.path_to(5) == [1, 3, 6, 5]
        assert paths.path_to(4) == [1, 3, 4]
        assert paths.path_to(1) == [1]

    def test_set_paths_idempotent(self, roads):
        """Running the search twice gives identical results."""
        g, weights = roads
        paths = ShortestPaths(g, 1, weight=weights)
        paths.set_paths()
        first = _snapshot(paths, g)
        paths.set_paths()
        assert _snapshot(paths, g) == first

    def test_destination_stops_early(self, roads):
        """The search ends once the destination is settled."""
        g, weights = roads
        paths = dijkstra(g, 1, weights, dest=2)
        assert paths.path_to() == [1, 2]
        assert paths.distance(2) == 7.0
        assert paths.distance(5) == math.inf
        assert paths.distance(6) == 14.0

    def test_reflects_graph_changes(self, roads):
        """A rerun after mutating the graph sees the new edges."""
        g, weights = roads
        paths = ShortestPaths(g, 1, weight=weights)
        paths.set_paths()
        weights.add(2, 5, 1.0)
        paths.set_paths()
        assert paths.distance(5) == 8.0
        assert paths.path_to(5) == [1, 2, 5]

    def test_weight_function(self):
        """Any callable can supply edge weights."""
        g = directed_graph()
        for _ in range(3):
            g.add()
        g.add(1, 2)
        g.add(2, 3)
        g.add(1, 3)
        paths = dijkstra(g, 1, lambda u, v: 10.0 if (u, v) == (1, 3) else 1.0)
        assert paths.path_to(3) == [1, 2, 3]
        assert paths.distance(3) == 2.0


class TestAStar:
    """Test that A* agrees with Dijkstra under admissible heuristics."""

    def test_full_search_matches_dijkstra(self, roads):
        """Without a destination A* settles the same tree as Dijkstra."""
        g, weights = roads
        plain = ShortestPaths(g, 1, weight=weights)
        guided = ShortestPaths(g, 1, weight=weights, heuristic=TableHeuristic(ROAD_ESTIMATES))
        plain.set_paths()
        guided.set_paths()
        assert _snapshot(guided, g) == _snapshot(plain, g)

    def test_destination_path_matches_dijkstra(self, roads):
        """A* to a destination finds Dijkstra's path and distance."""
        g, weights = roads
        paths = astar(g, 1, 5, weights, TableHeuristic(ROAD_ESTIMATES))
        assert paths.path_to() == [1, 3, 6, 5]
        assert paths.distance(5) == 20.0

    @pytest.mark.parametrize("heuristic_cls", [EuclideanHeuristic, ManhattanHeuristic])
    def test_grid(self, grid, heuristic_cls):
        """Coordinate heuristics reproduce Dijkstra's distances on a grid."""
        g, weights, coords = grid
        reference = dijkstra(g, 1, weights)
        heuristic = heuristic_cls(coords, dest=16)

        full = ShortestPaths(g, 1, weight=weights, heuristic=heuristic)
        full.set_paths()
        assert {v: full.distance(v) for v in g.vertices()} == {
            v: reference.distance(v) for v in g.vertices()
        }

        targeted = astar(g, 1, 16, weights, heuristic)
        assert targeted.distance(16) == reference.distance(16) == 6.0
        assert targeted.path_to() == reference.path_to(16) == [1, 2, 3, 4, 8, 12, 16]

    def test_plain_function_heuristic(self, roads):
        """A bare function works as the heuristic."""
        g, weights = roads
        paths = astar(g, 1, 5, weights, lambda v: ROAD_ESTIMATES[v])
        assert paths.path_to() == [1, 3, 6, 5]


class TestPathStores:
    """Test interchangeable result storage."""

    def test_array_store_matches_dict_store(self, roads):
        """numpy-backed storage gives the same answers as dicts."""
        g, weights = roads
        with_dict = dijkstra(g, 1, weights, store=DictPathStore())
        with_array = dijkstra(g, 1, weights, store=ArrayPathStore())
        assert _snapshot(with_array, g) == _snapshot(with_dict, g)
        assert with_array.path_to(5) == [1, 3, 6, 5]

    def test_array_store_resizes(self, roads):
        """The array grows with the graph between runs."""
        g, weights = roads
        store = ArrayPathStore()
        paths = ShortestPaths(g, 1, weight=weights, store=store)
        paths.set_paths()
        assert len(store.distances) == 6
        v = g.add()
        weights.add(5, v, 1.0)
        paths.set_paths()
        assert len(store.distances) == 7
        assert paths.distance(v) == 21.0

    @pytest.mark.parametrize("store_cls", [DictPathStore, ArrayPathStore])
    def test_unknown_vertex_reads_neutral(self, roads, store_cls):
        """Vertices outside the graph read as unreached with no predecessor."""
        g, weights = roads
        paths = dijkstra(g, 1, weights, store=store_cls())
        assert paths.get_weight(99) == math.inf
        assert paths.get_predecessor(99) == 0


class TestPreconditions:
    """Test explicit errors for contract violations."""

    def test_path_before_search(self, roads):
        """Querying a path before set_paths raises RuntimeError."""
        g, weights = roads
        paths = ShortestPaths(g, 1, 5, weight=weights)
        with pytest.raises(RuntimeError):
            paths.path_to()

    def test_unreachable_vertex(self, roads):
        """Asking for a path to an unreachable vertex raises ValueError."""
        g, weights = roads
        isolated = g.add()
        paths = dijkstra(g, 1, weights)
        assert paths.distance(isolated) == math.inf
        assert paths.get_predecessor(isolated) == 0
        with pytest.raises(ValueError, match="not reachable"):
            paths.path_to(isolated)

    def test_no_destination(self, roads):
        """path_to() with no argument needs a destination."""
        g, weights = roads
        paths = dijkstra(g, 1, weights)
        assert paths.dest == 0
        with pytest.raises(ValueError):
            paths.path_to()

    def test_missing_source(self, roads):
        """A source outside the graph is rejected."""
        g, weights = roads
        with pytest.raises(UnknownVertexError):
            dijkstra(g, 42, weights)


class TestResults:
    """Test PathResult and EdgeWeights helpers."""

    def test_result(self, roads):
        """result() bundles path and distance."""
        g, weights = roads
        paths = astar(g, 1, 5, weights, TableHeuristic(ROAD_ESTIMATES))
        result = paths.result()
        assert result == PathResult(source=1, target=5, path=[1, 3, 6, 5], distance=20.0)
        assert result.hops == 3
        assert str(result) == "1 -> 3 -> 6 -> 5 (distance 20)"

    def test_edge_weights_defaults(self, roads):
        """Unweighted edges use the default; missing edges are infinite."""
        g, _ = roads
        weights = EdgeWeights(g, default=2.5)
        assert weights(1, 2) == 2.5
        assert weights(2, 1) == math.inf
        weights.set(1, 2, 4.0)
        assert weights.get(1, 2) == 4.0

    def test_edge_weights_set_missing_edge(self, roads):
        """Setting a weight on a missing edge raises ValueError."""
        g, _ = roads
        with pytest.raises(ValueError):
            EdgeWeights(g).set(5, 1, 1.0)

    def test_edge_weights_discard(self, roads):
        """discard() removes the edge and its weight; a re-added edge starts fresh."""
        g, weights = roads
        weights.discard(3, 6)
        assert not g.contains(3, 6)
        assert weights(3, 6) == math.inf
        assert dijkstra(g, 1, weights).path_to(5) == [1, 6, 5]

        g.add(3, 6)
        assert weights(3, 6) == weights.default
        weights.discard(3, 6)
        weights.discard(3, 6)
        assert g.edge_size() == len(ROADS) - 1

    def test_edge_weights_prune(self, roads):
        """prune() drops weights left behind by edges removed through the graph."""
        g, weights = roads
        g.remove(3)
        assert weights.prune() == 4
        assert weights.prune() == 0
        assert weights(1, 2) == 7.0

    def test_undirected_weight_shared(self, grid):
        """An undirected edge has one weight in both directions."""
        _, weights, _ = grid
        assert weights(1, 5) == weights(5, 1) == 2.0
        assert weights(4, 8) == weights(8, 4) == 1.0
