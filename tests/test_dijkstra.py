import logging

import numpy as np
import pytest
from costs import climb_cost
from dem import DEM
from graph import Graph, InvalidEdgeEndpoint, build_graph
from dijkstra import dijkstra, find_shortest_path
from paths import path_cost


@pytest.fixture
def chain():
    g = Graph(3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 3)
    return g


@pytest.fixture
def terrain_graph():
    dem = DEM(seed=7)
    dem.make_dem(9, 36)
    return dem.build_graph(climb_cost)


class TestDijkstraTable:
    def test_chain_distances(self, chain):
        table = dijkstra(chain, 0)
        assert table.source == 0
        assert [table.distance(v) for v in range(3)] == [0, 5, 8]
        assert [table.predecessor(v) for v in range(3)] == [None, 0, 1]

    def test_unreached_vertices(self, chain):
        table = dijkstra(chain, 1)
        assert table.distance(0) is None
        assert table.predecessor(0) is None
        assert not table.reachable(0)
        assert table.distance(2) == 3

    def test_parallel_edges_use_cheapest(self):
        g = Graph(2)
        g.add_edge(0, 1, 5)
        g.add_edge(0, 1, 2)
        assert dijkstra(g, 0).distance(1) == 2

    def test_prefers_cheaper_longer_route(self):
        g = Graph(4)
        g.add_edge(0, 3, 10)
        g.add_edge(0, 1, 1)
        g.add_edge(1, 2, 1)
        g.add_edge(2, 3, 1)
        table = dijkstra(g, 0)
        assert table.distance(3) == 3
        assert table.predecessor(3) == 2

    def test_invalid_source_raises(self, chain):
        with pytest.raises(InvalidEdgeEndpoint):
            dijkstra(chain, 3)

    def test_idempotent(self, terrain_graph):
        first = dijkstra(terrain_graph, 0)
        second = dijkstra(terrain_graph, 0)
        assert np.array_equal(first.dist, second.dist)
        assert np.array_equal(first.prev, second.prev)


class TestFindShortestPath:
    def test_chain(self, chain):
        path = find_shortest_path(chain, 0, 2)
        assert path.vertices == [0, 1, 2]
        assert path.total_cost == 8

    def test_2x2_grid(self):
        g = build_graph(np.zeros((2, 2), dtype=int), lambda d: 1)
        path = find_shortest_path(g, 0, 3)
        assert path.total_cost == 2
        assert path.vertices in ([0, 1, 3], [0, 2, 3])

    def test_ties_go_to_smallest_index(self):
        g = build_graph(np.zeros((2, 2), dtype=int), lambda d: 1)
        assert find_shortest_path(g, 0, 3).vertices == [0, 1, 3]

    def test_single_vertex(self):
        path = find_shortest_path(Graph(1), 0, 0)
        assert path.found
        assert path.vertices == [0]
        assert path.total_cost == 0

    def test_isolated_vertex_unreachable(self):
        g = Graph(4)
        g.add_edge(0, 1, 1)
        g.add_edge(1, 2, 1)
        g.add_edge(2, 0, 1)
        for other in range(3):
            assert not find_shortest_path(g, other, 3).found
            assert not find_shortest_path(g, 3, other).found

    def test_unreachable_is_not_trivial_path(self, chain):
        path = find_shortest_path(chain, 2, 0)
        assert not path.found
        assert path.vertices == []
        assert path.total_cost is None

    def test_invalid_target_raises(self, chain):
        with pytest.raises(InvalidEdgeEndpoint):
            find_shortest_path(chain, 0, 9)

    def test_cost_matches_edge_sum(self, terrain_graph):
        target = terrain_graph.vertex_count() - 1
        path = find_shortest_path(terrain_graph, 0, target)
        assert path.found
        assert path.vertices[0] == 0
        assert path.vertices[-1] == target
        assert path_cost(terrain_graph, path.vertices) == path.total_cost

    def test_idempotent(self, terrain_graph):
        target = terrain_graph.vertex_count() - 1
        assert find_shortest_path(terrain_graph, 0, target) == find_shortest_path(terrain_graph, 0, target)


class TestNegativeWeights:
    """Label-setting never revisits a settled vertex, even if a negative
    edge would later make it cheaper."""

    @pytest.fixture
    def graph(self):
        g = Graph(3)
        g.add_edge(0, 1, 2)
        g.add_edge(0, 2, 5)
        g.add_edge(2, 1, -10)
        return g

    def test_settled_vertex_not_improved(self, graph):
        table = dijkstra(graph, 0)
        assert table.distance(1) == 2
        assert table.predecessor(1) == 0

    def test_warns_once(self, graph, caplog):
        with caplog.at_level(logging.WARNING, logger="dijkstra"):
            dijkstra(graph, 0)
        negative = [r for r in caplog.records if "negative edge" in r.getMessage()]
        assert len(negative) == 1

    def test_no_warning_for_non_negative(self, chain, caplog):
        with caplog.at_level(logging.WARNING, logger="dijkstra"):
            dijkstra(chain, 0)
        assert "negative edge" not in caplog.text
