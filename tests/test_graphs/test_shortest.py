"""Tests for shortest path algorithms."""

import dataclasses

import pytest

from socialgraph.graphs import DistanceTable, OutOfRangeVertex, WeightedGraph, dijkstra


def bellman_ford_reference(G, source):
    """Reference distances by repeated edge relaxation (None = unreachable)."""
    dist = {v: None for v in G.vertices()}
    dist[source] = 0
    for _ in range(len(G)):
        for u, v, w in G.edges():
            for a, b in ((u, v), (v, u)):
                if dist[a] is not None and (dist[b] is None or dist[a] + w < dist[b]):
                    dist[b] = dist[a] + w
    return dist


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_triangle(self, triangle):
        """Test that the two-hop path beats the heavy direct edge."""
        table = dijkstra(triangle, 0)
        assert table.distances == {0: 0, 1: 4, 2: 5}
        assert table.parents == {0: None, 1: 0, 2: 1}

    def test_dijkstra_sample_network(self, sample_network):
        """Test friendship distances from Alice."""
        table = dijkstra(sample_network, 0)
        assert table.distances == {
            0: 0, 1: 14, 2: 1, 3: 16, 4: 11, 5: 12,
            6: 15, 7: 29, 8: 23, 9: 19, 10: 30,
        }
        assert table.path_to(7) == [0, 2, 3, 7]
        assert table.path_to(10) == [0, 2, 6, 10]

    def test_dijkstra_unreachable(self):
        """Test that unreachable vertices are flagged, distinct from zero."""
        G = WeightedGraph(4, [(0, 1, 0), (2, 3, 5)])
        table = dijkstra(G, 0)
        assert table[0] == 0
        assert table[1] == 0
        assert table[2] is None
        assert table[3] is None
        assert table.is_reachable(1)
        assert not table.is_reachable(2)
        assert table.reachable() == [0, 1]
        assert table.path_to(3) is None

    def test_dijkstra_parallel_edges(self):
        """Test that the lighter of two parallel edges is used."""
        G = WeightedGraph(2, [(0, 1, 7), (1, 0, 2)])
        assert dijkstra(G, 1)[0] == 2

    def test_dijkstra_stale_entries(self):
        """Test a graph where vertices are pushed several times."""
        G = WeightedGraph(
            4,
            [(0, 3, 10), (0, 1, 1), (1, 3, 5), (1, 2, 1), (2, 3, 1)],
        )
        table = dijkstra(G, 0)
        assert table.distances == {0: 0, 1: 1, 2: 2, 3: 3}
        assert table.path_to(3) == [0, 1, 2, 3]

    def test_dijkstra_single_vertex(self):
        table = dijkstra(WeightedGraph(1), 0)
        assert table.distances == {0: 0}
        assert table.path_to(0) == [0]

    def test_dijkstra_nonexistent_source(self, triangle):
        """Test Dijkstra with out-of-range source."""
        with pytest.raises(OutOfRangeVertex):
            dijkstra(triangle, 3)

    def test_table_lookup_out_of_range(self, triangle):
        table = dijkstra(triangle, 0)
        with pytest.raises(OutOfRangeVertex):
            table[5]

    def test_table_is_frozen_and_fresh(self, triangle):
        """Test that each call returns a new, frozen table."""
        first = dijkstra(triangle, 0)
        second = dijkstra(triangle, 0)
        assert isinstance(first, DistanceTable)
        assert first is not second
        assert first.distances is not second.distances
        with pytest.raises(dataclasses.FrozenInstanceError):
            first.source = 1


class TestDijkstraProperties:
    """Optimality checks on random graphs."""

    @pytest.mark.parametrize("vertex_count,edge_count", [(5, 3), (8, 12), (12, 40)])
    def test_matches_reference(self, random_graph, vertex_count, edge_count):
        """Test against a Bellman-Ford style reference computation."""
        G = random_graph(vertex_count, edge_count)
        for source in G.vertices():
            assert dijkstra(G, source).distances == bellman_ford_reference(G, source)

    def test_no_relaxable_edge(self, random_graph):
        """Test dist[v] <= dist[u] + w for every edge, both directions."""
        G = random_graph(10, 18)
        table = dijkstra(G, 0)
        assert table[0] == 0
        for u, v, w in G.edges():
            if table[u] is not None:
                assert table[v] <= table[u] + w
            if table[v] is not None:
                assert table[u] <= table[v] + w

    def test_paths_sum_to_distance(self, random_graph):
        """Test that reconstructed paths have the reported length."""
        G = random_graph(10, 20)
        table = dijkstra(G, 0)
        for target in table.reachable():
            path = table.path_to(target)
            assert path[0] == 0 and path[-1] == target
            total = 0
            for a, b in zip(path, path[1:]):
                total += min(w for n, w in G.neighbors(a) if n == b)
            assert total == table[target]
