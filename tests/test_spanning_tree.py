"""Tests for Kruskal's spanning tree and the disjoint-set partition."""
import networkx as nx
import pytest

from TourBench import DisconnectedGraph, DistanceMatrix
from TourBench.solvers.approx import spanning_tree
from TourBench.solvers.approx.spanning_tree import (
    DisjointSet,
    Edge,
    enumerate_edges,
    minimum_spanning_tree,
    tree_weight,
)
from tests.conftest import random_euclidean, random_symmetric


def to_networkx(matrix: DistanceMatrix) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(range(matrix.size))
    for edge in enumerate_edges(matrix):
        graph.add_edge(edge.u, edge.v, weight=edge.weight)
    return graph


class TestDisjointSet:
    def test_singletons(self):
        partition = DisjointSet(3)
        assert [partition.find(i) for i in range(3)] == [0, 1, 2]

    def test_union_hangs_first_root_under_second(self):
        partition = DisjointSet(3)
        assert partition.union(0, 1)
        assert partition.parent == [1, 1, 2]

    def test_union_of_same_set_is_rejected(self):
        partition = DisjointSet(2)
        partition.union(0, 1)
        assert not partition.union(1, 0)

    def test_find_compresses_path(self):
        partition = DisjointSet(4)
        partition.union(0, 1)
        partition.union(1, 2)
        partition.union(2, 3)
        # 0 -> 1 -> 2 -> 3 before the lookup.
        assert partition.parent == [1, 2, 3, 3]
        assert partition.find(0) == 3
        assert partition.parent == [3, 3, 3, 3]

    def test_connected(self):
        partition = DisjointSet(4)
        partition.union(0, 2)
        assert partition.connected(2, 0)
        assert not partition.connected(0, 1)


class TestEnumerateEdges:
    def test_each_pair_once_in_row_order(self, classic_matrix):
        assert enumerate_edges(classic_matrix) == [
            Edge(0, 1, 10),
            Edge(0, 2, 15),
            Edge(0, 3, 20),
            Edge(1, 2, 35),
            Edge(1, 3, 25),
            Edge(2, 3, 30),
        ]


class TestMinimumSpanningTree:
    def test_classic_instance(self, classic_matrix):
        tree = minimum_spanning_tree(classic_matrix)
        assert tree == [Edge(0, 1, 10), Edge(0, 2, 15), Edge(0, 3, 20)]
        assert tree_weight(tree) == 45

    def test_equal_weights_keep_enumeration_order(self):
        matrix = DistanceMatrix([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
        assert minimum_spanning_tree(matrix) == [Edge(0, 1, 1), Edge(0, 2, 1)]

    @pytest.mark.parametrize("n", [0, 1])
    def test_trivial_instances_have_no_edges(self, n):
        assert minimum_spanning_tree(DistanceMatrix([[0] * n for _ in range(n)])) == []

    @pytest.mark.parametrize("n", [2, 5, 20, 60])
    def test_is_a_spanning_tree(self, rng, n):
        matrix = random_symmetric(n, rng)
        tree = minimum_spanning_tree(matrix)
        assert len(tree) == n - 1
        graph = nx.Graph()
        graph.add_nodes_from(range(n))
        graph.add_edges_from((edge.u, edge.v) for edge in tree)
        assert nx.is_tree(graph)

    @pytest.mark.parametrize("n", [6, 30])
    def test_weight_matches_networkx(self, rng, n):
        matrix = random_euclidean(n, rng)
        expected = nx.minimum_spanning_tree(to_networkx(matrix)).size(weight="weight")
        assert tree_weight(minimum_spanning_tree(matrix)) == pytest.approx(expected)

    def test_disconnected_graph(self, monkeypatch, classic_matrix):
        monkeypatch.setattr(spanning_tree, "enumerate_edges", lambda matrix: [Edge(0, 1, 10.0)])
        with pytest.raises(DisconnectedGraph) as excinfo:
            minimum_spanning_tree(classic_matrix)
        assert excinfo.value.accepted == 1
        assert excinfo.value.required == 3
