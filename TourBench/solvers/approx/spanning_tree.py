from __future__ import annotations

import logging
from typing import List, NamedTuple

from TourBench.matrix import DistanceMatrix
from TourBench.utils.errors import DisconnectedGraph

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    u: int
    v: int
    weight: float


class DisjointSet:
    """Parent-pointer partition of ``0..n-1`` used for cycle detection.

    ``find`` compresses paths; ``union`` hangs the root of ``u`` under the
    root of ``v`` with no rank or size balancing, so the tree built by Kruskal
    among equal-weight alternatives depends only on edge order.
    """

    def __init__(self, size: int):
        self.parent = list(range(size))

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, u: int, v: int) -> bool:
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        self.parent[root_u] = root_v
        return True

    def connected(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)


def enumerate_edges(dist_matrix: DistanceMatrix) -> List[Edge]:
    rows = dist_matrix.rows
    n = dist_matrix.size
    return [Edge(i, j, rows[i][j]) for i in range(n) for j in range(i + 1, n)]


def minimum_spanning_tree(dist_matrix: DistanceMatrix) -> List[Edge]:
    """Kruskal's algorithm over the complete graph of ``dist_matrix``.

    Edges are sorted by weight with a stable sort, so ties keep their
    enumeration order. Returns the accepted edges in acceptance order.
    """
    n = dist_matrix.size
    required = max(n - 1, 0)
    edges = sorted(enumerate_edges(dist_matrix), key=lambda edge: edge.weight)
    partition = DisjointSet(n)
    tree: List[Edge] = []

    for edge in edges:
        if len(tree) == required:
            break
        if partition.find(edge.u) != partition.find(edge.v):
            partition.union(edge.u, edge.v)
            tree.append(edge)

    if len(tree) < required:
        raise DisconnectedGraph(len(tree), required)
    logger.debug("spanning tree over %d cities weighs %.4f", n, sum(edge.weight for edge in tree))
    return tree


def tree_weight(tree: List[Edge]) -> float:
    return float(sum(edge.weight for edge in tree))


__all__ = ["DisjointSet", "Edge", "enumerate_edges", "minimum_spanning_tree", "tree_weight"]
