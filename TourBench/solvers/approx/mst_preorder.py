from __future__ import annotations

import logging
from typing import List, Sequence

from TourBench.matrix import DistanceMatrix
from TourBench.solvers.approx.spanning_tree import Edge, minimum_spanning_tree, tree_weight
from TourBench.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    compute_cycle_cost,
    current_time,
    trivial_result,
)
from TourBench.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


def build_adjacency(n: int, edges: Sequence[Edge]) -> List[List[int]]:
    adjacency: List[List[int]] = [[] for _ in range(n)]
    for u, v, _ in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def preorder_walk(adjacency: Sequence[Sequence[int]], start: int) -> List[int]:
    """Depth-first first-visit order of a tree, neighbours in list order.

    Uses an explicit stack so deep trees do not hit the recursion limit; on a
    tree this gives exactly the recursive preorder.
    """
    visited = [False] * len(adjacency)
    order: List[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        for neighbor in reversed(adjacency[node]):
            if not visited[neighbor]:
                stack.append(neighbor)
    return order


class MSTApproximationSolver(BaseSolver):
    """Preorder walk of a minimum spanning tree, shortcut into a tour.

    Within twice the optimum when the matrix obeys the triangle inequality.
    The inequality is not checked here.
    """

    name = "mst_approximation"
    family = AlgorithmFamily.APPROXIMATION

    def solve(self, graph: DistanceMatrix, start: int = 0) -> AlgorithmResult:
        start_time = current_time()
        n = graph.size
        if n == 0:
            return trivial_result(self.name, graph, start, start_time)
        graph.check_city(start)
        if n < 2:
            return trivial_result(self.name, graph, start, start_time)

        tree = minimum_spanning_tree(graph)
        adjacency = build_adjacency(n, tree)
        order = preorder_walk(adjacency, start)
        path = order + [start]
        cost = compute_cycle_cost(graph, path)
        mst_weight = tree_weight(tree)
        logger.debug("mst approximation over %d cities: tree %.4f, tour %.4f", n, mst_weight, cost)
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=cost,
            elapsed=current_time() - start_time,
            status="complete",
            metadata={"mst_weight": mst_weight, "tree_edges": len(tree)},
        )


__all__ = ["MSTApproximationSolver", "build_adjacency", "preorder_walk"]
