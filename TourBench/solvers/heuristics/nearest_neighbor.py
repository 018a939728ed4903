from __future__ import annotations

import logging

from TourBench.matrix import DistanceMatrix
from TourBench.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    compute_cycle_cost,
    current_time,
    trivial_result,
)
from TourBench.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class NearestNeighborSolver(BaseSolver):
    name = "nearest_neighbor"
    family = AlgorithmFamily.HEURISTIC

    def solve(self, graph: DistanceMatrix, start: int = 0) -> AlgorithmResult:
        start_time = current_time()
        n = graph.size
        if n == 0:
            return trivial_result(self.name, graph, start, start_time)
        graph.check_city(start)
        if n < 2:
            return trivial_result(self.name, graph, start, start_time)

        rows = graph.rows
        visited = [False] * n
        visited[start] = True
        path = [start]
        current = start
        status = "complete"

        for _ in range(n - 1):
            nearest_dist = float("inf")
            next_city = -1
            for city in range(n):
                # Strict comparison: the lowest index wins ties.
                if not visited[city] and rows[current][city] < nearest_dist:
                    nearest_dist = rows[current][city]
                    next_city = city
            if next_city == -1:
                logger.warning("no unvisited neighbour reachable from city %d after %d steps", current, len(path))
                status = "incomplete"
                break
            visited[next_city] = True
            path.append(next_city)
            current = next_city

        path.append(start)
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=compute_cycle_cost(graph, path),
            elapsed=current_time() - start_time,
            status=status,
            metadata={"nodes_visited": len(path) - 1},
        )


__all__ = ["NearestNeighborSolver"]
