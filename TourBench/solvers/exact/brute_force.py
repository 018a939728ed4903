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
from TourBench.solvers.exact.permutations import permutations
from TourBench.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class BruteForceSolver(BaseSolver):
    """Exhaustive search over every ordering of the non-start cities.

    Runs in Θ((n-1)!) and is only practical up to roughly eleven cities. No
    pruning is applied: the solver is the reference baseline the other
    solvers are measured against.
    """

    name = "brute_force"
    family = AlgorithmFamily.EXACT

    def solve(self, graph: DistanceMatrix, start: int = 0) -> AlgorithmResult:
        start_time = current_time()
        n = graph.size
        if n == 0:
            return trivial_result(self.name, graph, start, start_time)
        graph.check_city(start)
        if n < 2:
            return trivial_result(self.name, graph, start, start_time)

        others = [city for city in range(n) if city != start]
        best_cost = float("inf")
        best_path: list[int] = []
        evaluated = 0

        for perm in permutations(others):
            candidate = [start, *perm, start]
            cost = compute_cycle_cost(graph, candidate)
            evaluated += 1
            # Strict comparison keeps the first optimum found.
            if cost < best_cost:
                best_cost = cost
                best_path = candidate

        elapsed = current_time() - start_time
        logger.debug("brute force over %d cities evaluated %d tours in %.4fs", n, evaluated, elapsed)
        return AlgorithmResult(
            name=self.name,
            path=best_path,
            cost=best_cost,
            elapsed=elapsed,
            status="complete",
            metadata={"permutations_evaluated": evaluated},
        )


__all__ = ["BruteForceSolver"]
