from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

from TourBench.config import DEFAULT_CONFIG, BenchmarkConfig
from TourBench.matrix import DistanceMatrix
from TourBench.solvers import SOLVER_FAMILIES, AlgorithmResult, BruteForceSolver, get_solver
from TourBench.tsplib import load_tsplib, parse_tsplib
from TourBench.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class TourBench:
    """Comparison pipeline: problem data -> distance matrix -> every configured solver."""

    def __init__(self, config: BenchmarkConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def compare(self, problem_data: Dict[str, Any], solvers: Iterable[str] | None = None) -> Dict[str, AlgorithmResult]:
        dist_matrix = self.to_distance_matrix(problem_data)
        start = int(problem_data.get("start_city", self.config.start_city))
        names = list(solvers) if solvers is not None else list(self.config.solvers)
        results: Dict[str, AlgorithmResult] = {}

        for name in names:
            solver = get_solver(name)
            if name == BruteForceSolver.name and dist_matrix.size > self.config.brute_force_max_cities:
                logger.info(
                    "skipping %s: %d cities exceeds limit of %d",
                    name,
                    dist_matrix.size,
                    self.config.brute_force_max_cities,
                )
                results[name] = AlgorithmResult(
                    name=name,
                    path=None,
                    cost=None,
                    elapsed=0.0,
                    status="skipped",
                    metadata={"reason": "too_many_cities"},
                )
                continue
            results[name] = solver.solve(dist_matrix, start=start)

        self._annotate(results, dist_matrix)
        return results

    def _annotate(self, results: Dict[str, AlgorithmResult], dist_matrix: DistanceMatrix) -> None:
        exact = results.get(BruteForceSolver.name)
        optimum = exact.cost if exact is not None and exact.status == "complete" else None
        is_metric = None
        for name, result in results.items():
            if result.cost is None:
                continue
            result.metadata["num_cities"] = dist_matrix.size
            if optimum is not None:
                result.metadata["gap"] = (result.cost - optimum) / optimum if optimum > 0 else 0.0
            if (
                SOLVER_FAMILIES.get(name) is AlgorithmFamily.APPROXIMATION
                and dist_matrix.size <= self.config.metric_check_max_cities
            ):
                if is_metric is None:
                    is_metric = dist_matrix.is_metric()
                result.metadata["is_metric"] = is_metric

    @staticmethod
    def to_distance_matrix(problem_data: Dict[str, Any]) -> DistanceMatrix:
        if problem_data.get("distance_matrix") is not None:
            return DistanceMatrix(problem_data["distance_matrix"])
        if problem_data.get("tsplib") is not None:
            return parse_tsplib(problem_data["tsplib"])
        if problem_data.get("tsplib_path") is not None:
            return load_tsplib(problem_data["tsplib_path"])
        if problem_data.get("coordinates") is None:
            raise ValueError("Problem data must contain 'distance_matrix', 'tsplib', 'tsplib_path' or 'coordinates'.")
        metric = problem_data.get("metric") or "euclidean"
        return DistanceMatrix.from_coordinates(problem_data["coordinates"], metric=metric)


__all__ = ["TourBench"]
