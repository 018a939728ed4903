from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Type

import numpy as np

from TourBench.matrix import DistanceMatrix, as_distance_matrix
from TourBench.utils.errors import IndexOutOfRange
from TourBench.utils.taxonomy import AlgorithmFamily


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a TSP solver."""

    name: str
    path: List[int] | None
    cost: float | None
    elapsed: float
    status: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def compute_cycle_cost(dist_matrix: DistanceMatrix, cycle: Sequence[int]) -> float:
    """Sum the weights of consecutive pairs in ``cycle``.

    The return leg is not added: callers pass an already closed cycle
    (``[0, 2, 1, 0]``). Any city outside the matrix raises IndexOutOfRange.
    """
    n = dist_matrix.size
    for city in cycle:
        if not 0 <= city < n:
            raise IndexOutOfRange(city, n)
    rows = dist_matrix.rows
    cost = 0.0
    for i in range(len(cycle) - 1):
        cost += rows[cycle[i]][cycle[i + 1]]
    return cost


def close_cycle(points: Iterable[int]) -> List[int]:
    cycle = list(points)
    if len(cycle) > 1 and cycle[0] != cycle[-1]:
        cycle.append(cycle[0])
    return cycle


def trivial_result(name: str, dist_matrix: DistanceMatrix, start: int, start_time: float) -> AlgorithmResult:
    """Result for instances with fewer than two cities."""
    path = [start] if dist_matrix.size == 1 else []
    return AlgorithmResult(
        name=name,
        path=path,
        cost=0.0,
        elapsed=current_time() - start_time,
        status="complete",
        metadata={"trivial": True},
    )


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily


class BaseSolver:
    """Common interface for TourBench solvers."""

    name: str
    family: AlgorithmFamily

    def solve(self, graph: DistanceMatrix, start: int = 0) -> AlgorithmResult:  # noqa: D401
        """Solve a TSP instance represented as a distance matrix."""
        raise NotImplementedError

    def __call__(self, graph: DistanceMatrix | np.ndarray | Sequence[Sequence[float]], start: int = 0) -> AlgorithmResult:
        return self.solve(as_distance_matrix(graph), start=start)


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "SolverSpec",
    "close_cycle",
    "compute_cycle_cost",
    "current_time",
    "trivial_result",
]
