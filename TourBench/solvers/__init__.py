from __future__ import annotations

from TourBench.solvers.approx import MSTApproximationSolver
from TourBench.solvers.base import AlgorithmResult, BaseSolver, SolverSpec
from TourBench.solvers.exact import BruteForceSolver
from TourBench.solvers.heuristics import NearestNeighborSolver
from TourBench.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    BruteForceSolver.name: SolverSpec(
        name=BruteForceSolver.name,
        cls=BruteForceSolver,
        family=BruteForceSolver.family,
    ),
    NearestNeighborSolver.name: SolverSpec(
        name=NearestNeighborSolver.name,
        cls=NearestNeighborSolver,
        family=NearestNeighborSolver.family,
    ),
    MSTApproximationSolver.name: SolverSpec(
        name=MSTApproximationSolver.name,
        cls=MSTApproximationSolver,
        family=MSTApproximationSolver.family,
    ),
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls()


__all__ = [
    "AlgorithmResult",
    "BaseSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "AlgorithmFamily",
    "get_solver",
    "BruteForceSolver",
    "NearestNeighborSolver",
    "MSTApproximationSolver",
]
