from TourBench.config import BenchmarkConfig, DEFAULT_CONFIG
from TourBench.core import TourBench
from TourBench.matrix import DistanceMatrix
from TourBench.solvers import (
    AlgorithmResult,
    BaseSolver,
    BruteForceSolver,
    MSTApproximationSolver,
    NearestNeighborSolver,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    get_solver,
)
from TourBench.solvers.base import compute_cycle_cost
from TourBench.tsplib import load_tsplib, parse_tsplib
from TourBench.utils.errors import (
    DisconnectedGraph,
    IndexOutOfRange,
    InvalidDistanceMatrix,
    MalformedInput,
    TourBenchError,
)
from TourBench.utils.taxonomy import AlgorithmFamily

__all__ = [
    "TourBench",
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "BenchmarkConfig",
    "BruteForceSolver",
    "DEFAULT_CONFIG",
    "DisconnectedGraph",
    "DistanceMatrix",
    "IndexOutOfRange",
    "InvalidDistanceMatrix",
    "MSTApproximationSolver",
    "MalformedInput",
    "NearestNeighborSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "TourBenchError",
    "compute_cycle_cost",
    "get_solver",
    "load_tsplib",
    "parse_tsplib",
]
