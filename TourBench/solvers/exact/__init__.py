from TourBench.solvers.exact.brute_force import BruteForceSolver
from TourBench.solvers.exact.permutations import all_permutations, permutations

__all__ = [
    "BruteForceSolver",
    "all_permutations",
    "permutations",
]
