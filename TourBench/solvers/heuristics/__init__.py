from TourBench.solvers.heuristics.nearest_neighbor import NearestNeighborSolver

__all__ = ["NearestNeighborSolver"]
