from TourBench.solvers.approx.mst_preorder import MSTApproximationSolver, build_adjacency, preorder_walk
from TourBench.solvers.approx.spanning_tree import DisjointSet, Edge, enumerate_edges, minimum_spanning_tree

__all__ = [
    "DisjointSet",
    "Edge",
    "MSTApproximationSolver",
    "build_adjacency",
    "enumerate_edges",
    "minimum_spanning_tree",
    "preorder_walk",
]
