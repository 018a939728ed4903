from __future__ import annotations


class TourBenchError(Exception):
    """Base class for errors raised by TourBench."""


class InvalidDistanceMatrix(TourBenchError, ValueError):
    """Raised when a matrix is not square, symmetric, zero-diagonal, finite and non-negative."""


class IndexOutOfRange(TourBenchError, IndexError):
    """Raised when a tour or start city references a city outside the matrix."""

    def __init__(self, index: int, size: int):
        super().__init__(f"City index {index} outside [0, {size})")
        self.index = index
        self.size = size


class DisconnectedGraph(TourBenchError, ValueError):
    """Raised when a spanning tree cannot connect every city."""

    def __init__(self, accepted: int, required: int):
        super().__init__(f"Spanning tree has {accepted} edges, expected {required}")
        self.accepted = accepted
        self.required = required


class MalformedInput(TourBenchError, ValueError):
    """Raised when a TSPLIB document cannot be turned into a distance matrix."""


__all__ = [
    "DisconnectedGraph",
    "IndexOutOfRange",
    "InvalidDistanceMatrix",
    "MalformedInput",
    "TourBenchError",
]
