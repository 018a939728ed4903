from TourBench.utils.errors import (
    DisconnectedGraph,
    IndexOutOfRange,
    InvalidDistanceMatrix,
    MalformedInput,
    TourBenchError,
)
from TourBench.utils.taxonomy import AlgorithmFamily

__all__ = [
    "AlgorithmFamily",
    "DisconnectedGraph",
    "IndexOutOfRange",
    "InvalidDistanceMatrix",
    "MalformedInput",
    "TourBenchError",
]
