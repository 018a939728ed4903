from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from TourBench.utils.errors import IndexOutOfRange, InvalidDistanceMatrix

SYMMETRY_TOLERANCE = 1e-9


class DistanceMatrix:
    """Immutable symmetric distance matrix over cities ``0..n-1``.

    The constructor validates the matrix invariants (square, symmetric, zero
    diagonal, finite and non-negative weights) and stores the weights in a
    read-only numpy array. ``rows`` exposes the same weights as nested tuples,
    which is what the solvers index in their inner loops.
    """

    __slots__ = ("_weights", "_rows")

    def __init__(self, weights: np.ndarray | Sequence[Sequence[float]]):
        try:
            array = np.array(weights, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidDistanceMatrix(f"Distance matrix is not a numeric table: {exc}") from exc
        if array.ndim == 1 and array.size == 0:
            array = np.zeros((0, 0), dtype=float)
        self._validate(array)
        array.setflags(write=False)
        self._weights = array
        self._rows: Tuple[Tuple[float, ...], ...] = tuple(tuple(row) for row in array.tolist())

    @staticmethod
    def _validate(array: np.ndarray) -> None:
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise InvalidDistanceMatrix(f"Distance matrix must be square, got shape {array.shape}")
        if not np.all(np.isfinite(array)):
            raise InvalidDistanceMatrix("Distance matrix contains non-finite weights")
        if np.any(array < 0):
            raise InvalidDistanceMatrix("Distance matrix contains negative weights")
        if np.any(np.diag(array) != 0):
            raise InvalidDistanceMatrix("Distance matrix diagonal must be zero")
        if not np.allclose(array, array.T, rtol=0.0, atol=SYMMETRY_TOLERANCE):
            raise InvalidDistanceMatrix("Distance matrix must be symmetric")

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]] | np.ndarray, metric: str = "euclidean") -> "DistanceMatrix":
        coords = np.asarray(coordinates, dtype=float)
        if coords.size == 0:
            return cls(np.zeros((0, 0)))
        diff = coords[:, None, :] - coords[None, :, :]
        if metric.lower() == "manhattan":
            return cls(np.abs(diff).sum(axis=-1))
        return cls(np.linalg.norm(diff, axis=-1))

    @property
    def size(self) -> int:
        return self._weights.shape[0]

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        return self._rows

    def check_city(self, city: int) -> int:
        if not 0 <= city < self.size:
            raise IndexOutOfRange(city, self.size)
        return city

    def is_metric(self, tolerance: float = 1e-9) -> bool:
        """Return True when every triple satisfies the triangle inequality."""
        w = self._weights
        for k in range(self.size):
            detour = w[:, k, None] + w[None, k, :]
            if np.any(w - detour > tolerance):
                return False
        return True

    def tolist(self) -> list[list[float]]:
        return self._weights.tolist()

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Tuple[float, ...]]:
        return iter(self._rows)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("DistanceMatrix is indexed with matrix[i, j]; use matrix.rows[i] for a whole row")
        i, j = key
        return self._rows[self.check_city(i)][self.check_city(j)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return np.array_equal(self._weights, other._weights)

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"


def as_distance_matrix(graph: DistanceMatrix | np.ndarray | Sequence[Sequence[float]]) -> DistanceMatrix:
    if isinstance(graph, DistanceMatrix):
        return graph
    return DistanceMatrix(graph)


__all__ = ["DistanceMatrix", "as_distance_matrix"]
