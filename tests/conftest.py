import numpy as np
import pytest

from TourBench import DistanceMatrix

# Classic four-city instance; the optimum from city 0 is 0 -> 1 -> 3 -> 2 -> 0 with cost 80.
CLASSIC_4 = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]

TWO_CITIES = [[0, 5], [5, 0]]

ONE_CITY = [[0]]


@pytest.fixture
def classic_matrix() -> DistanceMatrix:
    return DistanceMatrix(CLASSIC_4)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


def random_symmetric(n: int, rng: np.random.Generator, low: int = 1, high: int = 100) -> DistanceMatrix:
    upper = np.triu(rng.integers(low, high + 1, size=(n, n)), k=1)
    return DistanceMatrix(upper + upper.T)


def random_euclidean(n: int, rng: np.random.Generator) -> DistanceMatrix:
    return DistanceMatrix.from_coordinates(rng.random((n, 2)) * 100.0)
