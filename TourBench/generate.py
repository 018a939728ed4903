from __future__ import annotations

import hashlib

import numpy as np

from TourBench.matrix import DistanceMatrix


def random_weight_matrix(
    num_cities: int,
    rng: np.random.Generator,
    low: int = 1,
    high: int = 100,
) -> DistanceMatrix:
    """Symmetric matrix with integer weights drawn uniformly from [low, high]."""
    upper = np.triu(rng.integers(low, high + 1, size=(num_cities, num_cities)), k=1)
    return DistanceMatrix(upper + upper.T)


def random_euclidean_coordinates(num_cities: int, rng: np.random.Generator, scale: float = 100.0) -> np.ndarray:
    return rng.random((num_cities, 2)) * scale


def create_instance(num_cities: int, rng: np.random.Generator, low: int = 1, high: int = 100) -> dict:
    matrix = random_weight_matrix(num_cities, rng, low=low, high=high)
    digest = hashlib.sha1(matrix.weights.tobytes()).hexdigest()
    return {
        "num_cities": num_cities,
        "problem_id": digest,
        "distance_matrix": matrix.tolist(),
        "weight_range": [low, high],
    }


def create_euclidean_instance(num_cities: int, rng: np.random.Generator, scale: float = 100.0) -> dict:
    coordinates = random_euclidean_coordinates(num_cities, rng, scale)
    digest = hashlib.sha1(coordinates.tobytes()).hexdigest()
    return {
        "num_cities": num_cities,
        "problem_id": digest,
        "coordinates": coordinates.tolist(),
        "scale": scale,
    }


__all__ = [
    "create_euclidean_instance",
    "create_instance",
    "random_euclidean_coordinates",
    "random_weight_matrix",
]
