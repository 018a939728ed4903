"""Tests for the nearest-neighbour heuristic."""
import math

import pytest

from TourBench import DistanceMatrix, IndexOutOfRange, NearestNeighborSolver
from tests.conftest import ONE_CITY, TWO_CITIES, random_symmetric


class TestNearestNeighborSolver:
    def test_classic_instance(self, classic_matrix):
        # 0 -> 1 (10), 1 -> 3 (25), 3 -> 2 (30), 2 -> 0 (15)
        result = NearestNeighborSolver().solve(classic_matrix)
        assert result.path == [0, 1, 3, 2, 0]
        assert result.cost == 80
        assert result.status == "complete"

    def test_lowest_index_wins_ties(self):
        matrix = DistanceMatrix(
            [
                [0, 4, 4, 9],
                [4, 0, 7, 2],
                [4, 7, 0, 2],
                [9, 2, 2, 0],
            ]
        )
        result = NearestNeighborSolver().solve(matrix)
        assert result.path == [0, 1, 3, 2, 0]

    def test_visits_every_city_once(self, rng):
        matrix = random_symmetric(25, rng)
        result = NearestNeighborSolver().solve(matrix, start=7)
        assert result.path[0] == result.path[-1] == 7
        assert sorted(result.path[:-1]) == list(range(25))
        assert result.metadata["nodes_visited"] == 25

    def test_two_cities(self):
        result = NearestNeighborSolver()(TWO_CITIES)
        assert result.path == [0, 1, 0]
        assert result.cost == 10

    def test_one_city(self):
        result = NearestNeighborSolver()(ONE_CITY)
        assert result.path == [0]
        assert result.cost == 0

    def test_stops_early_when_no_city_is_reachable(self, monkeypatch, classic_matrix, caplog):
        # City 1 can only reach the already visited start city.
        blocked = [list(row) for row in classic_matrix.rows]
        blocked[1] = [10.0, 0.0, math.inf, math.inf]
        monkeypatch.setattr(DistanceMatrix, "rows", property(lambda self: tuple(map(tuple, blocked))))
        with caplog.at_level("WARNING", logger="TourBench.solvers.heuristics.nearest_neighbor"):
            result = NearestNeighborSolver().solve(classic_matrix)
        assert result.status == "incomplete"
        assert result.path == [0, 1, 0]
        assert result.cost == 20
        assert result.metadata["nodes_visited"] == 2
        assert "no unvisited neighbour" in caplog.text

    def test_invalid_start_city(self, classic_matrix):
        with pytest.raises(IndexOutOfRange):
            NearestNeighborSolver().solve(classic_matrix, start=-1)

    def test_deterministic(self, rng):
        matrix = random_symmetric(15, rng)
        first = NearestNeighborSolver().solve(matrix)
        second = NearestNeighborSolver().solve(matrix)
        assert first.path == second.path
        assert first.cost == second.cost
