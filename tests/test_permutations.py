"""Tests for swap/restore permutation generation."""
import math

import pytest

from TourBench.solvers.exact import all_permutations, permutations


class TestPermutations:
    def test_swap_order(self):
        assert all_permutations([1, 2, 3]) == [
            (1, 2, 3),
            (1, 3, 2),
            (2, 1, 3),
            (2, 3, 1),
            (3, 2, 1),
            (3, 1, 2),
        ]

    @pytest.mark.parametrize("k", [0, 1, 2, 4, 6])
    def test_k_factorial_distinct_orderings(self, k):
        items = list(range(10, 10 + k))
        perms = all_permutations(items)
        assert len(perms) == math.factorial(k)
        assert len(set(perms)) == len(perms)
        for perm in perms:
            assert sorted(perm) == items

    def test_empty_input_yields_one_empty_ordering(self):
        assert all_permutations([]) == [()]

    def test_input_is_not_mutated(self):
        items = [3, 1, 2]
        all_permutations(items)
        assert items == [3, 1, 2]

    def test_emitted_orderings_are_copies(self):
        gen = permutations([1, 2, 3])
        first = next(gen)
        second = next(gen)
        assert first == (1, 2, 3)
        assert second == (1, 3, 2)

    def test_abandoned_generator_closes_cleanly(self):
        gen = permutations([1, 2, 3, 4])
        next(gen)
        next(gen)
        gen.close()
        with pytest.raises(StopIteration):
            next(gen)

    def test_lazy(self):
        gen = permutations(range(12))
        assert next(gen) == tuple(range(12))
