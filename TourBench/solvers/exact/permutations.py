from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple


def permutations(cities: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Yield every ordering of ``cities`` exactly once.

    Orderings are produced by swap/restore backtracking over a single working
    buffer: position ``k`` receives each element ``i >= k`` in turn, the suffix
    is permuted recursively, and the swap is undone before the next ``i``.
    The sequence is therefore deterministic but not lexicographic. Each
    ordering is yielded as a tuple copy of the buffer.
    """
    buffer = list(cities)
    size = len(buffer)

    def backtrack(k: int) -> Iterator[Tuple[int, ...]]:
        if k == size:
            yield tuple(buffer)
            return
        for i in range(k, size):
            buffer[k], buffer[i] = buffer[i], buffer[k]
            try:
                yield from backtrack(k + 1)
            finally:
                buffer[k], buffer[i] = buffer[i], buffer[k]

    yield from backtrack(0)


def all_permutations(cities: Sequence[int]) -> List[Tuple[int, ...]]:
    return list(permutations(cities))


__all__ = ["all_permutations", "permutations"]
