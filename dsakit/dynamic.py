"""Dynamic-programming and greedy optimisation routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["matrix_chain_order", "minimal_badness"]


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Minimum scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (1-based) has shape ``dimensions[i-1] x dimensions[i]``.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed for one matrix")
    if any(d < 0 for d in dims):
        raise ValueError("dimensions must be non-negative")
    count = len(dims) - 1
    cost = [[0] * (count + 1) for _ in range(count + 1)]
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][count]


def minimal_badness(preferred_ranks: Iterable[int]) -> int:
    """Least total distance between assigned and preferred ranks.

    Teams are handed ranks 1, 2, ... in order of their preferred rank, which
    minimises the sum of ``|assigned - preferred|``.
    """
    ranks = sorted(preferred_ranks)
    if any(rank < 1 for rank in ranks):
        raise ValueError("preferred ranks start at 1")
    return sum(abs(actual - wanted) for actual, wanted in enumerate(ranks, start=1))