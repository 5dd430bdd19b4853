"""
Combination helpers for bundle search.
"""

from math import comb
from typing import Any, Iterator, List, Sequence, Tuple


def k_combinations(items: Sequence[Any], k: int) -> Iterator[Tuple[Any, ...]]:
    """
    Yield every k-element subset of items, preserving input order.

    Subsets come out in lexicographic index order, so [a, b, c] with k=2
    yields (a, b), (a, c), (b, c). Works for any k; bundle search uses 2 and 3.

    Args:
        items: Sequence to choose from
        k: Subset size

    Returns:
        Iterator of tuples of length k (nothing when k > len(items) or k < 0)

    Example:
        >>> list(k_combinations(["a", "b", "c"], 2))
        [('a', 'b'), ('a', 'c'), ('b', 'c')]
    """
    pool = tuple(items)
    if k < 0 or k > len(pool):
        return

    current: List[Any] = []

    def backtrack(start: int) -> Iterator[Tuple[Any, ...]]:
        if len(current) == k:
            yield tuple(current)
            return
        for i in range(start, len(pool)):
            current.append(pool[i])
            yield from backtrack(i + 1)
            current.pop()

    yield from backtrack(0)


def count_combinations(n: int, k: int) -> int:
    """Number of k-subsets of n items (0 when k is out of range)"""
    if k < 0 or k > n:
        return 0
    return comb(n, k)
