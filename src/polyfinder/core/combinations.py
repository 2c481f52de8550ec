"""Lexicographic k-combination enumeration."""

from collections.abc import Iterator


def iter_index_combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every k-subset of range(n) as increasing index tuples.

    Subsets are produced in lexicographic order. After each subset the
    rightmost index that has not reached its maximum value (n - k + t for
    position t) is incremented and every index after it is reset to the
    consecutive values that follow.

    Args:
        n: Size of the index range
        k: Subset size

    Yields:
        Tuples of k strictly increasing indices, C(n, k) in total

    Examples:
        >>> list(iter_index_combinations(4, 2))
        [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    """
    if k < 0 or k > n:
        return
    if k == 0:
        yield ()
        return

    indices = list(range(k))
    while True:
        yield tuple(indices)

        t = k - 1
        while t >= 0 and indices[t] == n - k + t:
            t -= 1
        if t < 0:
            return

        indices[t] += 1
        for i in range(t + 1, k):
            indices[i] = indices[i - 1] + 1
