"""In-place quicksort with Lomuto partitioning."""

from __future__ import annotations

import random
import sys
from typing import MutableSequence, Sequence

_TEST_VECTORS = [
    [0, 8, 1, 7, 2, 6, 3, 5, 4],
    [0, 1, 0, 6, 10, 10, 0, 0, 1, 2, 5, 10, 9, 6, 2, 3, 3, 1, 7],
    [-1, -3, -2],
    [2, 2, 2],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
]


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` around its last item; return its index."""
    pivot = values[end]
    i = start - 1
    for j in range(start, end):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[end] = values[end], values[i + 1]
    return i + 1


def quicksort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place."""
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = partition(values, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))


def random_shuffle(values: MutableSequence[int], rng: random.Random) -> None:
    """Permute ``values`` in place using ``rng``."""
    n = len(values)
    for i in range(n - 1):
        j = rng.randint(i, n - 1)
        values[i], values[j] = values[j], values[i]


def main(argv: Sequence[str] | None = None) -> int:
    for vector in _TEST_VECTORS:
        values = list(vector)
        expected = sorted(values)
        quicksort(values)
        diff = next((i for i, (a, b) in enumerate(zip(values, expected)) if a != b), None)
        if diff is None:
            print("Test OK ")
        else:
            print(f"Test FAILED: v[{diff}]={values[diff]}, expected={expected[diff]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())