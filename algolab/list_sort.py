"""Bubble sort that repeats passes until no adjacent pair is out of order."""

from __future__ import annotations

import random
import sys
from itertools import pairwise
from typing import MutableSequence, Sequence


def is_sorted(values: Sequence[int]) -> bool:
    """True when no item is greater than the one after it."""
    return all(a <= b for a, b in pairwise(values))


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with repeated swapping passes."""
    while not is_sorted(values):
        for i in range(len(values) - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]


def main(argv: Sequence[str] | None = None) -> int:
    """Sort ten random values in 1..100; an optional argument seeds the generator."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random(int(args[0])) if args else random.Random()
    values = [rng.randint(1, 100) for _ in range(10)]
    for value in values:
        print(f"valore: {value}")
    print("\n\n")
    bubble_sort(values)
    for value in values:
        print(f"valore: {value}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())