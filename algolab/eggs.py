"""Fibonacci's eggs: smallest multiple of 7 leaving remainder 1 modulo 2..6."""

from __future__ import annotations

import sys
from typing import Sequence


def fibonacci_eggs() -> int:
    """Smallest n > 0 divisible by 7 with n % k == 1 for k in 2..6."""
    n = 7
    while not all(n % k == 1 for k in range(2, 7)):
        n += 7
    return n


def main(argv: Sequence[str] | None = None) -> int:
    """Print the number of eggs; the command takes no arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        print("usage: eggs (no arguments)", file=sys.stderr)
        return 1
    print(fibonacci_eggs())
    return 0


if __name__ == "__main__":
    sys.exit(main())