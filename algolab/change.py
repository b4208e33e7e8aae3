"""Greedy change-making with a finite set of coins, each usable once."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO


def greedy_change(amount: int, coins: Iterable[int]) -> list[int] | None:
    """Coins chosen greedily, largest first, to pay ``amount``.

    Returns the chosen coins in descending order, or None when the greedy
    choice cannot pay the whole amount.
    """
    remaining = amount
    used: list[int] = []
    for coin in sorted(coins, reverse=True):
        if remaining >= coin:
            remaining -= coin
            used.append(coin)
    if remaining > 0:
        return None
    return used


def _report(amount: int, coins: list[int]) -> None:
    used = greedy_change(amount, coins)
    if used is None:
        print(f"Remainder {amount} not dispensable with available coins")
        return
    print(f"Remainder {amount} dispensable with {len(used)} coins:")
    print("".join(f"{coin} " for coin in used))


def _run(stream: TextIO) -> int:
    tokens = stream.read().split()
    try:
        amount, n = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        print("Error during header reading", file=sys.stderr)
        return 1
    coins: list[int] = []
    for i in range(n):
        try:
            coins.append(int(tokens[2 + i]))
        except (IndexError, ValueError):
            print(f"Error during coin reading {i}", file=sys.stderr)
            return 1
    _report(amount, coins)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Invoke the program with: change input_file", file=sys.stderr)
        return 1
    path = args[0]
    if path == "-":
        return _run(sys.stdin)
    try:
        with open(path, encoding="utf-8") as stream:
            return _run(stream)
    except OSError:
        print(f"Cannot open {path}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())