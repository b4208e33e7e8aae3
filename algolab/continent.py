"""Guess-the-continent game on a 100 by 100 plane split into five regions."""

from __future__ import annotations

import enum
import random
import sys
import time
from typing import Sequence

XY_MAX = 100
_SHOW_SECONDS = 2
_CLEAR = "\033[2J\033[H"

PROMPT = (
    "\n\nindovina continente, premere: [1] Europa, [2] Asia, [3] America, "
    "[4] Oceania, [5] Africa\n"
)


class Continent(enum.IntEnum):
    """Continents, numbered as in the game menu."""

    EUROPE = 1
    ASIA = 2
    AMERICA = 3
    OCEANIA = 4
    AFRICA = 5


# Inclusive (x_min, x_max, y_min, y_max) bounds of each region.
_REGIONS = {
    Continent.EUROPE: (0, 50, 50, 100),
    Continent.ASIA: (50, 100, 50, 100),
    Continent.AMERICA: (0, 50, 25, 50),
    Continent.OCEANIA: (50, 100, 25, 50),
    Continent.AFRICA: (0, 100, 0, 25),
}


def is_correct(guess: int, x: int, y: int) -> bool:
    """True when ``(x, y)`` lies in the region of continent ``guess``."""
    x_min, x_max, y_min, y_max = _REGIONS[Continent(guess)]
    return x_min <= x <= x_max and y_min <= y <= y_max


def _ask_guess(x: int, y: int) -> int:
    while True:
        try:
            guess = int(input(PROMPT).strip())
        except ValueError:
            guess = 0
        if 1 <= guess <= 5:
            return guess
        print(f"\nInput non accettabile, riprova\n\n{x}, {y}", end="")


def _round(rng: random.Random) -> int:
    score = 0
    while True:
        x = rng.randint(1, XY_MAX)
        y = rng.randint(1, XY_MAX)
        print(f"{x}, {y}", end="", flush=True)
        time.sleep(_SHOW_SECONDS)
        print(_CLEAR, end="")
        if not is_correct(_ask_guess(x, y), x, y):
            return score
        score += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive game; an optional argument seeds the coordinates."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random(int(args[0])) if args else random.Random()
    try:
        while True:
            score = _round(rng)
            print(f"\n\npunteggio totale: {score}")
            answer = ""
            while answer not in ("y", "n"):
                answer = input("\n\nVuoi continuare a giocare? [y]Si [n]No\n->").strip()[:1]
            print(_CLEAR, end="")
            if answer == "n":
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())