"""The film-style "decryption" effect: random text settling into a message."""

from __future__ import annotations

import random
import sys
import time
from typing import Iterator, Sequence

_LOW = 33
_HIGH = 126
_DELAY = 0.15
_HIGHLIGHT = "\033[34m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[H"


def decrypt_frames(text: str, rng: random.Random | None = None) -> Iterator[str]:
    """Frames that converge on ``text``; the last one equals it.

    Spaces stay spaces; every other character is redrawn from the printable
    range until it matches, and once matched it stays fixed.
    """
    bad = sorted({ch for ch in text if ch != " " and not _LOW <= ord(ch) <= _HIGH})
    if bad:
        raise ValueError(f"characters outside the printable range: {bad!r}")
    gen = rng if rng is not None else random.Random()
    return _frames(text, gen)


def _frames(text: str, rng: random.Random) -> Iterator[str]:
    def scramble() -> str:
        return chr(rng.randint(_LOW, _HIGH))

    target = list(text)
    frame = [" " if ch == " " else scramble() for ch in text]
    while True:
        frame = [want if got == want else scramble() for got, want in zip(frame, target)]
        yield "".join(frame)
        if frame == target:
            return


def _paint(frame: str, text: str) -> str:
    return "".join(
        f"{_HIGHLIGHT}{got}{_RESET}" if got == want else got
        for got, want in zip(frame, text)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Play the effect on the arguments, or on a line read from input."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else input("Scrivi qualcosa: \n->")
    try:
        frames = decrypt_frames(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for frame in frames:
        print(_CLEAR, end="")
        print(text)
        print("\n")
        print(_paint(frame, text), end="", flush=True)
        if frame != text:
            time.sleep(_DELAY)
    print("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())