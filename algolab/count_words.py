"""Count the total and distinct words of a text, ignoring letter case."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TextIO

from algolab.hashtable import HashTable

WORDLEN = 100
TABLE_SIZE = 50000


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def read_words(stream: TextIO) -> Iterator[str]:
    """Yield the lower-cased alphabetic words of ``stream``.

    A word is cut after ``WORDLEN - 1`` letters; the character that follows
    a full word is consumed and dropped.
    """
    chars = iter(stream.read())
    word: list[str] = []
    for ch in chars:
        if _is_letter(ch):
            word.append(ch.lower())
            if len(word) == WORDLEN - 1:
                yield "".join(word)
                word = []
                next(chars, None)
        elif word:
            yield "".join(word)
            word = []
    if word:
        yield "".join(word)


def count_words(stream: TextIO) -> tuple[int, int]:
    """Return the number of words and of distinct words in ``stream``."""
    table = HashTable(TABLE_SIZE)
    total = 0
    for word in read_words(stream):
        table.insert(word, 1)
        total += 1
    return total, len(table)


def _report(stream: TextIO) -> None:
    table = HashTable(TABLE_SIZE)
    total = 0
    for word in read_words(stream):
        table.insert(word, 1)
        print(word)
        total += 1
    print(f"{total} words, of which {len(table)} distinct")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: count_words inputfile", file=sys.stderr)
        return 1
    path = args[0]
    if path == "-":
        _report(sys.stdin)
        return 0
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            _report(stream)
    except OSError:
        print(f"Cannot open {path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())