"""A reading list stored in a text file, eight lines per book."""

from __future__ import annotations

import sys
from dataclasses import astuple, dataclass, fields
from pathlib import Path
from typing import Iterable, Iterator, Sequence

DEFAULT_PATH = "libri.txt"
_FIELDS_PER_BOOK = 8

MENU = (
    "[1]Inserisci libro\n[2]Cancella libro\n[3]Lista libri\n"
    "[4]Cerca per valutazione\n[5]Esci\n\n->"
)


@dataclass(frozen=True)
class Book:
    """A book as stored in the file, every field kept as text."""

    code: str
    title: str
    author: str
    year: str
    publisher: str
    length: str
    genre: str
    rating: str

    def format(self) -> str:
        return (
            f"Codice: {self.code}\nTitolo: {self.title}\nAutore: {self.author}\n"
            f"Anno di pubblicazione: {self.year}\nEditore: {self.publisher}\n"
            f"Lunghezza: {self.length}\nGenere: {self.genre}\n"
            f"Valutazione: {self.rating}\n\n"
        )


class DuplicateBookError(ValueError):
    """Raised when a book with an existing code is added."""


def parse_books(text: str) -> list[Book]:
    """Books from file text; a short final record is padded with empty fields.

    Later records whose code repeats an earlier one are dropped.
    """
    if not text:
        return []
    lines = text.split("\n")
    books: list[Book] = []
    seen: set[str] = set()
    for start in range(0, len(lines), _FIELDS_PER_BOOK):
        chunk = lines[start : start + _FIELDS_PER_BOOK]
        chunk += [""] * (_FIELDS_PER_BOOK - len(chunk))
        book = Book(*chunk)
        if book.code in seen:
            continue
        seen.add(book.code)
        books.append(book)
    return books


def format_books(books: Iterable[Book]) -> str:
    """File text for ``books``: one field per line, no final newline."""
    return "\n".join(field for book in books for field in astuple(book))


class Library:
    """Books backed by a file that must already exist."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._books: list[Book] = []
        self.load()

    def _read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def load(self) -> None:
        """Reload the books from the file."""
        self._books = parse_books(self._read())

    def add(self, book: Book) -> None:
        """Append ``book`` to the list and the file."""
        if book.code in self:
            raise DuplicateBookError(f"book {book.code} already present")
        record = format_books([book])
        separator = "\n" if self.path.stat().st_size > 0 else ""
        with open(self.path, "a", encoding="utf-8") as stream:
            stream.write(separator + record)
        self._books.append(book)

    def remove(self, code: str) -> bool:
        """Drop every line equal to ``code`` with the seven lines after it."""
        lines = iter(self._read().split("\n"))
        kept: list[str] = []
        removed = False
        for line in lines:
            if line == code:
                removed = True
                for _ in range(_FIELDS_PER_BOOK - 1):
                    next(lines, None)
                continue
            kept.append(line)
        self.path.write_text("\n".join(kept), encoding="utf-8")
        self.load()
        return removed

    def __contains__(self, code: object) -> bool:
        return any(book.code == code for book in self._books)

    def by_rating(self, rating: str) -> list[Book]:
        """Books whose rating starts with the same character as ``rating``."""
        key = rating[:1]
        return [book for book in self._books if book.rating[:1] == key]

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)


_PROMPTS = (
    "\nTitolo del Libro: ",
    "\nAutore del Libro: ",
    "\nAnno di pubblicazione: ",
    "\nCasa editrice: ",
    "\nNumero pagine: ",
    "\nGenere Libro: ",
    "\nValutazione Libro: ",
)


def _insert(library: Library) -> None:
    print("I N S E R I M E N T O   L I B R O\n")
    code = input("Codice Libro: ")
    if code in library:
        print("\n\nLibro gia' inserito\n")
        return
    values = [input(prompt) for prompt in _PROMPTS]
    library.add(Book(code, *values))


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive reading list; an optional argument names the file."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        library = Library(args[0] if args else DEFAULT_PATH)
    except OSError:
        return 0
    assert len(fields(Book)) == _FIELDS_PER_BOOK
    try:
        while True:
            try:
                choice = int(input(MENU).strip())
            except ValueError:
                choice = 0
            if choice == 1:
                _insert(library)
            elif choice == 2:
                print("C A N C E L L A   L I B R O")
                library.remove(input("\n\nCodice del Libro: "))
            elif choice == 3:
                print("L I S T A   L I B R I\n")
                books = list(library)
                if not books:
                    print("Lista vuota!!\n")
                print("".join(book.format() for book in books), end="")
            elif choice == 4:
                print("C E R C A   P E R   V A L U T A Z I O N E")
                rating = input("\n\nInserisci valutazione: ")
                if not list(library):
                    print("\nHEAD NULL ERROR\n")
                else:
                    print("".join(b.format() for b in library.by_rating(rating)), end="")
            elif choice == 5:
                return 0
            else:
                print("\n\nInput errato\n")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())