"""A bounded address book with exact and partial search."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

MAX_CONTACTS = 1000

MENU = "[1]Nuovo Contatto [2]Ricerca [3]Ricerca Avanzata [4]Mostra Contatti [0]Esci\n->"


@dataclass(frozen=True)
class Contact:
    """A name with its phone number."""

    name: str
    number: str

    def format(self) -> str:
        return f"Nome: {self.name}\nNumero: {self.number}\n\n"


class AddressBookFull(Exception):
    """Raised when a contact is added to a full address book."""


class AddressBook:
    """Contacts kept in insertion order, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_CONTACTS) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._contacts: list[Contact] = []

    def add(self, name: str, number: str) -> Contact:
        """Append a contact; raise AddressBookFull when there is no room."""
        if len(self._contacts) >= self.capacity:
            raise AddressBookFull("address book is full")
        contact = Contact(name, number)
        self._contacts.append(contact)
        return contact

    def _lookup(self, matches: Callable[[str], bool]) -> list[Contact]:
        by_name = [c for c in self._contacts if matches(c.name)]
        if by_name:
            return by_name
        return [c for c in self._contacts if matches(c.number)]

    def search(self, query: str) -> list[Contact]:
        """Contacts whose name equals ``query``; failing that, whose number does."""
        return self._lookup(lambda field: field == query)

    def search_partial(self, query: str) -> list[Contact]:
        """Like :meth:`search`, but ``query`` need only occur inside the field."""
        return self._lookup(lambda field: query in field)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)


def _print_results(query: str, results: list[Contact]) -> None:
    print(f"Hai cercato {query}:\n")
    if not results:
        print("Nessun risultato.\n")
        return
    print("".join(c.format() for c in results), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive address book on standard input and output."""
    book = AddressBook()
    try:
        while True:
            try:
                choice = int(input(MENU).strip())
            except ValueError:
                continue
            if choice == 1:
                name = input("\nInserisci il nome:\n->")
                number = input(f"\nInserisci il numero di {name}:\n->")
                try:
                    book.add(name, number)
                except AddressBookFull:
                    print("\nRubrica piena!\n")
            elif choice == 2:
                query = input("Cerca contatto:\n->")
                _print_results(query, book.search(query))
            elif choice == 3:
                query = input("Cerca contatto:\n->")
                _print_results(query, book.search_partial(query))
            elif choice == 4:
                for i, contact in enumerate(book):
                    print(f"[{i}]:\n{contact.format()}", end="")
            elif choice == 0:
                return 1
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())