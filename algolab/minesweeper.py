"""Minesweeper on a square field, played from the terminal."""

from __future__ import annotations

import enum
import random
import sys
from typing import Sequence

DIM = 20
MINES_PER_LEVEL = 20
MAX_COUNT = 8

_NEIGHBOURS = ((1, 0), (1, 1), (1, -1), (0, 1), (0, -1), (-1, 1), (-1, 0), (-1, -1))

_MOVES = {"a": (0, -1), "d": (0, 1), "w": (-1, 0), "s": (1, 0)}

MENU = "[1]Gioca [2]Imposta difficolta' [3]Esci\n\n"
DIFFICULTY_MENU = "[1]20 bombe [2]40 bombe [3]60 bombe [4]80 bombe [5]100 bombe\n\n"
KEYS_HELP = "w/a/s/d: muovi  invio: scopri  f: bandiera  q: esci\n"


class Cell(enum.IntEnum):
    """States of a cell that is not a revealed count.

    A revealed cell holds the number of neighbouring mines, 0 to 8.
    """

    EMPTY = 0
    FLAG_FREE = 9
    FLAG_MINE = 10
    COVERED = 11
    MINE = 12


class Field:
    """A square grid of cells; ``x`` is the row and ``y`` the column."""

    def __init__(self, size: int = DIM, rng: random.Random | None = None) -> None:
        if size <= 0:
            raise ValueError(f"field size must be positive, got {size}")
        self.size = size
        self._rng = rng if rng is not None else random.Random()
        self.cells: list[list[int]] = [[Cell.EMPTY] * size for _ in range(size)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _neighbours(self, x: int, y: int):
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if self._inside(nx, ny):
                yield nx, ny

    def place_mines(self, difficulty: int, x: int, y: int) -> None:
        """Cover every cell and lay ``difficulty * 20`` mines.

        No mine lands in the rows or columns within one of the start cell.
        """
        mines = difficulty * MINES_PER_LEVEL
        allowed = sum(
            1
            for i in range(self.size)
            for j in range(self.size)
            if abs(x - i) > 1 and abs(y - j) > 1
        )
        if mines > allowed:
            raise ValueError(f"no room for {mines} mines, only {allowed} cells allowed")
        self.cells = [[Cell.COVERED] * self.size for _ in range(self.size)]
        while mines > 0:
            i = self._rng.randrange(self.size)
            j = self._rng.randrange(self.size)
            if self.cells[i][j] != Cell.MINE and abs(x - i) > 1 and abs(y - j) > 1:
                self.cells[i][j] = Cell.MINE
                mines -= 1

    def count_adjacent(self, x: int, y: int) -> int:
        """Number of mines, flagged or not, around ``(x, y)``."""
        return sum(
            1
            for nx, ny in self._neighbours(x, y)
            if self.cells[nx][ny] in (Cell.MINE, Cell.FLAG_MINE)
        )

    def reveal(self, x: int, y: int) -> bool:
        """Uncover ``(x, y)``, spreading over empty areas; False if it was a mine."""
        if self.cells[x][y] == Cell.MINE:
            return False
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            if self.cells[cx][cy] != Cell.COVERED:
                continue
            count = self.count_adjacent(cx, cy)
            self.cells[cx][cy] = count
            if count == 0:
                pending.extend(
                    (nx, ny)
                    for nx, ny in self._neighbours(cx, cy)
                    if self.cells[nx][ny] != Cell.MINE
                )
        return True

    def toggle_flag(self, x: int, y: int) -> None:
        """Put a flag on a covered cell or take it off again."""
        value = self.cells[x][y]
        if value == Cell.MINE:
            self.cells[x][y] = Cell.FLAG_MINE
        elif value == Cell.FLAG_MINE:
            self.cells[x][y] = Cell.MINE
        elif value == Cell.COVERED:
            self.cells[x][y] = Cell.FLAG_FREE
        elif value == Cell.FLAG_FREE:
            self.cells[x][y] = Cell.COVERED

    def is_won(self) -> bool:
        """True when no covered cell without a mine is left."""
        return all(value != Cell.COVERED for row in self.cells for value in row)

    def render(self, cursor: tuple[int, int] | None = None) -> str:
        """Text drawing of the field; the cursor cell uses ``<`` and ``>``."""
        lines = []
        for i, row in enumerate(self.cells):
            parts = []
            for j, value in enumerate(row):
                if value <= MAX_COUNT:
                    symbol = " " if value == 0 else str(value)
                elif value in (Cell.FLAG_FREE, Cell.FLAG_MINE):
                    symbol = "F"
                else:
                    symbol = "O"
                left, right = ("<", ">") if cursor == (i, j) else ("[", "]")
                parts.append(f"{left}{symbol}{right}")
            lines.append("".join(parts) + "\n")
        return "".join(lines) + "\n\n"

    def render_mines(self) -> str:
        """Text drawing showing where the mines are."""
        lines = [
            "".join(
                "[*]" if value in (Cell.MINE, Cell.FLAG_MINE) else "[ ]" for value in row
            )
            + "\n"
            for row in self.cells
        ]
        return "".join(lines) + "\n\n"


_LOST, _WON, _ABANDONED = 0, -1, -2


def _step(field: Field, x: int, y: int, key: str) -> tuple[int, int]:
    dx, dy = _MOVES[key]
    nx, ny = x + dx, y + dy
    return (nx, ny) if field._inside(nx, ny) else (x, y)


def _read_key() -> str:
    return input().strip().lower()


def _play(field: Field, difficulty: int) -> int | None:
    """Run one game; None means the player asked to leave the program."""
    x = y = 0
    print(KEYS_HELP)
    print(field.render((x, y)), end="")
    while True:
        key = _read_key()
        if key in _MOVES:
            x, y = _step(field, x, y, key)
        elif key == "":
            field.place_mines(difficulty, x, y)
            field.reveal(x, y)
            print(field.render((x, y)), end="")
            break
        elif key == "q":
            return None
        print(field.render((x, y)), end="")

    run = 1
    while run > 0:
        key = _read_key()
        if key in _MOVES:
            x, y = _step(field, x, y, key)
        elif key == "":
            run = 1 if field.reveal(x, y) else _LOST
        elif key == "f":
            field.toggle_flag(x, y)
        elif key == "q":
            run = _ABANDONED
        print(field.render((x, y)), end="")
        if run > 0 and field.is_won():
            run = _WON
    return run


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive game; an optional argument seeds the mine placement."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random(int(args[0])) if args else random.Random()
    difficulty = 1
    try:
        while True:
            try:
                choice = int(input(MENU).strip())
            except ValueError:
                choice = 0
            if choice == 1:
                field = Field(DIM, rng)
                outcome = _play(field, difficulty)
                if outcome is None:
                    return 1
                if outcome == _LOST:
                    print(field.render_mines(), end="")
                    print("\n\nHai perso\n")
                elif outcome == _WON:
                    print("Hai vinto\n")
                else:
                    print("Partita abbandonata\n")
                return 0
            if choice == 2:
                while True:
                    try:
                        difficulty = int(input(DIFFICULTY_MENU).strip())
                    except ValueError:
                        continue
                    if 1 <= difficulty <= 5:
                        break
            elif choice == 3:
                return 1
            else:
                print("\nInput invalido")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())