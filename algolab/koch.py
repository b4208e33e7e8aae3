"""Turtle graphics writing PostScript, with Koch curves and fractal trees."""

from __future__ import annotations

import math
import sys
from pathlib import Path
from typing import Sequence, TextIO

_MM_PER_POINT = 0.352777778


class Turtle:
    """A pen that draws into a PostScript stream; lengths are in millimetres."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.x = 2.0 * 72
        self.y = 7.0 * 72
        self.direction = 0.0
        stream.write("%!PS-Adobe-2.0\n")
        self._emit("moveto")

    def _emit(self, op: str) -> None:
        self._stream.write(f"{int(self.x)} {int(self.y)} {op}\n")

    def _advance(self, length: float) -> None:
        length /= _MM_PER_POINT
        self.x += length * math.cos(self.direction)
        self.y += length * math.sin(self.direction)

    def draw(self, length: float) -> None:
        """Draw a line forward."""
        self._advance(length)
        self._emit("lineto")

    def move(self, length: float) -> None:
        """Move forward without drawing."""
        self._advance(length)
        self._emit("moveto")

    def turn(self, angle: float) -> None:
        """Turn right by ``angle`` degrees."""
        self.direction -= math.pi * angle / 180.0

    def save_state(self) -> tuple[float, float, float]:
        """Current position and direction."""
        return (self.x, self.y, self.direction)

    def restore_state(self, state: tuple[float, float, float]) -> None:
        """Go back to a state returned by :meth:`save_state`."""
        self.x, self.y, self.direction = state
        self._emit("moveto")

    def set_color(self, r: float, g: float, b: float) -> None:
        """Set the stroke colour; components lie in [0, 1]."""
        self._stream.write(f"stroke\n{r:f} {g:f} {b:f} setrgbcolor\n")
        self.move(0)

    def close(self) -> None:
        """Finish the page."""
        self._stream.write("stroke\nshowpage\n")

    def __enter__(self) -> Turtle:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def koch(turtle: Turtle, length: float, order: int) -> None:
    """Draw the Koch curve of the given order and length."""
    if order == 0:
        turtle.draw(length)
        return
    for angle in (-60, 120, -60, None):
        koch(turtle, length / 3, order - 1)
        if angle is not None:
            turtle.turn(angle)


def fractal_tree(turtle: Turtle, length: float, order: int) -> None:
    """Draw a binary tree whose branches shrink by 0.7 at each level."""
    if order <= 0:
        return
    turtle.draw(length)
    state = turtle.save_state()
    turtle.turn(-30)
    fractal_tree(turtle, length * 0.7, order - 1)
    turtle.restore_state(state)
    turtle.turn(30)
    fractal_tree(turtle, length * 0.7, order - 1)


def _curves(turtle: Turtle) -> None:
    for order in range(4):
        koch(turtle, 50, order)
        turtle.move(-50)
        turtle.turn(-90)
        turtle.move(15)
        turtle.turn(90)
    koch(turtle, 50.0 / 3, 3)
    for angle, color in ((-60, (1, 0, 0)), (120, (0, 1, 0)), (-60, (0, 0, 1))):
        turtle.turn(angle)
        turtle.set_color(*color)
        koch(turtle, 50.0 / 3, 3)


def _snowflake(turtle: Turtle) -> None:
    colors = ((1, 0, 0), (0, 1, 0), (0, 0, 1))
    for i, color in enumerate(colors):
        if i:
            turtle.turn(120)
        turtle.set_color(*color)
        koch(turtle, 50, 4)


def _tree(turtle: Turtle) -> None:
    turtle.turn(-90)
    fractal_tree(turtle, 20, 6)


def main(argv: Sequence[str] | None = None) -> int:
    """Write the three drawings into the directory given, or the current one."""
    args = list(sys.argv[1:] if argv is None else argv)
    outdir = Path(args[0]) if args else Path(".")
    drawings = (
        ("koch-curve.ps", _curves),
        ("koch-snowflake.ps", _snowflake),
        ("fractal-tree.ps", _tree),
    )
    for name, painter in drawings:
        path = outdir / name
        try:
            with open(path, "w", encoding="ascii") as stream, Turtle(stream) as turtle:
                painter(turtle)
        except OSError:
            print(f"Cannot open {path}. Stop", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())