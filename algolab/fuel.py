"""Fuel consumption: miles per gallon and litres per 100 km."""

from __future__ import annotations

import sys
from typing import Sequence

KM_PER_LITER_PER_MPG = 0.425


def miles_per_gallon(miles: float, gallons: float) -> float:
    """Miles driven per gallon consumed."""
    return miles / gallons


def liters_per_100km(mpg: float) -> float:
    """Litres needed for 100 km at ``mpg`` miles per gallon."""
    return 100 / (mpg * KM_PER_LITER_PER_MPG)


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for miles and gallons and print both consumption figures."""
    try:
        miles = float(input("Inserire il numero di miglia: \n"))
        gallons = float(input("Inserire la qunatita' di galloni consumati: \n"))
    except ValueError:
        print("Input non valido", file=sys.stderr)
        return 1
    try:
        mpg = miles_per_gallon(miles, gallons)
        liters = liters_per_100km(mpg)
    except ZeroDivisionError:
        print("Impossibile calcolare il consumo con valori nulli", file=sys.stderr)
        return 1
    print(f"\nConsumo in mi/gal {mpg:.2f}", end="")
    print(f"\n \nConsumo ogni 100km {liters:.3f} litri")
    return 0


if __name__ == "__main__":
    sys.exit(main())