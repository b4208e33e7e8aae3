"""The computer guesses a number the user has in mind, within a range."""

from __future__ import annotations

import enum
import random
import sys
from typing import Sequence

START_PROMPT = "Inserisci il valore minimo ed il valore massimo:\n->"
RETRY_PROMPT = "Errore, il range deve rispettare la regola 0<min<=max, riprova:\n->"
LIMIT_START_PROMPT = (
    "Inserisci il valore minimo, il valore massimo ed il numero di tentativi:\n->"
)
LIMIT_RETRY_PROMPT = "Errore, input non accettabile, riprova (min max nTentativi):\n->"
REPLY_ERROR = (
    "\nErrore, le scelte possibili sono [1]giusto [2]piu' grande [3]piu' piccolo\n"
)


class Reply(enum.IntEnum):
    """The user's answer to a guess, numbered as in the prompt."""

    CORRECT = 1
    HIGHER = 2
    LOWER = 3


class Guesser:
    """Guesses at random inside a range that shrinks with every reply."""

    def __init__(self, low: int, high: int, rng: random.Random | None = None) -> None:
        if low < 1 or low > high:
            raise ValueError(f"the range must satisfy 0 < min <= max, got {low}..{high}")
        self.low = low
        self.high = high
        self._rng = rng if rng is not None else random.Random()
        self.attempts = 0
        self.last: int | None = None
        self.found = False

    def guess(self) -> int:
        """Draw a new guess from the current range and count the attempt."""
        if self.found:
            raise RuntimeError("the number has already been guessed")
        if self.low > self.high:
            raise ValueError(
                f"no number left between {self.low} and {self.high}: the replies contradict each other"
            )
        self.last = self._rng.randint(self.low, self.high)
        self.attempts += 1
        return self.last

    def feedback(self, reply: Reply | int) -> bool:
        """Apply the reply to the last guess; return True once it is correct."""
        answer = Reply(reply)
        if self.last is None:
            raise RuntimeError("no guess to reply to")
        if answer is Reply.CORRECT:
            self.found = True
        elif answer is Reply.HIGHER:
            self.low = self.last + 1
        else:
            self.high = self.last - 1
        self.last = None
        return self.found


def _read_setup(limited: bool) -> tuple[int, int, int | None]:
    first, retry = (
        (LIMIT_START_PROMPT, LIMIT_RETRY_PROMPT) if limited else (START_PROMPT, RETRY_PROMPT)
    )
    needed = 3 if limited else 2
    prompt = first
    while True:
        tokens = input(prompt).split()
        prompt = retry
        try:
            values = [int(tok) for tok in tokens[:needed]]
        except ValueError:
            continue
        if len(values) < needed:
            continue
        low, high = values[0], values[1]
        tries = values[2] if limited else None
        if low < 1 or low > high or (tries is not None and tries < 1):
            continue
        return low, high, tries


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive game; ``--limit`` asks for a maximum number of attempts."""
    args = list(sys.argv[1:] if argv is None else argv)
    limited = "--limit" in args
    try:
        low, high, tries = _read_setup(limited)
        guesser = Guesser(low, high)
        print("Ok, ora provo ad indovinare il tuo numero\n")
        while not guesser.found and (tries is None or guesser.attempts < tries):
            try:
                x = guesser.guess()
            except ValueError:
                print("\n\nRisposte incoerenti, non ci sono numeri possibili")
                return 1
            text = input(
                f"\n\nHo pensato a {x},\n\nRispetto a {x} il numero da indovinare e':"
                "\n\n[1] Giusto [2] Piu' grande [3] Piu' piccolo\n\n"
            )
            try:
                reply = Reply(int(text.strip()))
            except ValueError:
                print(REPLY_ERROR, end="")
                continue
            guesser.feedback(reply)
            if reply is not Reply.CORRECT:
                print(f"\n\nIl nuovo intervallo e': {guesser.low} - {guesser.high}")
    except EOFError:
        return 0
    if guesser.found:
        print(f"\n\n\nHo indovinato il tuo numero con {guesser.attempts} tentativi")
    else:
        print("\n\n\nHo terminato i tentativi, ho perso...")
    return 0


if __name__ == "__main__":
    sys.exit(main())