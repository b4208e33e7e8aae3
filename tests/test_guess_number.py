import random

import pytest

from algolab.guess_number import Guesser, Reply, main


def _play(secret, low, high, seed):
    guesser = Guesser(low, high, random.Random(seed))
    while True:
        x = guesser.guess()
        assert guesser.low <= x <= guesser.high
        if x == secret:
            guesser.feedback(Reply.CORRECT)
            return guesser
        guesser.feedback(Reply.HIGHER if secret > x else Reply.LOWER)


@pytest.mark.parametrize("secret", [1, 7, 50, 100])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_finds_secret_within_range_size(secret, seed):
    guesser = _play(secret, 1, 100, seed)
    assert guesser.found is True
    assert 1 <= guesser.attempts <= 100


def test_single_value_range_guesses_it():
    guesser = Guesser(5, 5, random.Random(3))
    assert guesser.guess() == 5
    assert guesser.feedback(Reply.CORRECT) is True
    assert guesser.attempts == 1


def test_higher_moves_low_bound():
    guesser = Guesser(1, 10, random.Random(4))
    x = guesser.guess()
    guesser.feedback(Reply.HIGHER)
    assert guesser.low == x + 1
    assert guesser.high == 10


def test_lower_moves_high_bound():
    guesser = Guesser(1, 10, random.Random(4))
    x = guesser.guess()
    assert guesser.feedback(3) is False
    assert guesser.high == x - 1
    assert guesser.low == 1


@pytest.mark.parametrize("low, high", [(0, 5), (-3, 5), (6, 5)])
def test_invalid_range(low, high):
    with pytest.raises(ValueError):
        Guesser(low, high)


def test_feedback_without_guess():
    with pytest.raises(RuntimeError):
        Guesser(1, 10).feedback(Reply.HIGHER)


def test_invalid_reply():
    guesser = Guesser(1, 10)
    guesser.guess()
    with pytest.raises(ValueError):
        guesser.feedback(4)


def test_contradictory_replies():
    guesser = Guesser(3, 3)
    guesser.guess()
    guesser.feedback(Reply.HIGHER)
    with pytest.raises(ValueError):
        guesser.guess()


def test_guess_after_found():
    guesser = Guesser(2, 2)
    guesser.guess()
    guesser.feedback(Reply.CORRECT)
    with pytest.raises(RuntimeError):
        guesser.guess()


def _feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_without_limit(monkeypatch, capsys):
    _feed(monkeypatch, ["0 4", "5 5", "1"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Ho indovinato il tuo numero con 1 tentativi" in out


def test_main_invalid_reply_counts_attempt(monkeypatch, capsys):
    _feed(monkeypatch, ["5 5", "9", "1"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Errore, le scelte possibili sono" in out
    assert "Ho indovinato il tuo numero con 2 tentativi" in out


def test_main_with_limit_loses(monkeypatch, capsys):
    _feed(monkeypatch, ["5 5 0", "5 5 1", "2"])
    assert main(["--limit"]) == 0
    out = capsys.readouterr().out
    assert "Ho terminato i tentativi, ho perso..." in out


def test_main_with_limit_wins(monkeypatch, capsys):
    _feed(monkeypatch, ["5 5 3", "1"])
    assert main(["--limit"]) == 0
    assert "Ho indovinato il tuo numero con 1 tentativi" in capsys.readouterr().out