import pytest

from algolab.continent import XY_MAX, Continent, is_correct


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (25, 75, Continent.EUROPE),
        (75, 75, Continent.ASIA),
        (25, 40, Continent.AMERICA),
        (75, 40, Continent.OCEANIA),
        (50, 10, Continent.AFRICA),
    ],
)
def test_interior_points_have_one_continent(x, y, expected):
    matches = [c for c in Continent if is_correct(c, x, y)]
    assert matches == [expected]


def test_bounds_are_inclusive():
    matches = {c for c in Continent if is_correct(c, 50, 50)}
    assert matches == {
        Continent.EUROPE,
        Continent.ASIA,
        Continent.AMERICA,
        Continent.OCEANIA,
    }


def test_plain_integers_are_accepted():
    assert is_correct(5, 1, 1) is True
    assert is_correct(1, 1, 1) is False


def test_every_generated_point_has_a_continent():
    for x in range(1, XY_MAX + 1):
        for y in range(1, XY_MAX + 1):
            assert any(is_correct(c, x, y) for c in Continent)


@pytest.mark.parametrize("guess", [0, 6, -1])
def test_invalid_guess_raises(guess):
    with pytest.raises(ValueError):
        is_correct(guess, 10, 10)