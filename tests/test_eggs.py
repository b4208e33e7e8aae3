from algolab.eggs import fibonacci_eggs, main


def test_known_answer():
    assert fibonacci_eggs() == 301


def test_answer_satisfies_properties():
    n = fibonacci_eggs()
    assert n % 7 == 0
    assert all(n % k == 1 for k in range(2, 7))


def test_answer_is_minimal():
    n = fibonacci_eggs()
    smaller = [
        m for m in range(1, n)
        if m % 7 == 0 and all(m % k == 1 for k in range(2, 7))
    ]
    assert smaller == []


def test_main_prints_answer(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(fibonacci_eggs())