import random

from ke2tools.random_number import rand_num


def test_values_lie_in_range():
    values = [rand_num(-2.5, 4.0) for _ in range(500)]
    assert all(-2.5 <= v <= 4.0 for v in values)
    assert len(set(values)) > 1


def test_reversed_range_still_bounded():
    values = [rand_num(10.0, 5.0) for _ in range(200)]
    assert all(5.0 <= v <= 10.0 for v in values)


def test_empty_range_returns_start():
    assert rand_num(3.0, 3.0) == 3.0


def test_reproducible_with_seed():
    random.seed(1234)
    first = [rand_num(0.0, 1.0) for _ in range(5)]
    random.seed(1234)
    second = [rand_num(0.0, 1.0) for _ in range(5)]
    assert first == second