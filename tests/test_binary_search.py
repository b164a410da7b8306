import bisect
import operator

import pytest

from ke2tools.binary_search import binary_search

SEQUENCES = [
    [1],
    [1, 3, 5, 7, 9],
    [2, 2, 2, 4, 4, 8],
    [0, 10, 20, 30, 40, 50, 60, 70],
]


@pytest.mark.parametrize("seq", SEQUENCES)
@pytest.mark.parametrize("value", [-1, 0, 1, 2, 3, 4, 5, 8, 9, 10, 45, 100])
def test_matches_upper_bound(seq, value):
    assert binary_search(seq, value) == bisect.bisect_right(seq, value)


@pytest.mark.parametrize("seq", SEQUENCES)
@pytest.mark.parametrize("value", [-1, 0, 1, 2, 3, 4, 5, 8, 9, 10, 45, 100])
def test_equal_returns_matching_index(seq, value):
    result = binary_search(seq, value, operator.lt, operator.eq)
    if value in seq:
        assert seq[result] == value
        assert result == bisect.bisect_right(seq, value) - 1
    else:
        assert result == bisect.bisect_right(seq, value)


def test_value_before_everything():
    assert binary_search([10, 20, 30], 5) == 0


def test_value_after_everything():
    seq = [10, 20, 30]
    assert binary_search(seq, 99) == len(seq)


def test_custom_descending_order():
    seq = [30, 20, 10]
    assert binary_search(seq, 25, lambda v, e: v > e) == 1


def test_custom_key_compare():
    records = [("a", 1), ("b", 4), ("c", 9)]
    idx = binary_search(records, 4, lambda v, r: v < r[1], lambda v, r: v == r[1])
    assert records[idx] == ("b", 4)


def test_empty_sequence_raises():
    with pytest.raises(ValueError):
        binary_search([], 3)