import pytest

from disjointsets.offline_minimum import EXTRACT, offline_minimum


def test_zero_based_example():
    ops = [3, 7, -1, 2, -1, 8, 1, 5, -1, -1, -1, 0, 6, -1, 4]
    assert offline_minimum(ops) == [3, 2, 1, 5, 7, 0]


def test_one_based_example():
    ops = [4, 8, -1, 3, -1, 9, 2, 6, -1, -1, -1, 1, 7, -1, 5]
    assert offline_minimum(ops) == [4, 3, 2, 6, 8, 1]


def test_no_extractions():
    assert offline_minimum([5, 1, 3]) == []


def test_extract_right_after_each_insert_returns_inserts():
    values = [9, 2, 7, 4]
    ops = []
    for v in values:
        ops += [v, EXTRACT]
    assert offline_minimum(ops) == values


def test_all_inserts_first_gives_sorted_prefix():
    values = [6, 0, 4, 2, 5, 1, 3]
    ops = values + [EXTRACT] * 4
    assert offline_minimum(ops) == sorted(values)[:4]


def test_result_invariants():
    ops = [10, 3, -1, 8, -1, -1, 1, 6, 2, -1, 7, -1]
    result = offline_minimum(ops)
    inserted = [v for v in ops if v != EXTRACT]
    assert len(result) == ops.count(EXTRACT)
    assert len(set(result)) == len(result)
    assert set(result) <= set(inserted)


def test_extract_from_empty_raises():
    with pytest.raises(ValueError):
        offline_minimum([1, -1, -1, 2])


def test_duplicate_insert_raises():
    with pytest.raises(ValueError):
        offline_minimum([1, 2, 1, -1])