import io
import itertools

import pytest

from disjointsets.dsu import Dsu, answer_queries, main


def test_fresh_elements_are_their_own_leaders():
    dsu = Dsu(5)
    assert len(dsu) == 5
    assert [dsu.leader(i) for i in range(5)] == list(range(5))
    assert not dsu.is_same(0, 1)


def test_unite_makes_elements_same():
    dsu = Dsu(6)
    assert dsu.unite(0, 1) is True
    assert dsu.unite(2, 3) is True
    assert dsu.is_same(0, 1)
    assert dsu.is_same(2, 3)
    assert not dsu.is_same(1, 2)
    assert dsu.unite(1, 3) is True
    assert dsu.is_same(0, 2)
    assert not dsu.is_same(0, 4)


def test_unite_twice_reports_no_change():
    dsu = Dsu(3)
    dsu.unite(0, 1)
    assert dsu.unite(1, 0) is False


def test_leader_is_shared_within_a_set():
    dsu = Dsu(10)
    for a, b in [(0, 1), (1, 2), (3, 4), (4, 5), (5, 6), (2, 6)]:
        dsu.unite(a, b)
    members = range(7)
    leaders = {dsu.leader(i) for i in members}
    assert len(leaders) == 1
    assert leaders.pop() in members
    assert all(dsu.leader(i) == i for i in range(7, 10))


def test_is_same_is_an_equivalence():
    dsu = Dsu(8)
    for a, b in [(0, 2), (2, 4), (1, 3), (5, 7)]:
        dsu.unite(a, b)
    for x, y, z in itertools.product(range(8), repeat=3):
        assert dsu.is_same(x, x)
        assert dsu.is_same(x, y) == dsu.is_same(y, x)
        if dsu.is_same(x, y) and dsu.is_same(y, z):
            assert dsu.is_same(x, z)


@pytest.mark.parametrize("bad", [-1, 4, 100])
def test_out_of_range_element_raises(bad):
    dsu = Dsu(4)
    with pytest.raises(IndexError):
        dsu.leader(bad)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Dsu(-1)


def test_answer_queries():
    queries = [(0, 0, 1), (1, 0, 1), (1, 0, 2), (0, 1, 2), (1, 0, 2)]
    assert answer_queries(4, queries) == [True, False, True]


def test_main_prints_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4\n0 0 1\n1 0 1\n1 1 2\n0 2 3\n"))
    assert main() == 0
    assert capsys.readouterr().out == "1\n0\n"