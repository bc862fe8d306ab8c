import pytest
from hypothesis import given, strategies as st

from algokit.unionfind import UnionFind


@st.composite
def unions(draw):
    n = draw(st.integers(1, 12))
    pairs = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=20)
    )
    return n, pairs


def test_separate_components_stay_apart():
    uf = UnionFind(5)
    uf.union(1, 2)
    uf.union(3, 4)
    assert not uf.connected(2, 4)
    assert uf.connected(4, 3)
    assert uf.connected(1, 2)


def test_every_element_starts_alone():
    uf = UnionFind(4)
    assert [uf.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_size_tie_attaches_first_under_second():
    uf = UnionFind(2)
    uf.union(0, 1)
    assert uf.find(0) == 1


def test_rank_tie_attaches_second_under_first():
    uf = UnionFind(2, by_rank=True)
    uf.union(0, 1)
    assert uf.find(1) == 0


def test_transitivity():
    uf = UnionFind(6)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(4, 5)
    assert uf.connected(0, 2)
    assert not uf.connected(2, 4)


@pytest.mark.parametrize("bad", [-1, 3, 10])
def test_out_of_range_raises(bad):
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(bad)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        UnionFind(-1)


@given(unions())
def test_united_pairs_are_connected(data):
    n, pairs = data
    for by_rank in (False, True):
        uf = UnionFind(n, by_rank=by_rank)
        for a, b in pairs:
            uf.union(a, b)
        assert all(uf.connected(a, b) for a, b in pairs)


@given(unions())
def test_find_is_idempotent(data):
    n, pairs = data
    uf = UnionFind(n)
    for a, b in pairs:
        uf.union(a, b)
    for x in range(n):
        root = uf.find(x)
        assert uf.find(root) == root
        assert uf.connected(x, root)


@given(unions())
def test_size_and_rank_agree(data):
    n, pairs = data
    by_size, by_rank = UnionFind(n), UnionFind(n, by_rank=True)
    for a, b in pairs:
        by_size.union(a, b)
        by_rank.union(a, b)
    for a in range(n):
        for b in range(n):
            assert by_size.connected(a, b) == by_rank.connected(a, b)