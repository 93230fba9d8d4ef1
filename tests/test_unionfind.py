import pytest

from mazelab.unionfind import UnionFind


def test_initially_disjoint():
    uf = UnionFind(5)
    assert uf.node_count == 5
    assert uf.connection_count == 0
    assert not uf.connected(0, 1)
    assert uf.connected(3, 3)


def test_connect_is_transitive_and_symmetric():
    uf = UnionFind(6)
    uf.connect(0, 1)
    uf.connect(1, 2)
    assert uf.connected(0, 2)
    assert uf.connected(2, 0)
    assert not uf.connected(0, 3)


def test_connection_count_only_grows_on_merge():
    uf = UnionFind(4)
    uf.connect(0, 1)
    uf.connect(1, 0)
    uf.connect(2, 3)
    uf.connect(0, 3)
    uf.connect(1, 2)
    assert uf.connection_count == 3


def test_full_merge_leaves_one_component():
    n = 20
    uf = UnionFind(n)
    for i in range(1, n):
        uf.connect(i - 1, i)
    assert uf.connection_count == n - 1
    assert all(uf.connected(0, i) for i in range(n))


def test_out_of_range_raises():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.connected(0, 7)