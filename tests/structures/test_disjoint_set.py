import pytest

from graphtk.structures.disjoint_set import DisjointSet


class TestDisjointSet:
    def test_union_find(self):
        ds = DisjointSet([1, 2, 3, 4])
        ds.union(1, 2)
        ds.union(3, 4)
        assert ds.find(1) == ds.find(2)
        assert ds.find(3) == ds.find(4)
        assert ds.find(1) != ds.find(3)

    def test_union_reports_merge(self):
        ds = DisjointSet("abc")
        assert ds.union("a", "b")
        assert not ds.union("b", "a")
        assert ds.connected("a", "b")
        assert not ds.connected("a", "c")

    def test_find_unregistered_raises(self):
        ds = DisjointSet([1])
        with pytest.raises(KeyError):
            ds.find(2)
        with pytest.raises(KeyError):
            ds.union(1, 2)

    def test_find_is_stable_between_unions(self):
        ds = DisjointSet(range(6))
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(1, 3)
        root = ds.find(0)
        assert all(ds.find(i) == root for i in range(4))
        assert ds.find(4) == 4

    def test_union_by_rank(self):
        ds = DisjointSet(range(4))
        ds.union(0, 1)  # rank(0) = 1
        ds.union(2, 0)  # lower rank root 2 goes under 0
        assert ds.find(2) == 0
        ds.union(3, 3)
        assert ds.find(3) == 3

    def test_path_compression(self):
        ds = DisjointSet(range(5))
        # chain by merging equal-rank trees: 0 <- 2 built from {0,1} and {2,3}
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(0, 2)
        assert ds._parent[3] == 2
        assert ds.find(3) == 0
        assert ds._parent[3] == 0

    def test_long_chain_does_not_recurse(self):
        ds = DisjointSet(range(5000))
        # build a deep parent chain by hand
        for i in range(1, 5000):
            ds._parent[i] = i - 1
        assert ds.find(4999) == 0
        assert ds._parent[4999] == 0

    def test_add_and_components(self):
        ds = DisjointSet()
        assert ds.add("a")
        assert not ds.add("a")
        ds.add("b")
        ds.add("c")
        ds.union("a", "c")
        assert len(ds) == 3
        assert "b" in ds
        assert sorted(sorted(c) for c in ds.components()) == [["a", "c"], ["b"]]
