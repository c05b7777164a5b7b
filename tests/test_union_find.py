import pytest

from union_find import WeightedQuickUnionUF


class TestWeightedQuickUnionUF:
    def test_starts_with_singletons(self):
        uf = WeightedQuickUnionUF(5)
        assert len(uf) == 5
        assert uf.count() == 5
        assert all(uf.find(i) == i for i in range(5))
        assert not uf.connected(0, 1)

    @pytest.mark.parametrize("n", [0, -1])
    def test_rejects_non_positive_size(self, n):
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(n)

    def test_union_is_transitive(self):
        uf = WeightedQuickUnionUF(6)
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(1, 3)
        assert uf.connected(0, 2)
        assert not uf.connected(0, 4)
        assert uf.count() == 3

    def test_union_of_connected_pair_is_noop(self):
        uf = WeightedQuickUnionUF(3)
        uf.union(0, 1)
        uf.union(1, 0)
        assert uf.count() == 2

    def test_smaller_tree_goes_under_larger(self):
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(0, 2)
        big_root = uf.find(0)
        uf.union(3, 0)
        assert uf.find(3) == big_root
        assert uf.size[big_root] == 4

    def test_find_compresses_path(self):
        uf = WeightedQuickUnionUF(4)
        # chain 3 -> 2 -> 1 -> 0 built by hand
        uf.parent = [0, 0, 1, 2]
        assert uf.find(3) == 0
        assert uf.parent[3] == 0
        assert uf.parent[2] == 0

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range_index(self, index):
        uf = WeightedQuickUnionUF(4)
        with pytest.raises(IndexError):
            uf.find(index)
        with pytest.raises(IndexError):
            uf.union(0, index)
        with pytest.raises(IndexError):
            uf.connected(index, 0)
