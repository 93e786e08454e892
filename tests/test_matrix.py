"""Tests for sparse GF(2) storage and the grid action builder."""
import pytest

from flipgf2.matrix import SparseRow, SparseMatrix, GridActionBuilder, generate_matrix
from flipgf2.matrix import row as row_mod


# ============================================================
# SparseRow
# ============================================================

class TestSparseRow:

    def test_empty_row(self):
        row = SparseRow()
        assert len(row) == 0
        assert row.min_index() is None
        assert row.capacity == 0
        assert not row.contains(0)

    def test_flip_adds_and_removes(self):
        row = SparseRow()
        row.flip(5)
        assert row.contains(5)
        row.flip(5)
        assert not row.contains(5)
        assert len(row) == 0

    def test_flip_idempotent(self):
        """Flipping any index twice restores the original membership."""
        row = SparseRow()
        row.replace([2, 9, 4])
        before = row.indices()
        for idx in (0, 2, 4, 7, 9, 11):
            row.flip(idx)
            row.flip(idx)
            assert row.indices() == before

    def test_remove_middle_keeps_others(self):
        row = SparseRow()
        row.replace([10, 20, 30, 40])
        row.flip(20)
        assert row.indices() == (10, 30, 40)
        assert 40 in row
        row.flip(40)
        assert row.indices() == (10, 30)

    def test_replace_roundtrip(self):
        row = SparseRow()
        cols = [13, 0, 7, 2]
        row.replace(cols)
        assert set(row.indices()) == set(cols)
        for c in range(20):
            assert row.contains(c) == (c in cols)

    def test_replace_overwrites(self):
        row = SparseRow()
        row.replace([1, 2, 3])
        row.replace([4])
        assert row.indices() == (4,)
        assert not row.contains(1)

    def test_replace_duplicate_raises(self):
        row = SparseRow()
        with pytest.raises(ValueError):
            row.replace([1, 2, 1])
        assert len(row) == 0

    def test_replace_negative_raises(self):
        row = SparseRow()
        with pytest.raises(ValueError):
            row.replace([-1])

    def test_min_index(self):
        row = SparseRow()
        row.replace([8, 3, 5])
        assert row.min_index() == 3
        row.flip(3)
        assert row.min_index() == 5
        row.flip(1)
        assert row.min_index() == 1

    def test_growth_doubles(self):
        row = SparseRow()
        row.flip(0)
        assert row.capacity == row_mod.MIN_CAPACITY
        assert row.grow_count == 1
        for i in range(1, 5):
            row.flip(i)
        assert row.capacity == 2 * row_mod.MIN_CAPACITY
        assert row.grow_count == 2
        assert row.indices() == (0, 1, 2, 3, 4)

    def test_reserve_never_shrinks(self):
        row = SparseRow(capacity=16)
        assert row.grow_count == 1
        row.reserve(4)
        assert row.capacity == 16
        assert row.grow_count == 1

    def test_clear_keeps_capacity(self):
        row = SparseRow(capacity=8)
        row.replace([1, 2, 3])
        row.clear()
        assert len(row) == 0
        assert row.capacity == 8
        assert row.min_index() is None

    def test_copy_from(self):
        src = SparseRow()
        src.replace([6, 1, 4])
        dst = SparseRow(capacity=10)
        dst.replace([9])
        dst.copy_from(src)
        assert dst.indices() == (1, 4, 6)
        assert dst.capacity == 10
        # Independent storage
        dst.flip(1)
        assert src.contains(1)

    def test_swap(self):
        a = SparseRow()
        a.replace([1, 2])
        b = SparseRow()
        b.replace([7])
        a.swap(b)
        assert a.indices() == (7,)
        assert b.indices() == (1, 2)

    def test_memory_bytes(self):
        row = SparseRow(capacity=4)
        assert row.memory_bytes() == 4 * 8


# ============================================================
# SparseMatrix
# ============================================================

class TestSparseMatrix:

    def test_create_empty(self):
        m = SparseMatrix(5)
        assert m.dim == 5
        assert all(m.row_count(i) == 0 for i in range(5))
        assert m.nnz() == 0

    def test_negative_dim_raises(self):
        with pytest.raises(ValueError):
            SparseMatrix(-1)

    def test_set_row(self):
        m = SparseMatrix(4)
        m.set_row(2, [3, 0])
        assert m.row_count(2) == 2
        assert m.row(2).indices() == (0, 3)

    def test_set_row_out_of_range(self):
        m = SparseMatrix(3)
        with pytest.raises(ValueError):
            m.set_row(0, [3])
        with pytest.raises(ValueError):
            m.set_row(0, [-1])
        with pytest.raises(IndexError):
            m.set_row(3, [0])

    def test_set_row_duplicate(self):
        m = SparseMatrix(3)
        with pytest.raises(ValueError):
            m.set_row(1, [2, 2])

    def test_swap_rows_moves_storage(self):
        m = SparseMatrix(3)
        m.set_row(0, [1])
        m.set_row(2, [0, 1, 2])
        r0, r2 = m.row(0), m.row(2)
        m.swap_rows(0, 2)
        # Same objects, exchanged slots
        assert m.row(0) is r2
        assert m.row(2) is r0
        assert m.row_count(0) == 3
        assert m.row_count(2) == 1

    def test_alloc_count(self):
        m = SparseMatrix(3)
        assert m.alloc_count == 0
        m.set_row(0, [1, 2])
        m.set_row(1, [0])
        assert m.alloc_count == 2
        m.set_row(0, [2])  # fits, no reallocation
        assert m.alloc_count == 2

    def test_is_symmetric(self):
        m = SparseMatrix(3)
        m.set_row(0, [1])
        m.set_row(1, [0, 2])
        m.set_row(2, [1])
        assert m.is_symmetric()
        m.set_row(2, [])
        assert not m.is_symmetric()

    def test_permuted(self):
        m = SparseMatrix(3)
        m.set_row(0, [0])
        m.set_row(1, [1])
        m.set_row(2, [2])
        p = m.permuted([2, 0, 1])
        assert p.row(0).indices() == (2,)
        assert p.row(1).indices() == (0,)
        assert p.row(2).indices() == (1,)
        # Original untouched
        assert m.row(0).indices() == (0,)

    def test_permuted_rejects_non_permutation(self):
        m = SparseMatrix(3)
        with pytest.raises(ValueError):
            m.permuted([0, 0, 1])

    def test_copy_is_independent(self):
        m = generate_matrix(3)
        c = m.copy()
        c.row(0).flip(0)
        assert not m.row(0).contains(0)


# ============================================================
# GridActionBuilder
# ============================================================

class TestGridActionBuilder:

    def test_size_one(self):
        m = GridActionBuilder(1).build()
        assert m.dim == 1
        assert m.row_count(0) == 0

    def test_size_two_rows(self):
        m = generate_matrix(2)
        assert m.dim == 4
        assert m.row(0).indices() == (1, 2)
        assert m.row(1).indices() == (0, 3)
        assert m.row(2).indices() == (0, 3)
        assert m.row(3).indices() == (1, 2)

    def test_neighbor_order(self):
        b = GridActionBuilder(3)
        assert b.neighbors(4) == [1, 3, 5, 7]
        assert b.neighbors(0) == [1, 3]
        assert b.neighbors(8) == [5, 7]

    def test_neighbor_counts(self):
        """Corners have 2 neighbors, edges 3, interior 4."""
        size = 5
        m = generate_matrix(size)
        for r in range(size):
            for c in range(size):
                on_edge = (r in (0, size - 1)) + (c in (0, size - 1))
                expected = 4 - on_edge
                assert m.row_count(r * size + c) == expected

    def test_never_toggles_self(self):
        m = generate_matrix(6)
        for i in range(m.dim):
            assert not m.row(i).contains(i)

    @pytest.mark.parametrize("size", range(1, 11))
    def test_symmetric(self, size):
        m = generate_matrix(size)
        assert m.is_symmetric()

    def test_matches_dense_adjacency(self):
        """Row i is the grid adjacency row of cell i."""
        size = 4
        m = generate_matrix(size)
        for i in range(m.dim):
            r, c = divmod(i, size)
            expected = set()
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                rr, cc = r + dr, c + dc
                if 0 <= rr < size and 0 <= cc < size:
                    expected.add(rr * size + cc)
            assert set(m.row(i).indices()) == expected

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            GridActionBuilder(0)

    def test_nnz(self):
        # 2 * number of grid edges = 2 * 2 * size * (size - 1)
        for size in (1, 2, 3, 7):
            m = generate_matrix(size)
            assert m.nnz() == 4 * size * (size - 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
