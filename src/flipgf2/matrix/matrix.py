"""
Sparse Matrix: square GF(2) matrix stored as `dim` SparseRows.

Rows are owned by the matrix. Swapping two rows exchanges the slots
holding them (no element copy), so after a swap the data formerly at
position i is "row i" for everything that follows.

Author: Carmen Esteban
"""

from flipgf2.matrix.row import SparseRow


class SparseMatrix:
    """
    Fixed-dimension collection of sparse rows over GF(2).

    Parameters
    ----------
    dim : int
        Number of rows and columns.

    Examples
    --------
    >>> m = SparseMatrix(3)
    >>> m.set_row(0, [1, 2])
    >>> m.swap_rows(0, 2)
    >>> m.row_count(2)
    2
    """

    def __init__(self, dim):
        if dim < 0:
            raise ValueError(f"Matrix dimension must be >= 0, got {dim}")
        self.dim = dim
        self._rows = [SparseRow() for _ in range(dim)]

    def _check_row(self, i):
        if not 0 <= i < self.dim:
            raise IndexError(f"Row {i} out of range for dim {self.dim}")

    def set_row(self, i, indices):
        """
        Replace the contents of row `i`.

        Parameters
        ----------
        i : int
            Row position.
        indices : iterable of int
            Distinct column indices in [0, dim).

        Raises
        ------
        ValueError
            If an index is out of range or repeated.
        """
        self._check_row(i)
        indices = list(indices)
        for col in indices:
            if not 0 <= col < self.dim:
                raise ValueError(f"Column {col} out of range for dim {self.dim}")
        self._rows[i].replace(indices)

    def swap_rows(self, i, j):
        """Exchange rows `i` and `j` in O(1)."""
        self._check_row(i)
        self._check_row(j)
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]

    def row_count(self, i):
        """Number of nonzero entries in row `i`."""
        return len(self._rows[i])

    def row(self, i):
        return self._rows[i]

    def rows(self):
        return iter(self._rows)

    def nnz(self):
        return sum(len(r) for r in self._rows)

    @property
    def alloc_count(self):
        """Total buffer (re)allocations across all rows."""
        return sum(r.grow_count for r in self._rows)

    def memory_bytes(self):
        return sum(r.memory_bytes() for r in self._rows)

    def is_symmetric(self):
        """True iff row i contains j exactly when row j contains i."""
        for i, r in enumerate(self._rows):
            for j in r:
                if i not in self._rows[j]:
                    return False
        return True

    def permuted(self, order):
        """
        Copy of the matrix with rows reordered.

        Parameters
        ----------
        order : sequence of int
            Permutation of range(dim); new row k is old row order[k].
        """
        order = list(order)
        if sorted(order) != list(range(self.dim)):
            raise ValueError("order must be a permutation of range(dim)")
        out = SparseMatrix(self.dim)
        for k, src in enumerate(order):
            out._rows[k].copy_from(self._rows[src])
        return out

    def copy(self):
        return self.permuted(range(self.dim))

    def __repr__(self):
        return (f"SparseMatrix(dim={self.dim:,}, nnz={self.nnz():,}, "
                f"allocs={self.alloc_count})")
