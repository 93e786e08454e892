"""
Rank Engine: sparse Gaussian elimination over GF(2).

Computes the image dimension of a SparseMatrix in place. Row combination
is symmetric difference, done by flipping the pivot row's indices into a
single scratch row, so no dense vectors are ever built.

Algorithm:
  1. For each pivot column p = 0..dim-1, scan the non-pivot rows in order
  2. Copy the row into the scratch buffer and cancel its leading index
     with the pivot owning that column until the lead is >= p (or empty)
  3. Write the reduced row back; the first row led by p becomes the pivot
     and is swapped into the next free pivot slot
  4. Settle: reduce every remaining row against the pivots (all empty out)

Pivots are packed into slots 0..rank-1 and located through a column->slot
table, so columns without a pivot leave no stale row behind. After the
sweep the nonempty rows are exactly the pivots, each with a distinct
leading index.

Usage:
    from flipgf2 import generate_matrix, image_dimension
    rank = image_dimension(generate_matrix(5))

Author: Carmen Esteban
"""

import time
import sys

from flipgf2.matrix.row import SparseRow
from flipgf2.detector import MAX_PRINT_DIM, print_dense


class RankEngine:
    """
    In-place GF(2) row reduction of a SparseMatrix.

    Parameters
    ----------
    matrix : SparseMatrix
        Matrix to reduce. It is mutated (rows rewritten and swapped).
    verbose : bool
        Print sweep progress, and the dense matrix after each pivot
        when dim < MAX_PRINT_DIM.

    Examples
    --------
    >>> m = SparseMatrix(2)
    >>> m.set_row(0, [1])
    >>> m.set_row(1, [1])
    >>> RankEngine(m).reduce()
    1
    """

    def __init__(self, matrix, verbose=False):
        self.matrix = matrix
        self.verbose = verbose
        self.scratch = SparseRow(capacity=matrix.dim)
        self.pivot_slot = {}  # column -> row position
        self.flips = 0
        self.sweeps = 0
        self.rank = None
        self.time = 0.0

    def _eliminate(self, pos, limit):
        """Reduce row `pos` against pivots of columns < limit. Returns the new lead."""
        m = self.matrix
        scratch = self.scratch
        scratch.copy_from(m.row(pos))
        self.sweeps += 1

        lead = scratch.min_index()
        while lead is not None and lead < limit:
            assert lead in self.pivot_slot, f"no pivot for column {lead}"
            pivot = m.row(self.pivot_slot[lead])
            assert pivot.min_index() == lead, f"pivot row for {lead} lost its lead"
            for col in pivot:
                scratch.flip(col)
            self.flips += len(pivot)
            lead = scratch.min_index()

        m.row(pos).copy_from(scratch)
        scratch.clear()
        return lead

    def reduce(self):
        """
        Run the elimination sweep.

        Returns
        -------
        int
            Rank of the matrix over GF(2).
        """
        m = self.matrix
        dim = m.dim
        show = self.verbose and dim < MAX_PRINT_DIM
        t0 = time.time()

        free = 0
        for p in range(dim):
            if self.verbose:
                print(f"  [Rank] Sweep pivot {p}")
                sys.stdout.flush()

            found = None
            for pos in range(free, dim):
                if self._eliminate(pos, p) == p:
                    found = pos
                    break

            if found is None:
                continue

            if found != free:
                m.swap_rows(found, free)
            self.pivot_slot[p] = free
            free += 1
            if show:
                print_dense(m)

        if self.verbose:
            print(f"  [Rank] Settling {dim - free} non-pivot rows")
            sys.stdout.flush()
        for pos in range(free, dim):
            lead = self._eliminate(pos, dim)
            assert lead is None, f"row {pos} not spanned by pivots"

        rank = sum(1 for i in range(dim) if m.row_count(i))
        assert rank == free
        self.rank = rank
        self.time = time.time() - t0

        if self.verbose:
            print(f"  [Rank] rank={rank:,} / dim={dim:,}, flips={self.flips:,}, "
                  f"sweeps={self.sweeps:,} [{self.time:.2f}s]")
            sys.stdout.flush()
        return rank

    def __repr__(self):
        return (f"RankEngine(dim={self.matrix.dim:,}, rank={self.rank}, "
                f"flips={self.flips:,})")


def image_dimension(matrix, verbose=False):
    """
    Rank of `matrix` over GF(2). The matrix is reduced in place.

    Parameters
    ----------
    matrix : SparseMatrix
        Matrix to reduce.
    verbose : bool
        Print sweep progress.

    Returns
    -------
    int
        Dimension of the row space (image, for symmetric matrices).
    """
    return RankEngine(matrix, verbose=verbose).reduce()
