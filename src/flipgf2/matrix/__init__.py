"""
flipgf2 Matrix: sparse GF(2) storage for the rank engine.

Rows are sets of column indices held in C-native growable buffers, so a
row with k nonzeros costs O(k) memory regardless of the matrix dimension.

Example:
    from flipgf2.matrix import GridActionBuilder, SparseMatrix

    m = GridActionBuilder(size=5).build()   # 25 x 25 action matrix
    m.row(12).indices()                      # (7, 11, 13, 17)

Author: Carmen Esteban
"""

from flipgf2.matrix.row import SparseRow
from flipgf2.matrix.matrix import SparseMatrix
from flipgf2.matrix.builder import GridActionBuilder, generate_matrix

__all__ = [
    "SparseRow", "SparseMatrix", "GridActionBuilder", "generate_matrix",
]
