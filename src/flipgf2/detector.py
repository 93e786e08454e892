"""
flipgf2 Detector: dense/CSR views, reference rank and structure report.

Used to check the sparse engine against an independent dense elimination
and to inspect small matrices by eye.

Usage:
    from flipgf2 import detector, generate_matrix
    m = generate_matrix(4)
    print(detector.matrix_info(m))
    print(detector.dense_rank(detector.to_dense(m)))

Author: Carmen Esteban
"""

import sys

import numpy as np
from scipy import sparse

MAX_PRINT_DIM = 40


def to_dense(matrix):
    """Dense 0/1 uint8 array of a SparseMatrix."""
    out = np.zeros((matrix.dim, matrix.dim), dtype=np.uint8)
    for i, row in enumerate(matrix.rows()):
        cols = list(row)
        if cols:
            out[i, cols] = 1
    return out


def to_csr(matrix):
    """scipy.sparse CSR copy of a SparseMatrix (uint8 ones)."""
    rows = []
    cols = []
    for i, row in enumerate(matrix.rows()):
        for j in row:
            rows.append(i)
            cols.append(j)
    data = np.ones(len(rows), dtype=np.uint8)
    return sparse.csr_matrix(
        (data, (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
        shape=(matrix.dim, matrix.dim),
        dtype=np.uint8,
    )


def dense_rank(A):
    """
    Rank over GF(2) by dense Gaussian elimination.

    Independent of the sparse engine; used as the reference oracle.

    Parameters
    ----------
    A : array-like or scipy.sparse matrix
        Entries are reduced mod 2.

    Returns
    -------
    int
        Rank over GF(2).
    """
    if sparse.issparse(A):
        A = A.toarray()
    M = (np.asarray(A, dtype=np.int64) % 2).astype(np.uint8)
    if M.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got shape {M.shape}")
    n_rows, n_cols = M.shape

    rank = 0
    for col in range(n_cols):
        if rank == n_rows:
            break
        nz = np.nonzero(M[rank:, col])[0]
        if nz.size == 0:
            continue
        piv = rank + int(nz[0])
        if piv != rank:
            M[[rank, piv]] = M[[piv, rank]]
        mask = M[:, col].astype(bool)
        mask[rank] = False
        M[mask] ^= M[rank]
        rank += 1
    return rank


def print_dense(matrix, file=None):
    """Print the 0/1 grid of a small matrix (dim < MAX_PRINT_DIM), one row per line."""
    if matrix.dim >= MAX_PRINT_DIM:
        return
    out = file if file is not None else sys.stdout
    for line in to_dense(matrix):
        print(" ".join(str(int(v)) for v in line), file=out)
    out.flush()


def matrix_info(matrix):
    """
    Analyze a SparseMatrix.

    Parameters
    ----------
    matrix : SparseMatrix
        The matrix to analyze.

    Returns
    -------
    dict
        Shape, nnz, density, symmetry, memory and allocation counts.
    """
    dim = matrix.dim
    nnz = matrix.nnz()
    total = dim * dim
    density = nnz / total if total > 0 else 0
    ram_sparse = matrix.memory_bytes()
    ram_dense = total  # uint8 per entry

    return {
        "shape": (dim, dim),
        "nnz": nnz,
        "density": round(density, 6),
        "is_symmetric": matrix.is_symmetric(),
        "max_row_nnz": max((matrix.row_count(i) for i in range(dim)), default=0),
        "ram_sparse_kb": round(ram_sparse / 1e3, 1),
        "ram_dense_kb": round(ram_dense / 1e3, 1),
        "compression": round(ram_dense / max(ram_sparse, 1), 1),
        "alloc_count": matrix.alloc_count,
    }
