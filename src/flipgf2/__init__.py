"""
flipgf2 - Reachable states of the neighbor-flip puzzle
=======================================================

Sparse GF(2) rank engine for the n x n "press a cell, flip its neighbors"
grid. The reachable configurations form the image of the action matrix,
so there are 2^rank of them out of 2^(n*n).

Quick start:
    import flipgf2

    m = flipgf2.generate_matrix(5)        # 25 x 25 sparse action matrix
    rank = flipgf2.image_dimension(m)     # reduces m in place

    # Whole pipeline with a printable summary
    result = flipgf2.solveable_states(5)
    print(flipgf2.format_report(5, result["rank"], result["dim"]))

Author: Carmen Esteban
License: MIT
"""

__version__ = "0.1.0"
__author__ = "Carmen Esteban"

from flipgf2.matrix import SparseRow, SparseMatrix, GridActionBuilder, generate_matrix
from flipgf2.rank import RankEngine, image_dimension
from flipgf2.detector import matrix_info, dense_rank
from flipgf2.report import format_report, solveable_states
from flipgf2 import detector

__all__ = [
    "SparseRow", "SparseMatrix", "GridActionBuilder", "generate_matrix",
    "RankEngine", "image_dimension", "matrix_info", "dense_rank",
    "format_report", "solveable_states", "detector",
]
