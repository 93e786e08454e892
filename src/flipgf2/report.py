"""
flipgf2 Report: end-to-end count of reachable puzzle states.

Builds the action matrix for an n x n grid, reduces it and reports
2^rank reachable configurations out of 2^(n*n).

Usage:
    from flipgf2.report import solveable_states, format_report
    result = solveable_states(4)
    print(format_report(result["size"], result["rank"], result["dim"]))

Author: Carmen Esteban
"""

import time
import sys

from flipgf2.matrix.builder import GridActionBuilder
from flipgf2.detector import print_dense
from flipgf2.rank import RankEngine


def format_report(size, rank, dim):
    """Human-readable summary line."""
    return f"Solveable states for {size} x {size}: 2^{rank} / 2^{dim}"


def solveable_states(size, verbose=False):
    """
    Count reachable configurations of the size x size neighbor-flip grid.

    Parameters
    ----------
    size : int
        Grid side length (>= 1).
    verbose : bool
        Print build/sweep progress and, for small grids, the dense matrix
        before and after elimination.

    Returns
    -------
    dict
        Keys: size, dim, rank, alloc_count, flips, time.
    """
    t0 = time.time()
    builder = GridActionBuilder(size)
    m = builder.build()

    if verbose:
        print(f"  [Flip] Grid {size} x {size}: dim={m.dim:,}, nnz={m.nnz():,}")
        sys.stdout.flush()
        print_dense(m)

    engine = RankEngine(m, verbose=verbose)
    rank = engine.reduce()

    if verbose:
        print_dense(m)

    return {
        "size": size,
        "dim": m.dim,
        "rank": rank,
        "alloc_count": m.alloc_count + engine.scratch.grow_count,
        "flips": engine.flips,
        "time": time.time() - t0,
    }
