"""
Grid Action Builder: action matrix of the n x n neighbor-flip puzzle.

Cell (r, c) is linearized to r * size + c. Pressing a cell toggles its
orthogonal neighbors but not the cell itself, so row `action_id` holds
the (up to 4) neighbor positions. The neighbor relation is symmetric,
hence so is the matrix.

Author: Carmen Esteban
"""

from flipgf2.matrix.matrix import SparseMatrix


class GridActionBuilder:
    """
    Build the press-action matrix for a square grid.

    Parameters
    ----------
    size : int
        Grid side length (>= 1).

    Examples
    --------
    >>> builder = GridActionBuilder(3)
    >>> builder.neighbors(4)  # center cell
    [1, 3, 5, 7]
    >>> m = builder.build()
    >>> m.dim
    9
    """

    def __init__(self, size):
        if size < 1:
            raise ValueError(f"Grid size must be >= 1, got {size}")
        self.size = size
        self.dim = size * size

    def position(self, row, col):
        return col + row * self.size

    def neighbors(self, action_id):
        """Positions toggled by pressing `action_id` (up, left, right, down)."""
        size = self.size
        row, col = divmod(action_id, size)
        out = []
        if row > 0:
            out.append(self.position(row - 1, col))
        if col > 0:
            out.append(self.position(row, col - 1))
        if col + 1 < size:
            out.append(self.position(row, col + 1))
        if row + 1 < size:
            out.append(self.position(row + 1, col))
        return out

    def build(self):
        """Return a fresh SparseMatrix of dimension size**2."""
        m = SparseMatrix(self.dim)
        for action_id in range(self.dim):
            m.set_row(action_id, self.neighbors(action_id))
        return m

    def __repr__(self):
        return f"GridActionBuilder(size={self.size}, dim={self.dim})"


def generate_matrix(size):
    """Shortcut for GridActionBuilder(size).build()."""
    return GridActionBuilder(size).build()
