"""
Sparse Row: growable set of column indices for one GF(2) matrix row.

A row over GF(2) is fully described by the columns holding a 1. Instead of
a dense bit vector, the indices are kept in a C-native array.array buffer
(8 bytes/elem) with explicit capacity, plus a position map so membership
and toggling are O(1).

Flipping an index is GF(2) addition of the matching basis vector: present
indices are removed (the last element fills the hole), absent ones are
appended, growing the buffer when it is full.

Author: Carmen Esteban
"""

import array as pyarray

INDEX_TYPECODE = 'q'  # int64
MIN_CAPACITY = 4


class SparseRow:
    """
    Mutable set of column indices with a growable backing buffer.

    Parameters
    ----------
    capacity : int
        Initial number of reserved slots (default 0, no allocation).

    Examples
    --------
    >>> row = SparseRow()
    >>> row.replace([3, 1])
    >>> row.flip(1)
    >>> row.flip(7)
    >>> row.indices()
    (3, 7)
    >>> row.min_index()
    3
    """

    __slots__ = ("_data", "_pos", "_count", "grow_count")

    def __init__(self, capacity=0):
        self._data = pyarray.array(INDEX_TYPECODE)
        self._pos = {}
        self._count = 0
        self.grow_count = 0
        if capacity > 0:
            self.reserve(capacity)

    @property
    def capacity(self):
        return len(self._data)

    def reserve(self, count):
        """Grow the buffer to hold at least `count` indices. Never shrinks."""
        old = len(self._data)
        if count <= old:
            return
        self._data.extend([0] * (count - old))
        self.grow_count += 1

    def contains(self, index):
        """True iff `index` is currently a member."""
        return index in self._pos

    def flip(self, index):
        """Toggle membership of `index` (symmetric difference with {index})."""
        slot = self._pos.pop(index, None)
        if slot is not None:
            last = self._count - 1
            if slot != last:
                moved = self._data[last]
                self._data[slot] = moved
                self._pos[moved] = slot
            self._count = last
            return

        if self._count == len(self._data):
            self.reserve(max(MIN_CAPACITY, 2 * self._count))
        self._data[self._count] = index
        self._pos[index] = self._count
        self._count += 1

    def replace(self, indices):
        """
        Set the contents to exactly `indices`.

        Parameters
        ----------
        indices : iterable of int
            Distinct, non-negative column indices.

        Raises
        ------
        ValueError
            On a duplicate or negative index. The row is left empty.
        """
        indices = list(indices)
        self.reserve(len(indices))
        self._pos.clear()
        self._count = 0
        for slot, index in enumerate(indices):
            if index < 0:
                self.clear()
                raise ValueError(f"Negative column index {index}")
            if index in self._pos:
                self.clear()
                raise ValueError(f"Duplicate column index {index}")
            self._data[slot] = index
            self._pos[index] = slot
        self._count = len(indices)

    def copy_from(self, other):
        """Load the contents of another row, reusing this row's capacity."""
        self.reserve(other._count)
        self._data[:other._count] = other._data[:other._count]
        self._pos.clear()
        self._pos.update(other._pos)
        self._count = other._count

    def swap(self, other):
        """Exchange storage with another row in O(1)."""
        self._data, other._data = other._data, self._data
        self._pos, other._pos = other._pos, self._pos
        self._count, other._count = other._count, self._count
        self.grow_count, other.grow_count = other.grow_count, self.grow_count

    def clear(self):
        """Empty the row, keeping the reserved capacity."""
        self._pos.clear()
        self._count = 0

    def min_index(self):
        """Smallest member, or None if the row is empty."""
        if self._count == 0:
            return None
        return min(self._data[:self._count])

    def indices(self):
        """Members as a sorted tuple."""
        return tuple(sorted(self._data[:self._count]))

    def memory_bytes(self):
        """Bytes reserved by the index buffer."""
        return len(self._data) * self._data.itemsize

    def __len__(self):
        return self._count

    def __iter__(self):
        return iter(self._data[:self._count])

    def __contains__(self, index):
        return index in self._pos

    def __repr__(self):
        return f"SparseRow({list(self.indices())}, capacity={self.capacity})"
