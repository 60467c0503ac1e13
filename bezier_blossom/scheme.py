"""
Flat storage for the triangular de Casteljau scheme.

Given N initial points the scheme holds N + (N-1) + ... + 1 entries arranged in
N columns; column c has N - c rows and is derived entirely from column c - 1.
All columns live in one preallocated list, column c starting at offset

    c * (2N - c + 1) / 2

so entry (c, i) sits at that offset plus i. Entries are appended in the same
order the recurrence produces them (rows bottom to top within a column,
columns left to right), which is exactly increasing flat offset.
"""

from .points import as_polygon, lerp


def scheme_size(num_points):
    """Total number of entries in a scheme seeded with num_points points."""
    return num_points * (num_points + 1) // 2


def column_offset(num_points, column):
    """Flat offset of the first entry of `column`."""
    return column * (2 * num_points - column + 1) // 2


class TriangularScheme:
    """
    Triangular table of de Casteljau intermediate points.

    Column 0 is a private copy of the initial polygon. The remaining columns
    are grown with :meth:`append` or :meth:`fill_column`; once a column exists
    it can be recomputed in place (batch subdivision does this).

    Reading an entry that has not been appended yet raises ``IndexError``.
    """

    def __init__(self, points):
        polygon = as_polygon(points)
        self._num_points = len(polygon)
        self._entries = [None] * scheme_size(self._num_points)
        self._entries[:self._num_points] = polygon
        self._filled = self._num_points

    @property
    def num_points(self):
        """Number of points in column 0."""
        return self._num_points

    @property
    def size(self):
        return len(self._entries)

    @property
    def filled(self):
        """Number of entries materialised so far."""
        return self._filled

    @property
    def is_complete(self):
        return self._filled == len(self._entries)

    def __len__(self):
        return len(self._entries)

    def column_size(self, column):
        return self._num_points - column

    def index(self, column, row):
        """
        Flat offset of entry (column, row).

        Raises:
            IndexError: If (column, row) lies outside the triangle
        """
        N = self._num_points
        if not 0 <= column < N:
            raise IndexError(f"column {column} out of range for a scheme of {N} points")
        if not 0 <= row < N - column:
            raise IndexError(f"row {row} out of range for column {column} ({N - column} rows)")
        return column_offset(N, column) + row

    def get(self, column, row):
        """Return the materialised entry (column, row)."""
        idx = self.index(column, row)
        if idx >= self._filled:
            raise IndexError(f"entry ({column}, {row}) has not been computed yet")
        return self._entries[idx]

    def __getitem__(self, key):
        column, row = key
        return self.get(column, row)

    def set(self, column, row, point):
        """Overwrite an entry that has already been materialised."""
        idx = self.index(column, row)
        if idx >= self._filled:
            raise IndexError(f"entry ({column}, {row}) has not been computed yet")
        self._entries[idx] = point

    def append(self, point):
        """Store the next entry in scheme order."""
        if self._filled == len(self._entries):
            raise IndexError("scheme is already complete")
        self._entries[self._filled] = point
        self._filled += 1

    def column(self, column):
        """List copy of the entries of a fully materialised column."""
        rows = self.column_size(column)
        return [self.get(column, row) for row in range(rows)]

    def fill_column(self, column, t):
        """
        Compute every row of `column` from `column - 1` with parameter t.

        The first call for a column appends its entries; later calls overwrite
        them in place. The previous column must be complete.

        Args:
            column: Column index in [1, N)
            t: Interpolation parameter used for every row
        """
        N = self._num_points
        if not 1 <= column < N:
            raise IndexError(f"cannot fill column {column} of a scheme of {N} points")

        start = column_offset(N, column)
        rows = N - column
        if start + rows <= self._filled:
            overwrite = True
        elif start == self._filled:
            overwrite = False
        else:
            raise IndexError(f"column {column - 1} is incomplete; fill columns in order")

        prev = column_offset(N, column - 1)
        entries = self._entries
        for row in range(rows):
            point = lerp(entries[prev + row], entries[prev + row + 1], t)
            if overwrite:
                entries[start + row] = point
            else:
                self.append(point)

    @property
    def last(self):
        """The single entry of column N - 1."""
        if not self.is_complete:
            raise IndexError("scheme is not complete")
        return self._entries[-1]

    def __repr__(self):
        return f"TriangularScheme(num_points={self._num_points}, filled={self._filled}/{self.size})"
