"""Board representation for the playfield."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .tetromino import ActivePiece, PieceKind


# Default dimensions: a 320x640 board drawn with 32px cells.
WIDTH = 10
HEIGHT = 20

# Rows above row 0 that hold a freshly spawned piece before it becomes visible.
HIDDEN_ROWS = 2

EMPTY = 0

Grid = NDArray[np.uint8]

# Mapping from ``PieceKind`` to the integer stored in the grid.  ``0`` is the
# empty cell; every kind gets its own value so renderers can colour locked
# cells by kind.
PIECE_VALUES = {kind: i + 1 for i, kind in enumerate(PieceKind)}
VALUE_KINDS = {value: kind for kind, value in PIECE_VALUES.items()}


def create_empty_grid(rows: int = HEIGHT, cols: int = WIDTH) -> Grid:
    """Return a new empty grid including the hidden rows."""

    return np.zeros((rows + HIDDEN_ROWS, cols), dtype=np.uint8)


class Board:
    """Playfield holding the locked cells.

    Rows are addressed logically: row ``0`` is the top visible row and rows
    ``-1`` and ``-2`` are the hidden rows above it.  The hidden rows are part of
    the grid so that row shifts can pull from them, but nothing is ever locked
    there and they always read as vacant.
    """

    def __init__(self, rows: int = HEIGHT, cols: int = WIDTH) -> None:
        self.rows = rows
        self.cols = cols
        self.grid: Grid = create_empty_grid(rows, cols)

    @property
    def width(self) -> int:
        return self.cols

    @property
    def height(self) -> int:
        return self.rows

    @property
    def visible(self) -> Grid:
        """Return a view of rows ``0`` to ``rows - 1``."""

        return self.grid[HIDDEN_ROWS:]

    def _in_bounds(self, row: int, col: int) -> bool:
        return -HIDDEN_ROWS <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the extended board.
        """
        if self._in_bounds(row, col):
            return int(self.grid[row + HIDDEN_ROWS, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set the value at visible cell ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the visible board.  The
                hidden rows cannot be written.
        """
        if 0 <= row < self.rows and 0 <= col < self.cols:
            self.grid[row + HIDDEN_ROWS, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def kind_at(self, row: int, col: int) -> Optional[PieceKind]:
        """Return the piece kind locked at ``(row, col)`` or ``None``."""

        return VALUE_KINDS.get(self.get_cell(row, col))

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Coordinates outside the extended board are treated as occupied.
        """

        if self._in_bounds(row, col):
            return bool(self.grid[row + HIDDEN_ROWS, col] == EMPTY)
        return False

    def lock_piece(self, piece: ActivePiece) -> None:
        """Write the piece's blocks into the visible grid."""

        coordinates = np.asarray(piece.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return

        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.rows)
            or np.any(cols < 0)
            or np.any(cols >= self.cols)
        ):
            raise IndexError("Block out of bounds")

        self.grid[rows + HIDDEN_ROWS, cols] = np.uint8(PIECE_VALUES[piece.kind])

    def row_complete(self, row: int) -> bool:
        """Return ``True`` if every cell of visible ``row`` is occupied."""

        return bool(np.all(self.grid[row + HIDDEN_ROWS] != EMPTY))

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned bottom to top.  A complete row is overwritten by
        shifting every row above it down by one, and the same index is checked
        again since the row shifted into it may be complete as well.  Row ``0``
        takes the contents of hidden row ``-1``, which is always vacant.
        """

        cleared = 0
        row = self.rows - 1
        while row >= 0:
            if self.row_complete(row):
                top = row + HIDDEN_ROWS
                self.grid[HIDDEN_ROWS : top + 1] = self.grid[HIDDEN_ROWS - 1 : top].copy()
                cleared += 1
            else:
                row -= 1
        return cleared
