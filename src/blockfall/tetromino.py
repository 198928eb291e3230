"""Piece catalog and the active falling piece.

Shapes are stored as square binary matrices in their spawn orientation.  The
remaining orientations are produced on demand by :func:`rotate`, so a piece's
matrix is always one of the four clockwise rotations of its catalog shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Matrix = Tuple[Tuple[int, ...], ...]


class PieceKind(str, Enum):
    """Enumeration of the seven piece kinds."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[PieceKind, Matrix] = {
    PieceKind.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    PieceKind.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.O: (
        (1, 1),
        (1, 1),
    ),
    PieceKind.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    PieceKind.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
}

COLORS: Dict[PieceKind, str] = {
    PieceKind.I: "cyan",
    PieceKind.O: "yellow",
    PieceKind.T: "purple",
    PieceKind.S: "green",
    PieceKind.Z: "red",
    PieceKind.J: "blue",
    PieceKind.L: "orange",
}


def shape_of(kind: PieceKind) -> Matrix:
    """Return the spawn-orientation matrix for ``kind``."""

    return SHAPES[kind]


def color_of(kind: PieceKind) -> str:
    """Return the display colour name for ``kind``."""

    return COLORS[kind]


def rotate(matrix: Matrix) -> Matrix:
    """Return ``matrix`` rotated 90 degrees clockwise.

    ``result[i][j] = matrix[N - j][i]`` with ``N = size - 1``.  Only square
    matrices are supported, which covers every shape in the catalog.
    """

    n = len(matrix) - 1
    return tuple(
        tuple(matrix[n - j][i] for j in range(len(row)))
        for i, row in enumerate(matrix)
    )


@dataclass
class ActivePiece:
    """Currently falling piece.

    ``row`` and ``col`` locate the top-left corner of ``matrix`` on the board.
    ``row`` may be negative while the piece is still inside the hidden rows.
    """

    kind: PieceKind
    matrix: Matrix
    row: int = 0
    col: int = 0

    @classmethod
    def spawn(cls, kind: PieceKind, cols: int) -> "ActivePiece":
        """Return a fresh piece of ``kind`` at its spawn position.

        The piece is horizontally centred (rounding left for odd widths).  ``I``
        enters at row ``-1`` and every other kind at ``-2`` so that all of them
        reach the first visible row on the same step.
        """

        matrix = shape_of(kind)
        width = len(matrix[0])
        col = cols // 2 - (width + 1) // 2
        row = -1 if kind is PieceKind.I else -2
        return cls(kind, matrix, row, col)

    def rotated(self) -> Matrix:
        """Return the clockwise rotation of this piece's matrix."""

        return rotate(self.matrix)

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by ``dx`` columns and ``dy`` rows."""

        self.row += dy
        self.col += dx

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(row, col)`` of every set cell."""

        return [
            (self.row + r, self.col + c)
            for r, line in enumerate(self.matrix)
            for c, value in enumerate(line)
            if value
        ]
