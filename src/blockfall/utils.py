"""Collision checks and rendering helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, PIECE_VALUES
from .tetromino import ActivePiece, Matrix


def is_valid_move(matrix: Matrix, row: int, col: int, board: Board) -> bool:
    """Return ``True`` if ``matrix`` can sit with its corner at ``(row, col)``.

    Every set cell must stay within the board's columns and above its floor,
    and must land on an empty cell.  Cells in the hidden rows above the board
    are only checked against the side walls since those rows are always
    vacant.  The check stops at the first offending cell.
    """

    for r, line in enumerate(matrix):
        for c, value in enumerate(line):
            if not value:
                continue
            target_row = row + r
            target_col = col + c
            if target_col < 0 or target_col >= board.cols or target_row >= board.rows:
                return False
            if target_row >= 0 and not board.is_empty(target_row, target_col):
                return False
    return True


def can_move(board: Board, piece: ActivePiece, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` can move by ``dx`` and ``dy`` on ``board``."""

    return is_valid_move(piece.matrix, piece.row + dy, piece.col + dx, board)


def render_grid(board: Board, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return a copy of the visible grid with the active piece overlaid.

    Cells occupied by the active piece receive the mapped integer value for its
    kind.  Blocks still inside the hidden rows are not drawn.
    """

    grid = board.visible.tolist()
    if active is not None:
        for r, c in active.blocks():
            if 0 <= r < board.rows and 0 <= c < board.cols:
                grid[r][c] = PIECE_VALUES[active.kind]
    return grid
