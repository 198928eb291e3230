"""Locking the active piece, clearing rows and spawning the next piece."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .events import notify
from .tetromino import ActivePiece

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameSession


LOGGER = logging.getLogger(__name__)


def spawn_next(session: "GameSession") -> ActivePiece:
    """Deal the next kind from the session's bag and install it as active."""

    kind = session.sequence.next()
    session.active = ActivePiece.spawn(kind, session.board.cols)
    LOGGER.debug("Spawned %s at (%d, %d)", kind.value, session.active.row, session.active.col)
    return session.active


def lock(session: "GameSession") -> int:
    """Lock the active piece where it stands and return the rows cleared.

    A piece with any block above row ``0`` ends the game: ``game_over`` is set
    and the board is left exactly as it was.  Otherwise the piece is written
    into the board, complete rows are cleared and counted, and the next piece
    is spawned.  The whole transition happens within this call.
    """

    piece = session.active
    if any(row < 0 for row, _ in piece.blocks()):
        session.game_over = True
        LOGGER.info("Game over. Lines cleared: %d", session.lines_cleared)
        notify(session.listeners, "on_game_over", session)
        return 0

    session.board.lock_piece(piece)
    cleared = session.board.clear_full_rows()
    if cleared:
        session.lines_cleared += cleared
        LOGGER.info("Cleared %d row(s). Lines: %d", cleared, session.lines_cleared)
    spawn_next(session)
    notify(session.listeners, "on_lock", session, cleared)
    return cleared
