"""Falling-block puzzle simulation engine."""

from .board import Board
from .config import GameConfig
from .events import SessionListener
from .game_state import GameSession, Snapshot
from .placement import lock
from .scheduler import DropScheduler, SchedulerState
from .sequence import SequenceGenerator
from .tetromino import ActivePiece, PieceKind, color_of, rotate, shape_of
from .utils import can_move, is_valid_move, render_grid

__all__ = [
    "ActivePiece",
    "Board",
    "DropScheduler",
    "GameConfig",
    "GameSession",
    "PieceKind",
    "SchedulerState",
    "SequenceGenerator",
    "SessionListener",
    "Snapshot",
    "can_move",
    "color_of",
    "is_valid_move",
    "lock",
    "render_grid",
    "rotate",
    "shape_of",
]
