"""High level game session container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from .board import Board
from .config import GameConfig
from .placement import spawn_next
from .scheduler import DropScheduler, SchedulerState
from .sequence import SequenceGenerator
from .tetromino import ActivePiece
from .utils import can_move, is_valid_move


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers once per frame."""

    grid: List[List[int]]
    active: ActivePiece
    game_over: bool
    lines_cleared: int
    paused: bool


@dataclass
class GameSession:
    """Mutable state for one game.

    Hosts own a session, feed it one :meth:`tick` per display frame and forward
    player intents between frames.  Once ``game_over`` is set every intent is
    ignored until :meth:`reset` starts a new game.
    """

    config: GameConfig = field(default_factory=GameConfig)
    seed: Optional[int] = None
    listeners: List[Any] = field(default_factory=list)
    board: Board = field(init=False)
    active: ActivePiece = field(init=False)
    sequence: SequenceGenerator = field(init=False, repr=False)
    scheduler: DropScheduler = field(init=False, repr=False)
    tick_counter: int = field(init=False, default=0)
    game_over: bool = field(init=False, default=False)
    lines_cleared: int = field(init=False, default=0)
    paused: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.sequence = SequenceGenerator(self.seed)
        self.scheduler = DropScheduler(self, frames=self.config.frames)
        self.reset()

    def reset(self, *, seed: Optional[int] = None) -> None:
        """Start a new game on an empty board.

        Board, bag, active piece, counters and latches are all rebuilt before
        this returns.  ``seed`` optionally reseeds the bag randomizer.
        """

        self.sequence.seed(seed)
        self.sequence.clear()
        self.board = Board(self.config.rows, self.config.cols)
        self.tick_counter = 0
        self.game_over = False
        self.lines_cleared = 0
        self.paused = False
        spawn_next(self)
        LOGGER.info("New game on a %dx%d board", self.board.rows, self.board.cols)

    @property
    def state(self) -> SchedulerState:
        return self.scheduler.state

    def _accepts_input(self) -> bool:
        return not self.game_over and not self.paused

    def _shift(self, dx: int) -> None:
        if self._accepts_input() and can_move(self.board, self.active, dx, 0):
            self.active.move(dx, 0)

    def move_left(self) -> None:
        self._shift(-1)

    def move_right(self) -> None:
        self._shift(1)

    def rotate(self) -> None:
        """Rotate the piece clockwise in place if the rotated shape fits.

        A rotation that does not fit is dropped; there are no wall kicks.
        """

        if not self._accepts_input():
            return
        matrix = self.active.rotated()
        if is_valid_move(matrix, self.active.row, self.active.col, self.board):
            self.active.matrix = matrix

    def soft_drop(self) -> None:
        self.scheduler.soft_drop()

    def toggle_pause(self) -> None:
        self.scheduler.toggle_pause()

    def tick(self) -> None:
        self.scheduler.tick()

    def snapshot(self) -> Snapshot:
        """Return a copy of the state a renderer needs for one frame."""

        return Snapshot(
            grid=self.board.visible.tolist(),
            active=replace(self.active),
            game_over=self.game_over,
            lines_cleared=self.lines_cleared,
            paused=self.paused,
        )
