"""Fixed-cadence drop scheduler driven once per display frame."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .config import DEFAULT_FRAMES
from .events import notify
from .placement import lock
from .utils import can_move

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameSession


LOGGER = logging.getLogger(__name__)


class SchedulerState(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class DropScheduler:
    """Advance a session's active piece on a fixed frame cadence.

    ``tick`` is called once per display refresh.  After more than ``frames``
    ticks the piece moves down one row, or locks in place when it cannot.
    """

    def __init__(self, session: "GameSession", frames: int = DEFAULT_FRAMES) -> None:
        self.session = session
        self.frames = frames

    @property
    def state(self) -> SchedulerState:
        if self.session.game_over:
            return SchedulerState.GAME_OVER
        if self.session.paused:
            return SchedulerState.PAUSED
        return SchedulerState.RUNNING

    def _step_down(self) -> bool:
        """Move the piece down one row or lock it.  Returns ``True`` if it moved."""

        session = self.session
        if can_move(session.board, session.active, 0, 1):
            session.active.move(0, 1)
            return True
        lock(session)
        return False

    def tick(self) -> None:
        """Process one frame."""

        if self.state is not SchedulerState.RUNNING:
            return
        session = self.session
        session.tick_counter += 1
        if session.tick_counter > self.frames:
            session.tick_counter = 0
            self._step_down()

    def soft_drop(self) -> None:
        """Move the piece down a single row, locking it if it is blocked."""

        if self.state is not SchedulerState.RUNNING:
            return
        self._step_down()

    def toggle_pause(self) -> None:
        """Switch between running and paused.  Ignored after game over."""

        if self.state is SchedulerState.GAME_OVER:
            return
        session = self.session
        session.paused = not session.paused
        LOGGER.info("Paused" if session.paused else "Resumed")
        notify(session.listeners, "on_pause_changed", session, session.paused)
