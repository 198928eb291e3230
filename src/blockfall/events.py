"""Outward-facing hooks for hosts that render or play audio."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameSession


class SessionListener(Protocol):
    """Callbacks a host may implement to follow a session.

    Every method is optional: the session only calls the ones a listener
    defines.
    """

    def on_lock(self, session: "GameSession", lines: int) -> None:
        """A piece was locked and ``lines`` rows were cleared."""

    def on_pause_changed(self, session: "GameSession", paused: bool) -> None:
        """The session was paused or resumed."""

    def on_game_over(self, session: "GameSession") -> None:
        """The session reached game over."""


def notify(listeners: Iterable[Any], event: str, *args: Any) -> None:
    """Call ``event`` on every listener that implements it."""

    for listener in listeners:
        callback = getattr(listener, event, None)
        if callback is not None:
            callback(*args)
