"""Headless demo for the engine.

Run with: `python -m blockfall`

Simulates a number of frames with no player input and prints the final frame
as ASCII, or opens the pygame window with ``--pygame``.
"""

from __future__ import annotations

import argparse
import logging

from .config import DEFAULT_FRAMES, GameConfig
from .game_state import GameSession
from .utils import render_grid


LOGGER = logging.getLogger(__name__)


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def simulate(session: GameSession, ticks: int) -> int:
    """Run up to ``ticks`` frames and return how many were processed."""

    for index in range(ticks):
        if session.game_over:
            return index
        session.tick()
    return ticks


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ticks", type=int, default=2000, help="Frames to simulate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece bag.")
    parser.add_argument("--cell-size", type=int, default=32, help="Cell size in pixels.")
    parser.add_argument("--width", type=int, default=320, help="Board width in pixels.")
    parser.add_argument("--height", type=int, default=640, help="Board height in pixels.")
    parser.add_argument(
        "--frames",
        type=int,
        default=DEFAULT_FRAMES,
        help="Frames between automatic drops.",
    )
    parser.add_argument(
        "--pygame",
        action="store_true",
        help="Open the pygame window instead of the headless demo.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    config = GameConfig(
        board_width=args.width,
        board_height=args.height,
        cell_size=args.cell_size,
        frames=args.frames,
    )
    if args.pygame:
        from .run_pygame import main as run_window

        run_window(config, seed=args.seed)
        return

    session = GameSession(config=config, seed=args.seed)
    processed = simulate(session, args.ticks)
    LOGGER.info(
        "Simulated %d frame(s); lines cleared: %d; game over: %s",
        processed,
        session.lines_cleared,
        session.game_over,
    )
    _print_grid(render_grid(session.board, session.active))


if __name__ == "__main__":
    main()
