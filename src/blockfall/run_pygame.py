"""Simple pygame front-end for the engine.

The window is a thin host: it draws the session snapshot, forwards arrow keys
as intents and calls :meth:`GameSession.tick` once per frame.  None of the
simulation rules live here.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .board import VALUE_KINDS
from .config import GameConfig
from .game_state import GameSession, Snapshot
from .tetromino import color_of


LOGGER = logging.getLogger(__name__)

# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (0, 0, 0)


def draw_cell(screen: pygame.Surface, row: int, col: int, color: str, cell_size: int) -> None:
    # Drawing one pixel short of the cell size leaves a grid line between cells.
    rect = pygame.Rect(col * cell_size, row * cell_size, cell_size - 1, cell_size - 1)
    pygame.draw.rect(screen, pygame.Color(color), rect)


def draw_frame(screen: pygame.Surface, frame: Snapshot, cell_size: int) -> None:
    """Render locked cells, the active piece and the game-over banner."""

    screen.fill(BACKGROUND)
    for r, line in enumerate(frame.grid):
        for c, value in enumerate(line):
            if value:
                draw_cell(screen, r, c, color_of(VALUE_KINDS[value]), cell_size)

    color = color_of(frame.active.kind)
    for r, c in frame.active.blocks():
        if r >= 0:
            draw_cell(screen, r, c, color, cell_size)

    if frame.game_over:
        width, height = screen.get_size()
        banner = pygame.Surface((width, 60), pygame.SRCALPHA)
        banner.fill((0, 0, 0, 190))
        screen.blit(banner, (0, height // 2 - 30))
        font = pygame.font.SysFont("monospace", 36)
        text = font.render("GAME OVER", True, pygame.Color("white"))
        screen.blit(text, text.get_rect(center=(width // 2, height // 2)))


def handle_key(event: pygame.event.Event, session: GameSession) -> None:
    """Translate a key press into a session intent."""

    if event.key == pygame.K_LEFT:
        session.move_left()
    elif event.key == pygame.K_RIGHT:
        session.move_right()
    elif event.key == pygame.K_UP:
        session.rotate()
    elif event.key == pygame.K_DOWN:
        session.soft_drop()
    elif event.key == pygame.K_SPACE:
        session.toggle_pause()
    elif event.key == pygame.K_r and session.game_over:
        session.reset()


class GameRunner:
    """Own a session and drive it from the pygame event loop."""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or GameConfig()
        self.session = GameSession(config=self.config, seed=seed)
        self.session.listeners.append(self)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def on_game_over(self, session: GameSession) -> None:
        pygame.display.set_caption(f"Blockfall - Game over - Lines: {session.lines_cleared}")

    def _caption(self) -> str:
        paused = "Paused - " if self.session.paused else ""
        return f"Blockfall - {paused}Lines: {self.session.lines_cleared}"

    def run(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode((self.config.board_width, self.config.board_height))
        clock = pygame.time.Clock()
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self.session)

            self.session.tick()
            if not self.session.game_over:
                pygame.display.set_caption(self._caption())
            draw_frame(screen, self.session.snapshot(), self.config.cell_size)
            pygame.display.flip()

        pygame.quit()
        LOGGER.info("Game stopped")

    def stop(self) -> None:
        self._running = False


def main(config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
    GameRunner(config, seed=seed).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
