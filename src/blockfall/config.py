"""Board geometry and timing settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .tetromino import SHAPES


# Frames between automatic drops at the default refresh rate.
DEFAULT_FRAMES = 35

_WIDEST_PIECE = max(len(matrix[0]) for matrix in SHAPES.values())

_MAPPING_KEYS = {
    "BOARD_WIDTH": "board_width",
    "BOARD_HEIGHT": "board_height",
    "CELL_SIZE": "cell_size",
    "FRAMES": "frames",
}


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one game session.

    The board is sized in pixels and divided into ``cell_size`` squares, so
    ``cols`` and ``rows`` are derived rather than configured directly.
    """

    board_width: int = 320
    board_height: int = 640
    cell_size: int = 32
    frames: int = DEFAULT_FRAMES

    def __post_init__(self) -> None:
        for name in ("board_width", "board_height", "cell_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.frames < 0:
            raise ValueError("frames must not be negative")
        if self.board_width % self.cell_size or self.board_height % self.cell_size:
            raise ValueError("board dimensions must be multiples of cell_size")
        if self.cols < _WIDEST_PIECE:
            raise ValueError(f"board must be at least {_WIDEST_PIECE} cells wide")

    @property
    def cols(self) -> int:
        return self.board_width // self.cell_size

    @property
    def rows(self) -> int:
        return self.board_height // self.cell_size

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "GameConfig":
        """Build a config from upper-case keys such as ``CELL_SIZE``.

        Unknown keys are ignored so a larger settings dict can be passed as is.
        """

        kwargs = {
            field: int(mapping[key])
            for key, field in _MAPPING_KEYS.items()
            if key in mapping
        }
        return cls(**kwargs)
