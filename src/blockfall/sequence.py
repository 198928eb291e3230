"""Bag randomizer producing the order in which pieces are dealt."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple, Union

from .tetromino import PieceKind


LOGGER = logging.getLogger(__name__)


class SequenceGenerator:
    """Deal piece kinds from shuffled bags of all seven kinds.

    Every kind appears exactly once per bag.  The bag is a list consumed from
    its end and only refilled once it is empty, so it always holds the unused
    tail of one permutation.
    """

    def __init__(self, rng: Union[random.Random, int, None] = None) -> None:
        if isinstance(rng, random.Random):
            self._rng = rng
        else:
            self._rng = random.Random(rng)
        self._pending: List[PieceKind] = []

    def seed(self, seed: Optional[int]) -> None:
        """Seed the underlying RNG (affects bags generated from now on)."""

        if seed is not None:
            self._rng.seed(seed)

    @property
    def pending(self) -> Tuple[PieceKind, ...]:
        """Kinds left in the current bag; the last one is dealt next."""

        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def clear(self) -> None:
        """Drop the remainder of the current bag."""

        self._pending = []

    def _generate(self) -> None:
        pool = list(PieceKind)
        while pool:
            index = int(self._rng.random() * len(pool))
            self._pending.append(pool.pop(index))
        LOGGER.debug("New bag: %s", "".join(kind.value for kind in self._pending))

    def next(self) -> PieceKind:
        """Return the next piece kind, refilling the bag when it runs out."""

        if not self._pending:
            self._generate()
        return self._pending.pop()
