"""Food entity definition."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Collection, List, Optional

from .utils import Cell


def free_cells(width: int, height: int, occupied: Collection[Cell]) -> List[Cell]:
    """Return every grid cell that is not part of ``occupied``, row by row."""

    taken = set(occupied)
    return [
        Cell(x, y)
        for y in range(height)
        for x in range(width)
        if Cell(x, y) not in taken
    ]


@dataclass(frozen=True)
class Food:
    """A single piece of food the snake can eat to grow."""

    position: Cell

    @classmethod
    def spawn_random(
        cls,
        width: int,
        height: int,
        occupied: Collection[Cell],
        rng: Optional[random.Random] = None,
    ) -> Optional["Food"]:
        """Place food uniformly at random on a cell outside ``occupied``.

        Sampling happens over the explicit set of free cells, so the call
        terminates even on a nearly full grid. Returns ``None`` when no free
        cell is left.
        """

        candidates = free_cells(width, height, occupied)
        if not candidates:
            return None
        chooser = rng or random
        return cls(position=chooser.choice(candidates))
