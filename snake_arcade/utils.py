"""Grid primitives used by the game core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Cell:
    """A single grid position. Two cells are equal when their coordinates are."""

    x: int
    y: int

    def step(self, direction: "Direction") -> "Cell":
        """Return the neighbouring cell in ``direction``."""

        return Cell(self.x + direction.dx, self.y + direction.dy)

    def to_tuple(self) -> tuple[int, int]:
        return self.x, self.y


class Direction(Enum):
    """Heading of the snake. Screen coordinates, so ``UP`` decreases ``y``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def is_reverse_of(self, other: "Direction") -> bool:
        return self.opposite is other
