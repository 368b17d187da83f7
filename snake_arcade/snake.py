"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .utils import Cell, Direction


@dataclass
class Snake:
    """Ordered body of the snake, head first and tail last."""

    body: List[Cell] = field(default_factory=list)

    @classmethod
    def horizontal(cls, head: Cell, length: int) -> "Snake":
        """Create a straight snake of ``length`` cells trailing left of ``head``."""

        if length < 1:
            raise ValueError("Snake length must be positive")
        return cls([Cell(head.x - offset, head.y) for offset in range(length)])

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def __contains__(self, cell: object) -> bool:
        return cell in self.body

    def next_head(self, direction: Direction) -> Cell:
        """Return where the head lands after one step in ``direction``."""

        return self.head.step(direction)

    def advance(self, new_head: Cell, grow: bool = False) -> None:
        """Move the head to ``new_head``.

        The tail cell is dropped unless ``grow`` is set, in which case the
        snake becomes one cell longer.
        """

        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()

    def hits_itself(self) -> bool:
        """Return ``True`` if the head overlaps any other body cell."""

        head = self.head
        return any(cell == head for cell in self.body[1:])

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)
