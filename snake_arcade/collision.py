"""Collision helpers for the simulation step."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .snake import Snake
from .utils import Cell


class CollisionKind(Enum):
    WALL = "wall"
    SELF = "self"


def is_outside(cell: Cell, width: int, height: int) -> bool:
    """Return ``True`` if ``cell`` lies outside ``[0, width) x [0, height)``."""

    return not (0 <= cell.x < width and 0 <= cell.y < height)


def detect_collision(snake: Snake, width: int, height: int) -> Optional[CollisionKind]:
    """Classify the collision of the snake's current head, if any.

    Must be called after the move has been applied: the head is expected to
    already sit in the cell it moved into.
    """

    if is_outside(snake.head, width, height):
        return CollisionKind.WALL
    if snake.hits_itself():
        return CollisionKind.SELF
    return None
