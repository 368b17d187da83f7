"""Board model: the grid, the snake on it, the food and the heading."""

from __future__ import annotations

import logging
import random
from typing import Optional

from . import constants
from .collision import CollisionKind, detect_collision
from .food import Food
from .snake import Snake
from .utils import Cell, Direction


class Board:
    """Fixed size grid owning the snake body, the food and the direction.

    Direction changes are buffered in ``pending_direction`` and only become
    the current ``direction`` at the start of the next :meth:`move`.
    """

    def __init__(
        self,
        width: int = constants.GRID_WIDTH,
        height: int = constants.GRID_HEIGHT,
        rng: Optional[random.Random] = None,
        start_length: int = constants.START_LENGTH,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")
        if start_length < 1:
            raise ValueError("Snake length must be positive")
        # The snake starts at the centre column and trails to the left.
        if start_length > width // 2 + 1:
            raise ValueError(
                f"A snake of length {start_length} does not fit on a {width}-wide board"
            )
        self.width = width
        self.height = height
        self.start_length = start_length
        self.rng = rng or random.Random()
        self.snake = Snake()
        self.food: Optional[Food] = None
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT

    def initialize(self) -> None:
        """Clear prior state and place a fresh snake centred and heading right."""

        head = Cell(self.width // 2, self.height // 2)
        self.snake = Snake.horizontal(head, self.start_length)
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.spawn_food()

    def clear(self) -> None:
        """Drop the snake and the food of the finished game."""

        self.snake = Snake()
        self.food = None
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT

    def spawn_food(self) -> Optional[Food]:
        """Put new food on a random cell not covered by the snake."""

        self.food = Food.spawn_random(self.width, self.height, self.snake.body, self.rng)
        if self.food is None:
            logging.info("No free cell left for food")
        return self.food

    def set_direction(self, direction: Direction) -> bool:
        """Queue ``direction`` for the next move.

        Returns ``False`` and keeps the previous heading when ``direction`` is
        the reverse of the current one.
        """

        if direction.is_reverse_of(self.direction):
            logging.debug("Rejected reversal from %s to %s", self.direction.name, direction.name)
            return False
        self.pending_direction = direction
        return True

    def move(self) -> bool:
        """Advance the snake one cell. Returns ``True`` when food was eaten."""

        self.direction = self.pending_direction
        new_head = self.snake.next_head(self.direction)
        ate = self.food is not None and new_head == self.food.position
        self.snake.advance(new_head, grow=ate)
        return ate

    def collision(self) -> Optional[CollisionKind]:
        return detect_collision(self.snake, self.width, self.height)

    @property
    def food_position(self) -> Optional[Cell]:
        return self.food.position if self.food is not None else None
