"""Translate local keyboard input into game commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

import pygame

from .utils import Direction


@dataclass(frozen=True)
class SelectDifficulty:
    level: int


@dataclass(frozen=True)
class MoveDirection:
    direction: Direction


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Quit:
    pass


InputEvent = Union[SelectDifficulty, MoveDirection, TogglePause, Restart, Quit]


DIFFICULTY_KEYS: Dict[int, int] = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_KP1: 1,
    pygame.K_KP2: 2,
    pygame.K_KP3: 3,
}

DIRECTION_KEYS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class InputManager:
    """Map pygame events onto :data:`InputEvent` values."""

    def translate(self, event: pygame.event.Event) -> Optional[InputEvent]:
        if event.type == pygame.QUIT:
            return Quit()
        if event.type != pygame.KEYDOWN:
            return None
        key = event.key
        if key == pygame.K_ESCAPE:
            return Quit()
        if key in DIFFICULTY_KEYS:
            return SelectDifficulty(DIFFICULTY_KEYS[key])
        if key in DIRECTION_KEYS:
            return MoveDirection(DIRECTION_KEYS[key])
        if key == pygame.K_p:
            return TogglePause()
        if key == pygame.K_r:
            return Restart()
        return None
