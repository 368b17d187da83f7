"""Game session: the state machine and the per tick simulation step.

All per game data lives on a single :class:`GameSession` value. Inputs and
ticks mutate it through its methods; renderers only ever see the immutable
:class:`GameSnapshot` returned by :meth:`GameSession.snapshot`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional, Protocol, Tuple

from . import constants
from .board import Board
from .collision import CollisionKind
from .speed import SpeedController
from .utils import Cell, Direction


class GameState(Enum):
    MENU = "menu"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class SoundSink(Protocol):
    def play_eat(self) -> None: ...

    def play_game_over(self) -> None: ...

    def play_high_score(self) -> None: ...


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


@dataclass(frozen=True)
class StepResult:
    """What a single simulation step changed."""

    ate: bool = False
    new_interval: Optional[int] = None
    collision: Optional[CollisionKind] = None

    @property
    def game_over(self) -> bool:
        return self.collision is not None


@dataclass(frozen=True)
class GameSnapshot:
    """Read only view of a session handed to renderers."""

    state: GameState
    paused: bool
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    score: int
    high_score: int
    level: int
    interval: int
    grid_width: int
    grid_height: int
    new_high_score: bool
    difficulty: Optional[int]


class GameSession:
    """Holds one player's game and enforces the legal state transitions.

    ``state`` is one of ``MENU``, ``RUNNING`` or ``GAME_OVER``. Pausing is the
    orthogonal ``paused`` flag, which may only be set while ``RUNNING``; the
    combined view is available as :attr:`phase`.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        sound: Optional[SoundSink] = None,
        store: Optional[ScoreStore] = None,
    ) -> None:
        self.board = board or Board()
        self.sound = sound
        self.store = store
        self.high_score = store.load() if store is not None else 0
        self.state = GameState.MENU
        self.paused = False
        self.difficulty: Optional[int] = None
        self.base_delay = constants.DIFFICULTY_DELAYS[2]
        self.speed = SpeedController(self.base_delay)
        self.score = 0
        self.new_high_score = False

    @property
    def level(self) -> int:
        return self.speed.level

    @property
    def interval(self) -> int:
        return self.speed.interval

    @property
    def phase(self) -> GameState:
        if self.state is GameState.RUNNING and self.paused:
            return GameState.PAUSED
        return self.state

    @property
    def ticking(self) -> bool:
        """``True`` while the simulation step should be driven by the clock."""

        return self.state is GameState.RUNNING and not self.paused

    def _check_invariants(self) -> None:
        if self.paused and self.state is not GameState.RUNNING:
            raise RuntimeError(f"Session paused while {self.state.name}")

    # -- transitions -------------------------------------------------------

    def select_difficulty(self, difficulty: int) -> bool:
        """Start a new game from the menu. Returns ``False`` if ignored."""

        if self.state is not GameState.MENU:
            logging.debug("Ignoring difficulty %s while %s", difficulty, self.phase.name)
            return False
        base_delay = constants.DIFFICULTY_DELAYS.get(difficulty)
        if base_delay is None:
            logging.debug("Ignoring unknown difficulty %r", difficulty)
            return False

        self.difficulty = difficulty
        self.base_delay = base_delay
        self.speed = SpeedController(base_delay)
        self.score = 0
        self.new_high_score = False
        self.paused = False
        self.board.initialize()
        self.state = GameState.RUNNING
        self._check_invariants()
        logging.info(
            "Game started on %s (%d ms per tick)",
            constants.DIFFICULTY_NAMES[difficulty],
            self.interval,
        )
        return True

    def toggle_pause(self) -> bool:
        """Pause or resume a running game. Returns ``False`` if ignored."""

        if self.state is not GameState.RUNNING:
            logging.debug("Ignoring pause while %s", self.phase.name)
            return False
        self.paused = not self.paused
        self._check_invariants()
        logging.info("Game %s", "paused" if self.paused else "resumed")
        return True

    def restart(self) -> bool:
        """Return from the game over screen to the menu."""

        if self.state is not GameState.GAME_OVER:
            logging.debug("Ignoring restart while %s", self.phase.name)
            return False
        self.board.clear()
        self.score = 0
        self.speed = SpeedController(self.base_delay)
        self.new_high_score = False
        self.difficulty = None
        self.state = GameState.MENU
        self._check_invariants()
        return True

    def change_direction(self, direction: Direction) -> bool:
        """Queue a heading change for the next step."""

        if not self.ticking:
            logging.debug("Ignoring move %s while %s", direction.name, self.phase.name)
            return False
        return self.board.set_direction(direction)

    # -- simulation --------------------------------------------------------

    def step(self) -> StepResult:
        """Advance the game by one tick.

        The move is applied first and collisions are checked against the new
        head, so the snake dies by entering a wall or its own body.
        """

        if not self.ticking:
            return StepResult()

        new_interval: Optional[int] = None
        ate = self.board.move()
        if ate:
            self.score += constants.SCORE_PER_FOOD
            if self.sound is not None:
                self.sound.play_eat()
            new_interval = self.speed.on_score_changed(self.score)
            if new_interval is not None:
                logging.info("Level %d reached, tick interval now %d ms", self.level, new_interval)
            self.board.spawn_food()

        collision = self.board.collision()
        if collision is not None:
            self._game_over(collision)
        return StepResult(ate=ate, new_interval=new_interval, collision=collision)

    def _game_over(self, collision: CollisionKind) -> None:
        self.state = GameState.GAME_OVER
        self.paused = False
        self.new_high_score = self.score > self.high_score
        if self.new_high_score:
            self.high_score = self.score
            if self.store is not None:
                self.store.save(self.high_score)
        logging.info(
            "Game over (%s collision) with score %d%s",
            collision.value,
            self.score,
            ", new high score" if self.new_high_score else "",
        )
        if self.sound is not None:
            self.sound.play_game_over()
            if self.new_high_score:
                self.sound.play_high_score()
        self._check_invariants()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.phase,
            paused=self.paused,
            snake=self.board.snake.cells(),
            food=self.board.food_position,
            direction=self.board.direction,
            score=self.score,
            high_score=self.high_score,
            level=self.level,
            interval=self.interval,
            grid_width=self.board.width,
            grid_height=self.board.height,
            new_high_score=self.new_high_score,
            difficulty=self.difficulty,
        )
