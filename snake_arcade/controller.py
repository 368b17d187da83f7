"""Drive a game session from clock ticks and input events."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .input import InputEvent, MoveDirection, Quit, Restart, SelectDifficulty, TogglePause
from .session import GameSession, GameSnapshot, StepResult


class Clock(Protocol):
    def bind(self, callback: Callable[[], None]) -> None: ...

    def start(self, interval: Optional[int] = None) -> None: ...

    def stop(self) -> None: ...

    def set_interval(self, interval: int) -> None: ...

    def restart(self) -> None: ...


class FrameRenderer(Protocol):
    def draw(self, snapshot: GameSnapshot) -> None: ...


class GameController:
    """Glue between the session, the tick clock and the renderer.

    The session only reports what changed; this class decides what the
    clock has to do about it.
    """

    def __init__(
        self,
        session: GameSession,
        clock: Clock,
        renderer: Optional[FrameRenderer] = None,
    ) -> None:
        self.session = session
        self.clock = clock
        self.renderer = renderer
        self.clock.bind(self.on_tick)

    def handle(self, event: InputEvent) -> bool:
        """Apply ``event``. Returns ``True`` if the session accepted it."""

        session = self.session
        if isinstance(event, SelectDifficulty):
            changed = session.select_difficulty(event.level)
            if changed:
                self.clock.start(session.interval)
        elif isinstance(event, TogglePause):
            changed = session.toggle_pause()
            if changed:
                if session.paused:
                    self.clock.stop()
                else:
                    self.clock.start(session.interval)
        elif isinstance(event, Restart):
            changed = session.restart()
        elif isinstance(event, MoveDirection):
            changed = session.change_direction(event.direction)
        elif isinstance(event, Quit):
            self.clock.stop()
            return True
        else:
            raise TypeError(f"Unknown input event {event!r}")
        if changed:
            self.render()
        return changed

    def on_tick(self) -> StepResult:
        result = self.session.step()
        if result.game_over:
            self.clock.stop()
        elif result.new_interval is not None:
            self.clock.set_interval(result.new_interval)
            self.clock.restart()
        self.render()
        return result

    def render(self) -> None:
        if self.renderer is not None:
            self.renderer.draw(self.session.snapshot())
        else:
            logging.debug("No renderer attached, skipping frame")
