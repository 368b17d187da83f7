import os
import random
from typing import Callable, List, Optional

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake_arcade.board import Board
from snake_arcade.session import GameSession


class FakeClock:
    """Records what the controller asks of the clock instead of ticking."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.callback: Optional[Callable[[], None]] = None
        self.interval: Optional[int] = None
        self.running = False

    def bind(self, callback):
        self.callback = callback

    def start(self, interval=None):
        if interval is not None:
            self.interval = interval
        self.running = True
        self.calls.append(("start", interval))

    def stop(self):
        self.running = False
        self.calls.append(("stop",))

    def set_interval(self, interval):
        self.interval = interval
        self.calls.append(("set_interval", interval))

    def restart(self):
        self.running = True
        self.calls.append(("restart",))

    def fire(self):
        return self.callback()


class RecordingSound:
    def __init__(self) -> None:
        self.played: List[str] = []

    def play_eat(self):
        self.played.append("eat")

    def play_game_over(self):
        self.played.append("game_over")

    def play_high_score(self):
        self.played.append("high_score")


class MemoryStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saved: List[int] = []

    def load(self):
        return self.value

    def save(self, value):
        self.value = value
        self.saved.append(value)


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames = []

    def draw(self, snapshot):
        self.frames.append(snapshot)


@pytest.fixture
def sound():
    return RecordingSound()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def board():
    return Board(24, 24, random.Random(1234))


@pytest.fixture
def session(board, sound, store):
    return GameSession(board=board, sound=sound, store=store)


@pytest.fixture
def running_session(session):
    session.select_difficulty(2)
    return session


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()
