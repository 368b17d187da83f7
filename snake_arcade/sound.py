"""Short sound cues played through ``pygame.mixer``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pygame

from . import constants

SOUND_FILES: Dict[str, str] = {
    "eat": "eat.wav",
    "game_over": "gameover.wav",
    "high_score": "highscore.wav",
}


class SoundPlayer:
    """Fire and forget sound effects.

    A sound that cannot be loaded, or a mixer that cannot be opened, turns the
    corresponding cue into a no-op.
    """

    def __init__(self, sounds_dir: Union[str, Path] = constants.SOUNDS_DIR) -> None:
        self.sounds_dir = Path(sounds_dir)
        self._sounds: Dict[str, Optional[pygame.mixer.Sound]] = {name: None for name in SOUND_FILES}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logging.warning("Audio unavailable, playing silently: %s", exc)
            return
        for name, filename in SOUND_FILES.items():
            self._sounds[name] = self._load(self.sounds_dir / filename)

    @staticmethod
    def _load(path: Path) -> Optional[pygame.mixer.Sound]:
        if not path.is_file():
            logging.warning("Sound not found: %s", path)
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            logging.warning("Failed to load sound %s: %s", path, exc)
            return None

    def _play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as exc:
            logging.warning("Failed to play sound %s: %s", name, exc)

    def play_eat(self) -> None:
        self._play("eat")

    def play_game_over(self) -> None:
        self._play("game_over")

    def play_high_score(self) -> None:
        self._play("high_score")


class SilentSoundPlayer:
    """Sound player used when audio is muted."""

    def play_eat(self) -> None:
        pass

    def play_game_over(self) -> None:
        pass

    def play_high_score(self) -> None:
        pass
