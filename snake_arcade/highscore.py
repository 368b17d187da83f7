"""Best effort persistence of the high score in a small text file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Union

from . import constants

_DIGITS = re.compile(r"[0-9]+")


def _parse_score(line: str) -> int:
    """Parse an ASCII decimal integer the way it is written by :meth:`HighScoreStore.save`."""

    line = line.strip()
    if line.startswith("-") and _DIGITS.fullmatch(line[1:]):
        return -int(line[1:])
    if not _DIGITS.fullmatch(line):
        raise ValueError(f"not a decimal integer: {line!r}")
    return int(line)


class HighScoreStore:
    """Read and write the high score as a decimal integer on its own line.

    Neither method raises on I/O or format problems: a missing or garbled
    file loads as ``0`` and a failed write only leaves a warning in the log.
    """

    def __init__(self, path: Union[str, Path] = constants.HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            text = self.path.read_text(encoding="utf-8")
            value = _parse_score(text.splitlines()[0] if text.strip() else "0")
        except (OSError, ValueError, UnicodeDecodeError) as exc:
            logging.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        if value < 0:
            logging.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        try:
            self.path.write_text(f"{int(value)}\n", encoding="utf-8")
        except OSError as exc:
            logging.warning("Could not save high score to %s: %s", self.path, exc)
