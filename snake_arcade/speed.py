"""Speed controller deriving the tick interval from the score."""

from __future__ import annotations

from typing import Optional

from . import constants


def level_for_score(score: int) -> int:
    """Return the level reached with ``score`` points."""

    return score // constants.SCORE_PER_LEVEL + 1


def interval_for_level(base_delay: int, level: int) -> int:
    """Return the tick interval in milliseconds for ``level``."""

    return max(constants.MIN_DELAY, base_delay - (level - 1) * constants.DELAY_STEP)


class SpeedController:
    """Track the level and report a faster interval whenever it increases."""

    def __init__(self, base_delay: int) -> None:
        if base_delay <= 0:
            raise ValueError("Base delay must be positive")
        self.base_delay = base_delay
        self.level = 1
        self.interval = interval_for_level(base_delay, 1)

    def on_score_changed(self, score: int) -> Optional[int]:
        """Recompute the level for ``score``.

        Returns the new interval in milliseconds when the level went up, and
        ``None`` otherwise.
        """

        level = level_for_score(score)
        if level <= self.level:
            return None
        self.level = level
        self.interval = interval_for_level(self.base_delay, level)
        return self.interval
