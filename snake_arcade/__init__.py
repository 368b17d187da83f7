"""Grid based snake arcade game."""

__all__ = [
    "board",
    "clock",
    "collision",
    "constants",
    "controller",
    "food",
    "highscore",
    "input",
    "main",
    "render",
    "session",
    "snake",
    "sound",
    "speed",
    "utils",
]
