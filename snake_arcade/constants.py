"""Gameplay constants shared across the game modules."""

GRID_WIDTH: int = 24
GRID_HEIGHT: int = 24
TILE_SIZE: int = 25
START_LENGTH: int = 3

SCORE_PER_FOOD: int = 10
SCORE_PER_LEVEL: int = 50

MIN_DELAY: int = 60
DELAY_STEP: int = 10
DIFFICULTY_DELAYS: dict[int, int] = {
    1: 180,
    2: 140,
    3: 100,
}
DIFFICULTY_NAMES: dict[int, str] = {
    1: "Easy",
    2: "Normal",
    3: "Hard",
}

HIGHSCORE_FILE: str = "highscore.txt"
SOUNDS_DIR: str = "sounds"
FRAME_RATE: int = 60
