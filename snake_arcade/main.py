"""Entry point for the pygame snake game."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
from typing import Optional, Sequence

import pygame

from . import constants
from .board import Board
from .clock import TickClock
from .controller import GameController
from .highscore import HighScoreStore
from .input import InputManager, Quit
from .render import Renderer
from .session import GameSession
from .sound import SilentSoundPlayer, SoundPlayer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the snake arcade game")
    parser.add_argument("--grid-width", type=int, default=constants.GRID_WIDTH, help="Board width in cells")
    parser.add_argument("--grid-height", type=int, default=constants.GRID_HEIGHT, help="Board height in cells")
    parser.add_argument("--tile-size", type=int, default=constants.TILE_SIZE, help="Cell size in pixels")
    parser.add_argument("--highscore-file", default=constants.HIGHSCORE_FILE, help="Where the high score is kept")
    parser.add_argument("--sounds-dir", default=constants.SOUNDS_DIR, help="Directory holding the .wav cues")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    if args.tile_size < 1:
        parser.error("--tile-size must be positive")
    try:
        Board(args.grid_width, args.grid_height)
    except ValueError as exc:
        parser.error(str(exc))
    return args


async def run_game(args: argparse.Namespace) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.grid_width * args.tile_size, args.grid_height * args.tile_size))
        pygame.display.set_caption("Snake")
        renderer = Renderer(screen, args.tile_size)

        sound = SilentSoundPlayer() if args.mute else SoundPlayer(args.sounds_dir)
        board = Board(args.grid_width, args.grid_height, random.Random(args.seed))
        session = GameSession(board=board, sound=sound, store=HighScoreStore(args.highscore_file))
        clock = TickClock()
        controller = GameController(session, clock, renderer)
        input_manager = InputManager()
        logging.info("High score loaded: %d", session.high_score)

        try:
            controller.render()
            running = True
            while running:
                for event in pygame.event.get():
                    command = input_manager.translate(event)
                    if command is None:
                        continue
                    controller.handle(command)
                    if isinstance(command, Quit):
                        running = False
                        break
                # Yield to the tick clock between input polls.
                await asyncio.sleep(1 / constants.FRAME_RATE)
        finally:
            clock.stop()
    finally:
        pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")
    asyncio.run(run_game(args))


if __name__ == "__main__":
    main()
