"""Pygame based renderer for the game."""

from __future__ import annotations

from typing import Iterable, Tuple

import pygame

from . import constants
from .session import GameSnapshot, GameState
from .utils import Cell

Color = Tuple[int, ...]


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, tile_size: int = constants.TILE_SIZE) -> None:
        self.screen = screen
        self.tile_size = tile_size
        self.hud_font = pygame.font.SysFont("consolas", 18, bold=True)
        self.title_font = pygame.font.SysFont("consolas", 40, bold=True)
        self.overlay_font = pygame.font.SysFont("consolas", 36, bold=True)
        self.text_font = pygame.font.SysFont("consolas", 22)
        self.background_color = (0, 0, 0)
        self.grid_color = (64, 64, 64)
        self.head_color = (0, 255, 0)
        self.body_color = (0, 178, 0)
        self.food_color = (255, 0, 0)
        self.text_color = (255, 255, 255)
        self.highlight_color = (255, 255, 0)

    def draw(self, snapshot: GameSnapshot) -> None:
        """Draw one complete frame for ``snapshot`` and flip the display."""

        self.clear()
        self.draw_grid(snapshot.grid_width, snapshot.grid_height)
        self.draw_snake(snapshot.snake)
        if snapshot.food is not None:
            self.draw_food(snapshot.food)
        self.draw_hud(snapshot)
        if snapshot.state is GameState.MENU:
            self.draw_menu()
        elif snapshot.state is GameState.PAUSED:
            self.draw_paused()
        elif snapshot.state is GameState.GAME_OVER:
            self.draw_game_over(snapshot)
        self.present()

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        return pygame.Rect(cell.x * self.tile_size, cell.y * self.tile_size, self.tile_size, self.tile_size)

    def draw_grid(self, width: int, height: int) -> None:
        pixel_width = width * self.tile_size
        pixel_height = height * self.tile_size
        for x in range(0, pixel_width, self.tile_size):
            pygame.draw.line(self.screen, self.grid_color, (x, 0), (x, pixel_height))
        for y in range(0, pixel_height, self.tile_size):
            pygame.draw.line(self.screen, self.grid_color, (0, y), (pixel_width, y))

    def draw_snake(self, cells: Iterable[Cell]) -> None:
        for index, cell in enumerate(cells):
            color = self.head_color if index == 0 else self.body_color
            pygame.draw.rect(self.screen, color, self._cell_rect(cell))

    def draw_food(self, cell: Cell) -> None:
        pygame.draw.ellipse(self.screen, self.food_color, self._cell_rect(cell))

    def draw_hud(self, snapshot: GameSnapshot) -> None:
        text = (
            f"Score: {snapshot.score}   High: {snapshot.high_score}"
            f"   Level: {snapshot.level}   [P]ause"
        )
        surface = self.hud_font.render(text, True, self.text_color)
        self.screen.blit(surface, (10, 6))

    def _shade(self, alpha: int) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.screen.blit(overlay, (0, 0))

    def _blit_centered(self, font: pygame.font.Font, text: str, y: int, color: Color) -> None:
        surface = font.render(text, True, color)
        x = (self.screen.get_width() - surface.get_width()) // 2
        self.screen.blit(surface, (x, y))

    def draw_menu(self) -> None:
        self._shade(200)
        middle = self.screen.get_height() // 2
        self._blit_centered(self.title_font, "SNAKE GAME", middle - 110, self.text_color)
        lines = [
            f"{key} - {name}" for key, name in sorted(constants.DIFFICULTY_NAMES.items())
        ]
        for index, line in enumerate(lines):
            self._blit_centered(self.text_font, line, middle - 40 + index * 30, self.text_color)
        self._blit_centered(self.text_font, "Use Arrow Keys or WASD", middle + 80, self.text_color)

    def draw_paused(self) -> None:
        self._shade(150)
        self._blit_centered(self.overlay_font, "PAUSED", self.screen.get_height() // 2 - 20, self.highlight_color)

    def draw_game_over(self, snapshot: GameSnapshot) -> None:
        self._shade(170)
        middle = self.screen.get_height() // 2
        self._blit_centered(self.overlay_font, "GAME OVER", middle - 50, self.text_color)
        self._blit_centered(self.text_font, "Press R to return to Menu", middle + 5, self.text_color)
        if snapshot.new_high_score:
            self._blit_centered(self.text_font, "NEW HIGH SCORE!", middle + 40, self.highlight_color)

    def present(self) -> None:
        pygame.display.flip()
