"""Drawing of the board, snake, fruit and score with pygame."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from snakegame.game import Fruit

WINDOW_TITLE = "Snake"
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 540
TILE_SIZE = 20
TEXT_SIZE = 40
MARGIN = 60
FONT_PATH = "fonts/mouldy_cheese_font/MouldyCheeseRegular-WyMWG.ttf"

GRASS_COLOR = (34, 139, 34, 255)
BANNER_COLOR = (34, 119, 34, 255)
FRUIT_COLOR = (255, 0, 0, 255)
SNAKE_FILL_COLOR = (0, 0, 255, 255)
SNAKE_BORDER_COLOR = (20, 20, 240, 255)
TEXT_COLOR = (255, 255, 255, 255)


def tile_rect(x: int, y: int) -> pygame.Rect:
    """Screen rectangle of board cell (x, y), below the score banner."""
    return pygame.Rect(TILE_SIZE * x, MARGIN + TILE_SIZE * y, TILE_SIZE, TILE_SIZE)


def load_font(path: str | None, size: int) -> pygame.font.Font:
    """Open a font, initialising the font module if needed."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class Renderer:
    """Draws game state onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self.surface = surface
        self.font = font

    def draw_background(self) -> None:
        self.surface.fill(GRASS_COLOR)
        self.surface.fill(BANNER_COLOR, pygame.Rect(0, 0, WINDOW_WIDTH, MARGIN))

    def draw_fruit(self, fruit: Fruit) -> None:
        self.surface.fill(FRUIT_COLOR, tile_rect(fruit.x, fruit.y))

    def draw_snake(self, snake: Iterable[tuple[int, int]]) -> None:
        for x, y in snake:
            rect = tile_rect(x, y)
            self.surface.fill(SNAKE_FILL_COLOR, rect)
            pygame.draw.rect(self.surface, SNAKE_BORDER_COLOR, rect, 1)

    def draw_score(self, score: int) -> pygame.Rect:
        """Draw the score centred in the banner and return where it went."""
        text = self.font.render(f"Score: {score}", True, TEXT_COLOR)
        rect = text.get_rect()
        rect.x = (WINDOW_WIDTH - rect.w) // 2
        rect.y = (MARGIN - rect.h) // 2
        self.surface.blit(text, rect)
        return rect