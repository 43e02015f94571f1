import pygame
import pytest

from snakegame.game import Fruit, Snake
from snakegame.renderer import (
    BANNER_COLOR,
    FRUIT_COLOR,
    GRASS_COLOR,
    MARGIN,
    SNAKE_BORDER_COLOR,
    SNAKE_FILL_COLOR,
    TEXT_SIZE,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Renderer,
    load_font,
    tile_rect,
)


@pytest.fixture
def renderer():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    return Renderer(surface, load_font(None, TEXT_SIZE))


def test_tile_rect_origin_sits_below_banner():
    rect = tile_rect(0, 0)
    assert (rect.x, rect.y, rect.w, rect.h) == (0, MARGIN, TILE_SIZE, TILE_SIZE)


def test_tile_rect_scales_with_cell():
    a = tile_rect(2, 3)
    b = tile_rect(3, 4)
    assert b.x - a.x == TILE_SIZE
    assert b.y - a.y == TILE_SIZE


def test_load_font_missing_file_raises():
    with pytest.raises((FileNotFoundError, OSError)):
        load_font("no/such/font.ttf", TEXT_SIZE)


def test_background_colours(renderer):
    renderer.draw_background()
    assert tuple(renderer.surface.get_at((0, 0))) == BANNER_COLOR
    assert tuple(renderer.surface.get_at((5, MARGIN - 1))) == BANNER_COLOR
    assert tuple(renderer.surface.get_at((5, MARGIN))) == GRASS_COLOR


def test_fruit_is_drawn_in_its_tile(renderer):
    renderer.draw_background()
    renderer.draw_fruit(Fruit(3, 4))
    rect = tile_rect(3, 4)
    assert tuple(renderer.surface.get_at(rect.center)) == FRUIT_COLOR
    assert tuple(renderer.surface.get_at((rect.right, rect.centery))) == GRASS_COLOR


def test_snake_fill_and_border(renderer):
    renderer.draw_background()
    renderer.draw_snake(Snake([(1, 1), (2, 1)]))
    for cell in [(1, 1), (2, 1)]:
        rect = tile_rect(*cell)
        assert tuple(renderer.surface.get_at(rect.center)) == SNAKE_FILL_COLOR
        assert tuple(renderer.surface.get_at(rect.topleft)) == SNAKE_BORDER_COLOR


def test_score_is_centred_in_banner(renderer):
    renderer.draw_background()
    rect = renderer.draw_score(7)
    assert rect.x == (WINDOW_WIDTH - rect.w) // 2
    assert rect.y == (MARGIN - rect.h) // 2
    assert rect.w > 0


def test_longer_score_is_wider(renderer):
    short = renderer.draw_score(1)
    long = renderer.draw_score(123456)
    assert long.w > short.w