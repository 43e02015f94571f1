"""Window, event loop and keyboard handling for the snake game."""

from __future__ import annotations

import argparse
import sys

import pygame

from snakegame.game import Direction, Game, GameOver
from snakegame.renderer import (
    FONT_PATH,
    TEXT_SIZE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    Renderer,
    load_font,
)

FRAME_DELAY_MS = 120

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def key_to_direction(key: int, current: Direction) -> Direction:
    """Heading after pressing ``key``; turns along the current axis are ignored."""
    wanted = _KEY_DIRECTIONS.get(key)
    if wanted is None or wanted.is_horizontal() == current.is_horizontal():
        return current
    return wanted


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake.")
    parser.parse_args(argv)

    game = Game()
    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error as exc:
        print(f"error during init: {exc}")
        return 1
    try:
        font = load_font(FONT_PATH, TEXT_SIZE)
    except (OSError, pygame.error) as exc:
        print(f"error during loading media: {exc}")
        pygame.quit()
        return 1

    renderer = Renderer(screen, font)
    try:
        while True:
            key_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 0
                    if key_pressed:
                        continue
                    key_pressed = True
                    game.turn(key_to_direction(event.key, game.direction))
            try:
                game.tick()
            except GameOver as over:
                print(over)
                return 0
            renderer.draw_background()
            renderer.draw_score(game.score)
            renderer.draw_fruit(game.fruit)
            renderer.draw_snake(game.snake)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())