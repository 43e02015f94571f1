"""Snake board state: the snake, the fruit and the rules of one tick."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

INIT_SIZE = 3
GAME_WIDTH = 32
GAME_HEIGHT = 24


class Direction(Enum):
    """Heading of the snake."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


@dataclass(frozen=True)
class Fruit:
    x: int
    y: int


class GameOver(Exception):
    """Raised when the snake hits a wall or itself."""

    def __init__(self, score: int) -> None:
        super().__init__(f"Game Over, you did {score}, try again!!")
        self.score = score


class Snake:
    """A snake as a list of cells, head first."""

    def __init__(self, segments: Iterable[tuple[int, int]]) -> None:
        self._segments = [(int(x), int(y)) for x, y in segments]
        if not self._segments:
            raise ValueError("a snake needs at least one segment")

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"Snake({self._segments!r})"

    @property
    def head(self) -> tuple[int, int]:
        return self._segments[0]

    def push(self, x: int, y: int) -> None:
        """Grow the snake with a new head at (x, y)."""
        self._segments.insert(0, (x, y))

    def next_head(self, direction: Direction) -> tuple[int, int]:
        dx, dy = direction.delta
        x, y = self.head
        return x + dx, y + dy

    def step(self, direction: Direction) -> None:
        """Move one cell; every segment takes the place of the one before it."""
        self._segments.insert(0, self.next_head(direction))
        self._segments.pop()

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self._segments

    def collides(self) -> bool:
        """True if the head is off the board or on another segment."""
        x, y = self.head
        if not (0 <= x < GAME_WIDTH and 0 <= y < GAME_HEIGHT):
            return True
        return self.head in self._segments[1:]


def initial_snake() -> Snake:
    snake = Snake([(INIT_SIZE - 1, 0)])
    for i in range(1, INIT_SIZE):
        snake.push(INIT_SIZE - 1 - i, 0)
    return snake


def is_fruit(snake: Snake, direction: Direction, fruit: Fruit) -> bool:
    """True if the next move in ``direction`` lands on the fruit."""
    return snake.next_head(direction) == (fruit.x, fruit.y)


def generate_fruit(snake: Snake, rng: random.Random) -> Fruit:
    """Place a fruit on a cell the snake does not occupy."""
    while True:
        x = rng.randrange(GAME_WIDTH) - 1
        y = rng.randrange(GAME_HEIGHT) - 1
        if not snake.occupies(x, y):
            return Fruit(x, y)


class Game:
    """One running game: snake, fruit, heading and score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = initial_snake()
        self.fruit = generate_fruit(self.snake, self.rng)
        self.direction = Direction.DOWN
        self.score = 0

    def turn(self, direction: Direction) -> None:
        """Change heading; only turns across the current axis are taken."""
        if direction.is_horizontal() != self.direction.is_horizontal():
            self.direction = direction

    def tick(self) -> None:
        """Advance one step, eating the fruit if it is ahead."""
        if is_fruit(self.snake, self.direction, self.fruit):
            self.snake.push(self.fruit.x, self.fruit.y)
            self.score += 1
            self.fruit = generate_fruit(self.snake, self.rng)
            return
        self.snake.step(self.direction)
        if self.snake.collides():
            raise GameOver(self.score)