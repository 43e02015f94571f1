# snakegame

The classic snake arcade game. The snake moves across a 32 × 24 grid.
Eating a fruit makes it one segment longer and adds one to the score.
The game ends when the snake leaves the board or runs into itself.

## Installation

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
snakegame
```

The command opens a 640 × 540 window titled "Snake". The score is shown in a band at the top.

Controls:

- **Arrow keys**: steer the snake. It cannot reverse into itself. From a horizontal heading only up and down take effect, and from a vertical heading only left and right. Only the first key pressed in each frame counts.
- **Escape**, or closing the window: quit.

The snake starts three segments long in the top-left corner, heading down. It advances one tile per frame, with a 120 ms pause after each frame. When the game ends, a line such as `Game Over, you did 4, try again!!` is printed to the terminal.

The score text uses a TrueType font read from `fonts/mouldy_cheese_font/MouldyCheeseRegular-WyMWG.ttf`, relative to the directory the game is started from. The font is not included in the package. If it cannot be loaded, the command prints `error during loading media: ...` and exits with status 1.

## Using the game logic

The rules are in `snakegame.game` and need no display:

```python
import random
from snakegame.game import Game, GameOver, Direction

game = Game(random.Random(1))
game.turn(Direction.RIGHT)
try:
    while True:
        game.tick()
except GameOver as end:
    print("final score:", end.score)
```

`Game` holds the `snake`, the `fruit`, the `direction` and the `score`.

- `Game.turn(direction)` changes the heading, but only to a direction across the current axis.
- `Game.tick()` advances one step. If the fruit lies ahead, the snake grows onto it and a new fruit is placed. If the snake hits a wall or itself, the method raises `GameOver`.

The module also provides the following:

- `Snake`: a sequence of `(x, y)` cells, head first. It has `head`, `push`, `step`, `next_head`, `occupies` and `collides`.
- `initial_snake()`, `is_fruit(snake, direction, fruit)` and `generate_fruit(snake, rng)`.

`snakegame.renderer.Renderer(surface, font)` draws onto any pygame surface:

- `draw_background()`
- `draw_fruit(fruit)`
- `draw_snake(snake)`
- `draw_score(score)`, which returns the rectangle the text was drawn in.

`load_font(path, size)` opens a font. `tile_rect(x, y)` gives the screen rectangle of a board cell.

`snakegame.main.key_to_direction(key, current)` maps a pygame key code to the new heading.

## Running the tests

```
pip install .[test]
pytest
```