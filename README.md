# snakegame

A snake game played on a 20 × 20 grid of tiles in a 650 × 650 window, drawn with pygame.

## Installing

```
pip install .
```

## Playing

```
snakegame
```

A window opens on the start menu, with the highlighted entry blinking:

- **Up / Down** move between *New Game*, *Options* and *Exit*, wrapping around at either end.
- **Enter** picks the highlighted entry.

During a game:

- **W A S D** or the **arrow keys** steer the snake. It cannot turn straight back on itself.
- Leaving one edge of the board brings the snake in from the opposite edge.
- Eating the red food makes the snake one tile longer and a little faster, from 3 up to 12 moves a second. New food is placed on a random tile not covered by the snake.
- **Space** pauses and resumes. Running into your own body also pauses the game.
- In the pause box, **Up / Down** switch between *Resume* and *Quit*, and **Enter** confirms. *Quit* goes back to the start menu.

Closing the window, pressing **Escape**, or choosing *Exit* on the start menu ends the program.

## What the game does not do

- *Options* on the start menu has no screen behind it; choosing it does nothing.
- There is no score, no game-over screen and no restart: a collision with the snake's own body only pauses the game, and *New Game* after *Quit* returns to the same game where it was left.
- Nothing is saved between runs.

## Using the pieces

The game logic does not need a window and can be driven directly:

```python
import random

from snakegame.board import Vector2D, default_square_map
from snakegame.food import new_food
from snakegame.game import Game, Key
from snakegame.snake import default_snake

board = default_square_map(650, 20)
snake = default_snake(board, 3)
food = new_food(Vector2D(20, 20), random.Random(1))
game = Game(board, snake, food)

game.cycle(Key.RIGHT, Vector2D(20, 20))
```

- `snakegame.board` holds `Vector2D`, `TileOption`, `SnakeMap`, `Color` and `default_square_map`.
- `snakegame.snake` holds `Snake` (`move`, `increase_size`, `update_direction`, `collides_with_self`), `Direction` and `default_snake`.
- `snakegame.food` holds `Food` (`relocate`) and `new_food`.
- `snakegame.game` holds `Game` (`cycle`, `handle_key`, `food_eaten`, `food_position_valid`, `increase_speed`), `GameState` and `Key`.
- `snakegame.menu` and `snakegame.pause` hold the start menu (`Menu`, `MenuOption`) and the pause box (`PauseMenu`, `PauseOption`).
- `snakegame.render` draws all of these onto a pygame surface (`draw_game`, `draw_board`, `draw_snake`, `draw_food`, `draw_menu`, `draw_pause`).
- `snakegame.app` opens the window and runs the main loop (`main`); `translate_key` maps pygame key codes to `Key`.

## Running the tests

```
pip install ".[test]"
pytest
```