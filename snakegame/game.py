"""Game state and the per-frame update of a running game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from snakegame.board import SnakeMap, Vector2D
from snakegame.food import Food
from snakegame.snake import Direction, Snake

MAX_UPDATES_PER_SECOND = 12
FRAMES_PER_SECOND = 60


class Key(IntEnum):
    """Keyboard keys the game reacts to."""

    NULL = 0
    SPACE = 32
    A = 65
    D = 68
    S = 83
    W = 87
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class GameState(Enum):
    PAUSE = 1
    RUNNING = 2
    OVER = 3
    QUIT = 4


_KEY_DIRECTIONS = {
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
    Key.S: Direction.UP,
    Key.DOWN: Direction.UP,
    Key.W: Direction.DOWN,
    Key.UP: Direction.DOWN,
}


@dataclass
class Game:
    """A game in progress: board, snake, food and pacing."""

    board: SnakeMap
    snake: Snake
    food: Food
    state: GameState = GameState.RUNNING
    update_per_second: int = 3
    tick: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def handle_key(self, key: Key) -> None:
        """Steer the snake for a movement key; other keys are ignored."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.snake.update_direction(direction)

    def food_eaten(self) -> bool:
        """True when the snake's head is on the food."""
        return self.snake.head == self.food.position

    def increase_speed(self) -> None:
        """Raise the movement rate by one, up to the maximum."""
        if self.update_per_second < MAX_UPDATES_PER_SECOND:
            self.update_per_second += 1

    def food_position_valid(self) -> bool:
        """True when the food is not on any snake node."""
        return self.food.position not in self.snake.nodes

    def cycle(self, key: Key, max_position: Vector2D) -> None:
        """Advance one frame: move on schedule, steer, and resolve collisions."""
        self.tick = (self.tick + 1) % (FRAMES_PER_SECOND + 1)

        if self.tick % (FRAMES_PER_SECOND // self.update_per_second) == 0:
            self.snake.move(max_position)

        if key != Key.NULL:
            self.handle_key(key)

        if self.snake.collides_with_self():
            self.state = GameState.PAUSE

        if self.food_eaten():
            self.snake.increase_size()
            self.food.relocate(max_position, self.rng)
            while not self.food_position_valid():
                self.food.relocate(max_position, self.rng)
            self.increase_speed()