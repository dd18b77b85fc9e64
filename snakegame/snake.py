"""The snake: its body, heading and movement on a wrapping board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from snakegame.board import YELLOW, Color, SnakeMap, Vector2D


class Direction(Enum):
    """Heading of the snake. UP increases y, DOWN decreases it."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3

    @property
    def delta(self) -> Vector2D:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.RIGHT: Vector2D(1, 0),
    Direction.LEFT: Vector2D(-1, 0),
    Direction.UP: Vector2D(0, 1),
    Direction.DOWN: Vector2D(0, -1),
}

_OPPOSITES = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass
class Snake:
    """A snake whose nodes run from tail (first) to head (last)."""

    nodes: list[Vector2D] = field(default_factory=lambda: [Vector2D(0, 0)])
    direction: Direction = Direction.RIGHT
    prev_direction: Direction = Direction.RIGHT
    color: Color = YELLOW

    @property
    def head(self) -> Vector2D:
        return self.nodes[-1]

    def increase_size(self) -> None:
        """Grow by one node placed ahead of the head, without wrapping."""
        self.nodes.append(self.head + self.direction.delta)

    def update_direction(self, direction: Direction) -> None:
        """Turn, unless the turn repeats or reverses the last movement."""
        if direction is self.prev_direction or direction is self.prev_direction.opposite:
            return
        self.direction = direction

    def move(self, map_size: Vector2D) -> None:
        """Advance one tile, the head wrapping around the board edges."""
        head = self.head + self.direction.delta
        x, y = head.x, head.y
        if x < 0:
            x = map_size.x - 1
        elif x > map_size.x - 1:
            x = 0
        elif y < 0:
            y = map_size.y - 1
        elif y > map_size.y - 1:
            y = 0
        self.nodes = self.nodes[1:] + [Vector2D(x, y)]
        self.prev_direction = self.direction

    def collides_with_self(self) -> bool:
        """True when two nodes share a tile."""
        return len(set(self.nodes)) != len(self.nodes)


def default_snake(board: SnakeMap, initial_size: int) -> Snake:
    """Return a snake of ``initial_size`` nodes starting from the board centre."""
    snake = Snake(nodes=[Vector2D(board.tile_count.x // 2, board.tile_count.y // 2)])
    for _ in range(max(0, initial_size - 1)):
        snake.increase_size()
        snake.move(board.tile_count)
    return snake