"""Food placed at random tiles of the board."""

from __future__ import annotations

import random
from dataclasses import dataclass

from snakegame.board import RED, Color, Vector2D


@dataclass
class Food:
    """A piece of food at a board position."""

    position: Vector2D
    color: Color = RED

    def relocate(self, map_size: Vector2D, rng: random.Random | None = None) -> None:
        """Move to a uniformly random tile inside ``map_size``."""
        source = rng if rng is not None else random
        self.position = Vector2D(source.randrange(map_size.x), source.randrange(map_size.y))


def new_food(map_size: Vector2D, rng: random.Random | None = None) -> Food:
    """Return red food at a random tile inside ``map_size``."""
    food = Food(Vector2D(0, 0))
    food.relocate(map_size, rng)
    return food