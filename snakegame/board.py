"""Board geometry: vectors, tile options and the playing field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
RED = Color(230, 41, 55)
YELLOW = Color(253, 249, 0)


@dataclass(frozen=True)
class Vector2D:
    """An integer grid coordinate or size."""

    x: int
    y: int

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class TileOption:
    """How a single tile of the board is laid out and coloured."""

    width: float
    height: float
    padding: float = 3
    color: Color = DARKGRAY
    count: int = 0


@dataclass(frozen=True)
class SnakeMap:
    """The board: its pixel size, its size in tiles and its tile layout."""

    width: int
    height: int
    tile_count: Vector2D
    tile: TileOption


def default_square_map(size: int, tile_count: int) -> SnakeMap:
    """Return a square board of ``size`` pixels split into ``tile_count`` tiles per side."""
    if tile_count <= 0:
        raise ValueError("tile_count must be positive")
    tile = TileOption(
        width=size / tile_count,
        height=size / tile_count,
        padding=3,
        color=DARKGRAY,
    )
    return SnakeMap(size, size, Vector2D(tile_count, tile_count), tile)