"""Drawing of the board, the entities and the menus onto a pygame surface."""

from __future__ import annotations

from functools import lru_cache

import pygame

from snakegame.board import BLACK, DARKGRAY, WHITE, Color, SnakeMap
from snakegame.food import Food
from snakegame.game import Game
from snakegame.menu import Menu, MenuOption
from snakegame.pause import PauseMenu, PauseOption
from snakegame.snake import Snake

_TITLE_FONT_SIZE = 30
_OPTION_FONT_SIZE = 25
_BORDER_MARGIN = 5


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _rect(surface: pygame.Surface, x: float, y: float, w: float, h: float, color: Color) -> None:
    pygame.draw.rect(surface, color.as_tuple(), pygame.Rect(int(x), int(y), int(w), int(h)))


def _tile(surface: pygame.Surface, board: SnakeMap, col: int, row: int, padding: float, color: Color) -> None:
    tile = board.tile
    _rect(
        surface,
        col * tile.width + padding / 2,
        row * tile.height + padding / 2,
        tile.width - padding,
        tile.height - padding,
        color,
    )


def _text(surface: pygame.Surface, text: str, size: int, x: float, y: float, color: Color) -> None:
    image = _font(size).render(text, False, color.as_tuple())
    surface.blit(image, (int(x), int(y)))


def _measure(text: str, size: int) -> tuple[int, int]:
    return _font(size).size(text)


def draw_board(surface: pygame.Surface, board: SnakeMap) -> None:
    """Draw every tile of the board."""
    for row in range(board.tile_count.y):
        for col in range(board.tile_count.x):
            _tile(surface, board, col, row, board.tile.padding, DARKGRAY)


def draw_snake(surface: pygame.Surface, snake: Snake, board: SnakeMap) -> None:
    """Draw the snake; body nodes are inset a little more than the head."""
    last = len(snake.nodes) - 1
    for index, node in enumerate(snake.nodes):
        padding = board.tile.padding if index == last else board.tile.padding + 2
        _tile(surface, board, node.x, node.y, padding, snake.color)


def draw_food(surface: pygame.Surface, food: Food, board: SnakeMap) -> None:
    """Draw the food on its tile."""
    _tile(surface, board, food.position.x, food.position.y, board.tile.padding, food.color)


def draw_game(surface: pygame.Surface, game: Game) -> None:
    """Draw the board, then the snake, then the food."""
    draw_board(surface, game.board)
    draw_snake(surface, game.snake, game.board)
    draw_food(surface, game.food, game.board)


def draw_menu(surface: pygame.Surface, menu: Menu, game_size: int) -> None:
    """Draw the full-screen title menu."""
    half = game_size / 2
    options = [
        ("New Game", MenuOption.NEW, lambda h: -h / 2),
        ("Options", MenuOption.OPTIONS, lambda h: h * 1.5),
        ("Exit", MenuOption.QUIT_GAME, lambda h: h * 3.5),
    ]

    _rect(surface, 0, 0, game_size, game_size, BLACK)

    title_w, title_h = _measure(menu.title, _TITLE_FONT_SIZE)
    _text(surface, menu.title, _TITLE_FONT_SIZE, half - title_w / 2, half - title_h * 3, WHITE)

    for text, option, offset in options:
        w, h = _measure(text, _OPTION_FONT_SIZE)
        _text(surface, text, _OPTION_FONT_SIZE, half - w / 2, half + offset(h), menu.option_color(option))


def draw_pause(surface: pygame.Surface, pause: PauseMenu, game_size: int) -> None:
    """Draw the pause box centred on the screen."""
    half = game_size / 2
    left = half - pause.size.x / 2
    top = half - pause.size.y / 2

    _rect(surface, left, top, pause.size.x, pause.size.y, BLACK)
    pygame.draw.rect(
        surface,
        WHITE.as_tuple(),
        pygame.Rect(
            int(left - _BORDER_MARGIN),
            int(top - _BORDER_MARGIN),
            pause.size.x + _BORDER_MARGIN * 2,
            pause.size.y + _BORDER_MARGIN * 2,
        ),
        width=1,
    )

    title_w, title_h = _measure(pause.title, _OPTION_FONT_SIZE)
    base = (game_size - pause.size.y) / 2
    _text(surface, pause.title, _OPTION_FONT_SIZE, half - title_w / 2, base + 1.5 * title_h, WHITE)

    for text, option, factor in (("Resume", PauseOption.RESUME, 4), ("Quit", PauseOption.EXIT, 5.25)):
        w, _ = _measure(text, _OPTION_FONT_SIZE)
        _text(surface, text, _OPTION_FONT_SIZE, half - w / 2, base + factor * title_h, pause.option_color(option))