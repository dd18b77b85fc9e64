"""The game window and main loop."""

from __future__ import annotations

import argparse
from collections import deque
from enum import Enum

import pygame

from snakegame.board import BLACK, Vector2D, default_square_map
from snakegame.food import new_food
from snakegame.game import Game, GameState, Key
from snakegame.menu import Menu, MenuOption
from snakegame.pause import PauseMenu
from snakegame.render import draw_game, draw_menu, draw_pause
from snakegame.snake import default_snake

GAME_SIZE = 650
TILE_COUNT = 20
INITIAL_SNAKE_SIZE = 3
TARGET_FPS = 60
WINDOW_TITLE = "Snake Game"


class Scene(Enum):
    MENU = 0
    GAME = 1


_PYGAME_KEYS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_w: Key.W,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


def translate_key(pygame_key: int) -> Key:
    """Map a pygame key code to a game key, or Key.NULL if it has no meaning."""
    return _PYGAME_KEYS.get(pygame_key, Key.NULL)


def _poll(pending: deque[Key]) -> bool:
    """Queue pressed keys; return False once the window should close."""
    keep_open = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            keep_open = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                keep_open = False
                continue
            key = translate_key(event.key)
            if key is not Key.NULL:
                pending.append(key)
    return keep_open


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed or Exit is chosen."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake on a wrapping board.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((GAME_SIZE, GAME_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        max_position = Vector2D(TILE_COUNT, TILE_COUNT)
        scene = Scene.MENU
        menu = Menu("Snake Game!!")
        board = default_square_map(GAME_SIZE, TILE_COUNT)
        game = Game(board, default_snake(board, INITIAL_SNAKE_SIZE), new_food(max_position))
        pause = PauseMenu("Game is Paused!", Vector2D(300, 200))
        pending: deque[Key] = deque()

        while _poll(pending):
            key = pending.popleft() if pending else Key.NULL

            if scene is Scene.GAME:
                pause.handle_event(game, key)
                if game.state is GameState.RUNNING:
                    game.cycle(key, max_position)
                elif game.state is GameState.PAUSE:
                    game.state = pause.cycle(key)
                elif game.state is GameState.QUIT:
                    scene = Scene.MENU
                    game.state = GameState.RUNNING
            else:
                selection = menu.cycle(key)
                if selection is MenuOption.NEW:
                    scene = Scene.GAME
                elif selection is MenuOption.QUIT_GAME:
                    return 0

            screen.fill(BLACK.as_tuple())
            if scene is Scene.GAME:
                draw_game(screen, game)
                if game.state is GameState.PAUSE:
                    draw_pause(screen, pause, GAME_SIZE)
            else:
                draw_menu(screen, menu, GAME_SIZE)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0