import random

import pytest

from snakegame.board import Vector2D, default_square_map
from snakegame.food import Food
from snakegame.game import Game, GameState, Key
from snakegame.snake import Direction, Snake

SIZE = Vector2D(20, 20)


def make_game(nodes=None, food=Vector2D(0, 0), **kwargs):
    snake = Snake(nodes=list(nodes) if nodes else [Vector2D(5, 5), Vector2D(6, 5)])
    return Game(
        default_square_map(200, SIZE.x),
        snake,
        Food(food),
        rng=random.Random(11),
        **kwargs,
    )


def test_new_game_defaults():
    game = make_game()
    assert game.state is GameState.RUNNING
    assert game.update_per_second == 3
    assert game.tick == 0


@pytest.mark.parametrize(
    "key, direction",
    [
        (Key.A, Direction.LEFT),
        (Key.D, Direction.RIGHT),
        (Key.S, Direction.UP),
        (Key.DOWN, Direction.UP),
        (Key.W, Direction.DOWN),
        (Key.UP, Direction.DOWN),
    ],
)
def test_handle_key_maps_direction(key, direction):
    game = make_game()
    game.snake.prev_direction = Direction.UP if direction in (Direction.LEFT, Direction.RIGHT) else Direction.RIGHT
    game.handle_key(key)
    assert game.snake.direction is direction


def test_handle_key_ignores_other_keys():
    game = make_game()
    game.handle_key(Key.ENTER)
    assert game.snake.direction is Direction.RIGHT


def test_food_eaten():
    game = make_game(food=Vector2D(6, 5))
    assert game.food_eaten() is True
    game.food.position = Vector2D(5, 5)
    assert game.food_eaten() is False


def test_food_position_valid():
    game = make_game(food=Vector2D(5, 5))
    assert game.food_position_valid() is False
    game.food.position = Vector2D(9, 9)
    assert game.food_position_valid() is True


def test_increase_speed_caps_at_twelve():
    game = make_game()
    for _ in range(20):
        game.increase_speed()
    assert game.update_per_second == 12


def test_cycle_moves_only_on_schedule():
    game = make_game(food=Vector2D(0, 0))
    start = list(game.snake.nodes)
    for _ in range(19):
        game.cycle(Key.NULL, SIZE)
    assert game.snake.nodes == start
    game.cycle(Key.NULL, SIZE)
    assert game.snake.nodes == start[1:] + [start[-1] + Direction.RIGHT.delta]


def test_cycle_tick_wraps():
    game = make_game(tick=60)
    game.cycle(Key.NULL, SIZE)
    assert game.tick == 0


def test_cycle_applies_key():
    game = make_game()
    game.cycle(Key.W, SIZE)
    assert game.snake.direction is Direction.DOWN


def test_cycle_eating_grows_and_speeds_up():
    game = make_game(food=Vector2D(7, 5), tick=19)
    game.cycle(Key.NULL, SIZE)
    assert len(game.snake.nodes) == 3
    assert game.update_per_second == 4
    assert game.food_position_valid()
    assert 0 <= game.food.position.x < SIZE.x
    assert 0 <= game.food.position.y < SIZE.y


def test_cycle_self_collision_pauses():
    nodes = [Vector2D(1, 1), Vector2D(2, 1), Vector2D(1, 1)]
    game = make_game(nodes=nodes, food=Vector2D(15, 15))
    game.cycle(Key.NULL, SIZE)
    assert game.state is GameState.PAUSE