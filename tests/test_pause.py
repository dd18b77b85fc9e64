import pytest

from snakegame.board import GRAY, WHITE, Vector2D, default_square_map
from snakegame.food import Food
from snakegame.game import Game, GameState, Key
from snakegame.pause import PauseMenu, PauseOption
from snakegame.snake import Snake


@pytest.fixture
def pause():
    return PauseMenu("Game is Paused!", Vector2D(300, 200))


@pytest.fixture
def game():
    return Game(default_square_map(100, 10), Snake(), Food(Vector2D(1, 1)))


def test_defaults(pause):
    assert pause.current is PauseOption.RESUME
    assert pause.tick == 0
    assert pause.size == Vector2D(300, 200)


@pytest.mark.parametrize("key", [Key.UP, Key.DOWN])
def test_arrows_toggle_option(pause, key):
    pause.cycle(key)
    assert pause.current is PauseOption.EXIT
    pause.cycle(key)
    assert pause.current is PauseOption.RESUME


def test_enter_on_resume_runs(pause):
    assert pause.cycle(Key.ENTER) is GameState.RUNNING


def test_enter_on_exit_quits(pause):
    pause.cycle(Key.DOWN)
    assert pause.cycle(Key.ENTER) is GameState.QUIT


def test_other_keys_stay_paused(pause):
    assert pause.cycle(Key.NULL) is GameState.PAUSE
    assert pause.cycle(Key.UP) is GameState.PAUSE


def test_tick_wraps(pause):
    for _ in range(31):
        pause.cycle(Key.NULL)
    assert pause.tick == 0


def test_option_color(pause):
    assert pause.option_color(PauseOption.RESUME) == WHITE
    assert pause.option_color(PauseOption.EXIT) == GRAY
    for _ in range(20):
        pause.cycle(Key.NULL)
    assert pause.option_color(PauseOption.RESUME) == GRAY


def test_space_toggles_game_state(pause, game):
    pause.handle_event(game, Key.SPACE)
    assert game.state is GameState.PAUSE
    pause.handle_event(game, Key.SPACE)
    assert game.state is GameState.RUNNING


def test_space_from_quit_resumes(pause, game):
    game.state = GameState.QUIT
    pause.handle_event(game, Key.SPACE)
    assert game.state is GameState.RUNNING


def test_other_key_leaves_state(pause, game):
    pause.handle_event(game, Key.ENTER)
    assert game.state is GameState.RUNNING