"""The pause overlay shown over a running game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from snakegame.board import GRAY, WHITE, Color, Vector2D
from snakegame.game import Game, GameState, Key

_TICK_PERIOD = 31
_HIGHLIGHT_TICKS = 20


class PauseOption(Enum):
    RESUME = 0
    EXIT = 1


@dataclass
class PauseMenu:
    """A pause box of a given size with Resume and Quit options."""

    title: str
    size: Vector2D
    tick: int = 0
    current: PauseOption = PauseOption.RESUME

    def option_color(self, option: PauseOption) -> Color:
        """White for the highlighted option during the visible part of a blink."""
        if option is self.current and self.tick < _HIGHLIGHT_TICKS:
            return WHITE
        return GRAY

    def cycle(self, key: Key) -> GameState:
        """Advance one frame and return the state the game should be in."""
        self.tick = (self.tick + 1) % _TICK_PERIOD

        if key == Key.DOWN:
            value = self.current.value - 1
            self.current = PauseOption.EXIT if value < 0 else PauseOption(value)
        elif key == Key.UP:
            self.current = PauseOption((self.current.value + 1) % len(PauseOption))

        if key == Key.ENTER:
            if self.current is PauseOption.RESUME:
                return GameState.RUNNING
            return GameState.QUIT
        return GameState.PAUSE

    def handle_event(self, game: Game, key: Key) -> None:
        """Toggle between running and paused when SPACE is pressed."""
        if key == Key.SPACE:
            game.state = GameState.PAUSE if game.state is GameState.RUNNING else GameState.RUNNING