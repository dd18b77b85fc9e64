"""The main menu: option selection with a blinking highlight."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from snakegame.board import GRAY, WHITE, Color
from snakegame.game import Key

_TICK_PERIOD = 31
_HIGHLIGHT_TICKS = 20


class MenuOption(Enum):
    NONE = -1
    NEW = 0
    OPTIONS = 1
    QUIT_GAME = 2


_SELECTABLE = 3


@dataclass
class Menu:
    """The title menu and the option currently highlighted."""

    title: str
    tick: int = 0
    current: MenuOption = MenuOption.NEW

    def option_color(self, option: MenuOption) -> Color:
        """White for the highlighted option during the visible part of a blink."""
        if option is self.current and self.tick < _HIGHLIGHT_TICKS:
            return WHITE
        return GRAY

    def cycle(self, key: Key) -> MenuOption:
        """Advance one frame; return the option chosen with ENTER, else NONE."""
        self.tick = (self.tick + 1) % _TICK_PERIOD

        if key == Key.UP:
            self.tick = 0
            value = self.current.value - 1
            self.current = MenuOption.QUIT_GAME if value < 0 else MenuOption(value)
        elif key == Key.DOWN:
            self.tick = 0
            self.current = MenuOption((self.current.value + 1) % _SELECTABLE)

        if key == Key.ENTER and self.current is not MenuOption.NONE:
            chosen = self.current
            self.current = MenuOption.NEW
            return chosen

        return MenuOption.NONE