"""A tile-based snake game on a wrapping board, with a start menu and a pause screen."""

__version__ = "0.1.0"