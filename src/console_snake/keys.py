"""Raw input signals understood by the game."""

from __future__ import annotations

import enum

from console_snake.grid import Direction


class InputKey(enum.Enum):
    """A key press after translation from the terminal's key codes."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    OTHER = "other"


_KEY_DIRECTIONS: dict[InputKey, Direction] = {
    InputKey.UP: Direction.UP,
    InputKey.DOWN: Direction.DOWN,
    InputKey.LEFT: Direction.LEFT,
    InputKey.RIGHT: Direction.RIGHT,
}


def key_to_direction(key: InputKey | None) -> Direction | None:
    """Return the direction an arrow key asks for, or None for anything else."""
    if key is None:
        return None
    return _KEY_DIRECTIONS.get(key)
