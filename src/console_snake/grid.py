"""Grid, coordinate and direction types for the snake game."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Movement directions with (dx, dy) deltas in screen coordinates.

    ``y`` grows downwards, so UP decrements it.
    """

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the 180° counterpart (NONE is its own opposite)."""
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass(frozen=True)
class Position:
    """An immutable (x, y) cell coordinate."""

    x: int
    y: int

    def neighbor(self, direction: Direction) -> Position:
        """Return the adjacent cell one step in *direction*."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Grid:
    """Fixed playing field of ``width`` × ``height`` cells.

    The outermost ring of cells is the border; only the interior is
    playable. Coordinates use (x, y) ordering with the origin top-left.
    """

    def __init__(self, width: int = 32, height: int = 16) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        self.width = width
        self.height = height

    @property
    def center(self) -> Position:
        return Position(self.width // 2, self.height // 2)

    @property
    def interior_x(self) -> range:
        """Interior columns, 1 through ``width - 2``."""
        return range(1, self.width - 1)

    @property
    def interior_y(self) -> range:
        """Interior rows, 1 through ``height - 2``."""
        return range(1, self.height - 1)

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_border(self, pos: Position) -> bool:
        """Check whether a coordinate lies on the border ring."""
        return pos.x in (0, self.width - 1) or pos.y in (0, self.height - 1)

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
