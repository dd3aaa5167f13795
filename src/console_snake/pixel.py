"""Drawable cells: a position tagged with what occupies it."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from console_snake.grid import Position

GLYPH = "■"


class PixelKind(enum.Enum):
    """What a drawn cell represents, with its cosmetic attributes."""

    HEAD = ("red", GLYPH)
    BODY = ("green", GLYPH)
    BERRY = ("cyan", GLYPH)

    @property
    def color(self) -> str:
        return self.value[0]

    @property
    def glyph(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Pixel:
    """A single drawable cell.

    Only :attr:`position` matters for collisions; the kind is cosmetic.
    """

    kind: PixelKind
    position: Position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def to_dict(self) -> dict:
        return {"kind": self.kind.name.lower(), "x": self.x, "y": self.y}
