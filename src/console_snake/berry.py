"""Berry spawning logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from console_snake.grid import Grid, Position
from console_snake.pixel import Pixel, PixelKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Berry:
    """A single piece of food waiting to be eaten."""

    position: Position

    @property
    def pixel(self) -> Pixel:
        return Pixel(PixelKind.BERRY, self.position)

    def to_dict(self) -> dict:
        return {"position": self.position.to_list()}


def spawn_berry(grid: Grid, rng: np.random.Generator) -> Berry:
    """Place a berry uniformly at random in the grid interior.

    The snake's cells are not excluded, so a berry may land under the body.
    """
    # integers() uses an exclusive upper bound: x in [1, width - 2].
    x = int(rng.integers(1, grid.width - 1))
    y = int(rng.integers(1, grid.height - 1))
    berry = Berry(Position(x, y))
    logger.debug("Berry spawned at (%d, %d).", x, y)
    return berry
