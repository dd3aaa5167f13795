"""Tick-gated game state machine composing grid, snake, and berry logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from console_snake.berry import Berry, spawn_berry
from console_snake.clock import Clock, TickScheduler
from console_snake.config import GameConfig
from console_snake.grid import Direction, Grid
from console_snake.keys import InputKey, key_to_direction
from console_snake.pixel import Pixel
from console_snake.snake import Snake

logger = logging.getLogger(__name__)

_START_DIRECTIONS: list[Direction] = [
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
]


class GameStatus(str, enum.Enum):
    """Lifecycle states for a round."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class GameState:
    """Single-snake game driven by a fast polling loop.

    The state owns the grid, snake, berry and score. Callers feed key
    presses to :meth:`process_input` and call :meth:`update` on every loop
    iteration; the snake only moves once per ``movement_speed`` milliseconds,
    as measured by the injected clock.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(width=self.config.grid_width, height=self.config.grid_height)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.scheduler = TickScheduler(clock)
        self.initialize()

    def initialize(self) -> None:
        """Start a fresh round with a new snake, berry and score."""
        self.snake = Snake(
            self.grid.center,
            self._start_direction(),
            length=self.config.initial_body_length,
            movement_speed=self.config.movement_speed_ms,
        )
        self.berry: Berry = spawn_berry(self.grid, self.rng)
        self.score = 0
        self.status = GameStatus.RUNNING
        self.scheduler.restart()
        logger.info(
            "Round started on %dx%d grid heading %s.",
            self.grid.width, self.grid.height, self.snake.direction.name,
        )

    def _start_direction(self) -> Direction:
        name = self.config.initial_direction
        if name == "random":
            return _START_DIRECTIONS[int(self.rng.choice(len(_START_DIRECTIONS)))]
        return Direction[name.upper()]

    def is_game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def process_input(self, key: InputKey | None) -> None:
        """Forward an arrow key to the snake; anything else is ignored."""
        if self.is_game_over():
            return
        direction = key_to_direction(key)
        if direction is not None:
            self.snake.change_direction(direction)

    def update(self) -> None:
        """Advance the round by one loop iteration.

        Moves the snake if a tick is due, then checks the berry and the
        collision predicates against the current head. The berry check runs
        on every call, whether or not the snake moved.
        """
        if self.is_game_over():
            return

        if self.scheduler.is_due(self.snake.movement_speed):
            self.snake.move()
            self.scheduler.reset()

        if self.snake.collides_with(self.berry.position):
            self.snake.add_berry_to_body()
            self.berry = spawn_berry(self.grid, self.rng)
            self.score += 1
            logger.debug("Berry eaten; score is now %d.", self.score)

        if self.snake.collides_with_border(self.grid):
            self._end_round("border")
        elif self.snake.collides_with_self():
            self._end_round("self")

    def pixels(self) -> list[Pixel]:
        """Return every drawable cell: head, body segments, then the berry."""
        return self.snake.pixels() + [self.berry.pixel]

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.scheduler.ticks,
            "score": self.score,
            "status": self.status.value,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "berry": self.berry.to_dict(),
        }

    def _end_round(self, cause: str) -> None:
        """Mark the round as finished."""
        self.status = GameStatus.GAME_OVER
        logger.info(
            "Game over (%s collision) at tick %d with score %d.",
            cause, self.scheduler.ticks, self.score,
        )
