"""Console Snake: tick-gated terminal snake game."""

from console_snake.berry import Berry, spawn_berry
from console_snake.clock import Stopwatch, TickScheduler
from console_snake.config import GameConfig
from console_snake.engine import GameState, GameStatus
from console_snake.grid import Direction, Grid, Position
from console_snake.keys import InputKey
from console_snake.pixel import Pixel, PixelKind
from console_snake.snake import Snake

__all__ = [
    "Berry",
    "Direction",
    "GameConfig",
    "GameState",
    "GameStatus",
    "Grid",
    "InputKey",
    "Pixel",
    "PixelKind",
    "Position",
    "Snake",
    "Stopwatch",
    "TickScheduler",
    "spawn_berry",
]
