"""Driving loop: sample input fast, move the snake on its own cadence."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import Protocol

from console_snake.engine import GameState
from console_snake.grid import Grid
from console_snake.keys import InputKey
from console_snake.pixel import Pixel

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Non-blocking keyboard input."""

    def poll(self) -> InputKey | None:
        """Return the pending key, or None when nothing was pressed."""
        ...


class Renderer(Protocol):
    """Read-only view of a round."""

    def draw(self, grid: Grid, pixels: Iterable[Pixel], score: int) -> None:
        """Draw one frame of the grid, its pixels and the score."""
        ...

    def draw_game_over(self, grid: Grid, score: int) -> None:
        """Show the final score once the round has ended."""
        ...


def run_game(
    state: GameState,
    keys: KeySource,
    renderer: Renderer,
    poll_interval_ms: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Play one round until game over or the player quits.

    Returns the final score.
    """
    if poll_interval_ms is None:
        poll_interval_ms = state.config.poll_interval_ms
    delay = poll_interval_ms / 1000.0

    while True:
        key = keys.poll()
        if key is InputKey.QUIT:
            logger.info("Player quit with score %d.", state.score)
            break
        state.process_input(key)
        state.update()
        renderer.draw(state.grid, state.pixels(), state.score)
        if state.is_game_over():
            break
        sleep(delay)

    return state.score


def play(
    state: GameState,
    keys: KeySource,
    renderer: Renderer,
    ask_replay: Callable[[], bool],
    poll_interval_ms: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[int]:
    """Run rounds back to back while the player asks for another.

    Returns the score of every round played.
    """
    scores: list[int] = []
    while True:
        scores.append(
            run_game(state, keys, renderer, poll_interval_ms=poll_interval_ms, sleep=sleep),
        )
        renderer.draw_game_over(state.grid, state.score)
        if not ask_replay():
            break
        state.initialize()
    logger.info("Session finished after %d round(s).", len(scores))
    return scores
