"""Curses-backed keyboard source and renderer."""

from __future__ import annotations

import curses
import logging
from collections.abc import Iterable

from console_snake.grid import Grid
from console_snake.keys import InputKey
from console_snake.pixel import GLYPH, Pixel, PixelKind

logger = logging.getLogger(__name__)

_NO_KEY = -1
_ESCAPE = 27

_KEY_MAP: dict[int, InputKey] = {
    curses.KEY_UP: InputKey.UP, ord("w"): InputKey.UP, ord("W"): InputKey.UP,
    curses.KEY_DOWN: InputKey.DOWN, ord("s"): InputKey.DOWN, ord("S"): InputKey.DOWN,
    curses.KEY_LEFT: InputKey.LEFT, ord("a"): InputKey.LEFT, ord("A"): InputKey.LEFT,
    curses.KEY_RIGHT: InputKey.RIGHT, ord("d"): InputKey.RIGHT, ord("D"): InputKey.RIGHT,
    ord("q"): InputKey.QUIT, ord("Q"): InputKey.QUIT, _ESCAPE: InputKey.QUIT,
}

_YES = {ord("y"), ord("Y"), ord("\n"), curses.KEY_ENTER}
_NO = {ord("n"), ord("N"), ord("q"), ord("Q"), _ESCAPE}

_CURSES_COLORS: dict[str, int] = {
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


def translate_key(code: int) -> InputKey | None:
    """Map a curses key code to an :class:`InputKey` (None when no key)."""
    if code == _NO_KEY:
        return None
    return _KEY_MAP.get(code, InputKey.OTHER)


class CursesKeySource:
    """Non-blocking keyboard reader over a curses window."""

    def __init__(self, window) -> None:
        self.window = window
        self.window.keypad(True)
        self.window.nodelay(True)

    def poll(self) -> InputKey | None:
        """Return the next pending key, or None if nothing was pressed."""
        return translate_key(self.window.getch())

    def ask_replay(self) -> bool:
        """Block until the player answers the replay prompt."""
        self.window.nodelay(False)
        try:
            while True:
                code = self.window.getch()
                if code in _YES:
                    return True
                if code in _NO:
                    return False
        finally:
            self.window.nodelay(True)


def init_color_attrs() -> dict[str, int]:
    """Register one colour pair per named colour and return their attributes.

    Must run after curses is initialised. Terminals without colour support
    get plain attributes.
    """
    if not curses.has_colors():
        return {}
    curses.start_color()
    attrs: dict[str, int] = {}
    for pair_number, (name, color) in enumerate(_CURSES_COLORS.items(), start=1):
        curses.init_pair(pair_number, color, curses.COLOR_BLACK)
        attrs[name] = curses.color_pair(pair_number)
    return attrs


class CursesRenderer:
    """Draws the grid border, pixels and score into a curses window.

    The renderer only reads game data; it never changes the game state.
    """

    def __init__(self, window, color_attrs: dict[str, int] | None = None) -> None:
        self.window = window
        self.color_attrs = color_attrs if color_attrs is not None else init_color_attrs()

    def _attr(self, color: str) -> int:
        return self.color_attrs.get(color, 0)

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            # Off-screen or bottom-right corner writes are clipped.
            logger.debug("Clipped write at (%d, %d).", x, y)

    def draw_border(self, grid: Grid) -> None:
        attr = self._attr("white")
        for x in range(grid.width):
            self._put(0, x, GLYPH, attr)
            self._put(grid.height - 1, x, GLYPH, attr)
        for y in range(grid.height):
            self._put(y, 0, GLYPH, attr)
            self._put(y, grid.width - 1, GLYPH, attr)

    def draw_pixel(self, pixel: Pixel) -> None:
        self._put(pixel.y, pixel.x, pixel.kind.glyph, self._attr(pixel.kind.color))

    def draw(self, grid: Grid, pixels: Iterable[Pixel], score: int) -> None:
        """Redraw a full frame."""
        self.window.erase()
        self.draw_border(grid)
        # Berries first so the snake is drawn over a berry hidden beneath it.
        ordered = sorted(pixels, key=lambda p: p.kind is not PixelKind.BERRY)
        for pixel in ordered:
            self.draw_pixel(pixel)
        self._put(grid.height, 0, f"Score: {score}", self._attr("white"))
        self.window.refresh()

    def draw_game_over(self, grid: Grid, score: int) -> None:
        """Show the final score and the replay prompt."""
        x = grid.width // 5
        y = grid.height // 2
        self._put(y, x, f"Game over, Score: {score}", self._attr("white"))
        self._put(y + 1, x, "Play again? (y/n)", self._attr("white"))
        self.window.refresh()
