"""Snake representation and movement logic."""

from __future__ import annotations

from collections import deque
from itertools import islice

from console_snake.grid import Direction, Grid, Position
from console_snake.pixel import Pixel, PixelKind


class Snake:
    """A snake made of a head cell and an ordered deque of body segments.

    ``body[0]`` is the segment right behind the head; ``body[-1]`` is the
    tail. The head is not part of ``body``.
    """

    def __init__(
        self,
        head: Position,
        direction: Direction = Direction.RIGHT,
        length: int = 2,
        movement_speed: int = 500,
    ) -> None:
        if length < 0:
            raise ValueError("Snake body length must be at least 0.")
        if movement_speed <= 0:
            raise ValueError("movement_speed must be positive.")
        self.head = head
        self.direction = direction
        self.movement_speed = movement_speed
        # Initial segments trail behind the head; a snake that has no
        # direction yet trails to the left.
        trail = direction.opposite if direction is not Direction.NONE else Direction.LEFT
        self.body: deque[Position] = deque()
        segment = head
        for _ in range(length):
            segment = segment.neighbor(trail)
            self.body.append(segment)
        # A snake that has not started faces away from its trail, so turning
        # back onto the body counts as a reversal.
        self._heading = direction if direction is not Direction.NONE else trail.opposite
        # Segments added by growth since the last move; each still sits on
        # the cell it was copied from.
        self._fresh_segments = 0

    @property
    def tail(self) -> Position:
        """Return the oldest segment, or the head for a bodiless snake."""
        return self.body[-1] if self.body else self.head

    def change_direction(self, new_direction: Direction) -> None:
        """Set the direction for the next move, ignoring 180° reversals.

        Reversals are judged against the direction of the last move, so
        several key presses within one tick cannot fold the snake back
        onto itself.
        """
        if new_direction is Direction.NONE:
            return
        if new_direction is self._heading.opposite:
            return
        self.direction = new_direction

    def move(self) -> None:
        """Shift the snake one cell forward, keeping its length."""
        if self.direction is Direction.NONE:
            return
        new_head = self.head.neighbor(self.direction)
        self.body.appendleft(self.head)
        self.body.pop()
        self.head = new_head
        self._heading = self.direction
        self._fresh_segments = 0

    def add_berry_to_body(self) -> None:
        """Grow by one segment placed on the current tail."""
        self.body.append(self.tail)
        self._fresh_segments += 1

    def collides_with(self, pos: Position) -> bool:
        return self.head == pos

    def collides_with_self(self) -> bool:
        """Check whether the head overlaps any body segment.

        Segments grown since the last move are skipped: they duplicate the
        tail, or the head itself for a snake that had no body.
        """
        settled = len(self.body) - self._fresh_segments
        return any(seg == self.head for seg in islice(self.body, settled))

    def collides_with_border(self, grid: Grid) -> bool:
        return grid.is_border(self.head)

    def pixels(self) -> list[Pixel]:
        """Return the head pixel followed by body pixels, head end first."""
        return [Pixel(PixelKind.HEAD, self.head)] + [
            Pixel(PixelKind.BODY, seg) for seg in self.body
        ]

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": self.head.to_list(),
            "body": [seg.to_list() for seg in self.body],
            "direction": self.direction.name.lower(),
            "movement_speed": self.movement_speed,
        }
