"""Elapsed-time tracking that gates snake movement."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic millisecond timer with a resettable start point."""

    def elapsed_ms(self) -> float: ...

    def restart(self) -> None: ...


class Stopwatch:
    """:class:`Clock` backed by :func:`time.monotonic`."""

    def __init__(self) -> None:
        self._started = time.monotonic()

    def elapsed_ms(self) -> float:
        return (time.monotonic() - self._started) * 1000.0

    def restart(self) -> None:
        self._started = time.monotonic()


class TickScheduler:
    """Decides when the next movement tick is due.

    The scheduler only compares elapsed time against an interval; it never
    sleeps, so callers can keep sampling input between ticks.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock if clock is not None else Stopwatch()
        self.ticks = 0

    def is_due(self, interval_ms: int) -> bool:
        """Return True once at least *interval_ms* passed since the last tick."""
        return self.clock.elapsed_ms() >= interval_ms

    def reset(self) -> None:
        """Mark a tick as taken and start timing the next one."""
        self.ticks += 1
        self.clock.restart()

    def restart(self) -> None:
        """Start over for a new round."""
        self.ticks = 0
        self.clock.restart()
