"""Tests for the stopwatch and tick scheduler."""

from console_snake.clock import Stopwatch, TickScheduler


class _FakeMonotonic:
    """Returns queued readings, repeating the last one once exhausted."""

    def __init__(self, *readings: float) -> None:
        self.readings = list(readings)

    def __call__(self) -> float:
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]


class TestStopwatch:
    def test_elapsed_in_milliseconds(self, monkeypatch):
        monkeypatch.setattr(
            "console_snake.clock.time.monotonic", _FakeMonotonic(10.0, 10.25, 10.5),
        )
        watch = Stopwatch()
        assert watch.elapsed_ms() == 250.0
        assert watch.elapsed_ms() == 500.0

    def test_restart_resets_origin(self, monkeypatch):
        monkeypatch.setattr(
            "console_snake.clock.time.monotonic", _FakeMonotonic(0.0, 2.0, 2.5),
        )
        watch = Stopwatch()
        watch.restart()
        assert watch.elapsed_ms() == 500.0


class TestTickScheduler:
    def test_not_due_before_interval(self, clock):
        scheduler = TickScheduler(clock)
        clock.advance(499)
        assert not scheduler.is_due(500)

    def test_due_at_interval(self, clock):
        scheduler = TickScheduler(clock)
        clock.advance(500)
        assert scheduler.is_due(500)

    def test_reset_counts_ticks_and_restarts_timing(self, clock):
        scheduler = TickScheduler(clock)
        clock.advance(600)
        scheduler.reset()
        assert scheduler.ticks == 1
        assert not scheduler.is_due(500)
        clock.advance(500)
        assert scheduler.is_due(500)

    def test_restart_clears_tick_count(self, clock):
        scheduler = TickScheduler(clock)
        clock.advance(500)
        scheduler.reset()
        scheduler.restart()
        assert scheduler.ticks == 0

    def test_defaults_to_stopwatch(self):
        assert isinstance(TickScheduler().clock, Stopwatch)
