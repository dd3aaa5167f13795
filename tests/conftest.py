"""Shared test fixtures."""

import pytest


class FakeClock:
    """Hand-driven clock: time only moves when a test advances it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.started = 0.0

    def advance(self, ms: float) -> None:
        self.now += ms

    def elapsed_ms(self) -> float:
        return self.now - self.started

    def restart(self) -> None:
        self.started = self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
