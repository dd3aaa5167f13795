"""Tests for the driving loop."""

from console_snake.berry import Berry
from console_snake.config import GameConfig
from console_snake.engine import GameState
from console_snake.grid import Position
from console_snake.keys import InputKey
from console_snake.runner import play, run_game


class ScriptedKeys:
    """Replays a fixed key sequence, then reports no key pending."""

    def __init__(self, keys=()) -> None:
        self.keys = list(keys)
        self.polls = 0

    def poll(self):
        self.polls += 1
        return self.keys.pop(0) if self.keys else None


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple[int, int]] = []
        self.game_overs: list[int] = []

    def draw(self, grid, pixels, score) -> None:
        self.frames.append((len(list(pixels)), score))

    def draw_game_over(self, grid, score) -> None:
        self.game_overs.append(score)


class ClockSleep:
    """Sleep stand-in that advances the fake clock instead of waiting."""

    def __init__(self, clock) -> None:
        self.clock = clock
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.clock.advance(seconds * 1000.0)


def _make_state(clock, **overrides) -> GameState:
    settings = {
        "grid_width": 10,
        "grid_height": 10,
        "initial_direction": "left",
        "movement_speed_ms": 100,
        "poll_interval_ms": 10,
        "seed": 0,
    }
    settings.update(overrides)
    state = GameState(GameConfig(**settings), clock=clock)
    state.berry = Berry(Position(8, 8))
    return state


class TestRunGame:
    def test_runs_until_border(self, clock):
        state = _make_state(clock)
        keys = ScriptedKeys()
        renderer = RecordingRenderer()
        sleep = ClockSleep(clock)
        score = run_game(state, keys, renderer, sleep=sleep)
        assert score == 0
        assert state.is_game_over()
        assert state.snake.head == Position(0, 5)
        # Five moves at 100 ms each, sampled every 10 ms.
        assert keys.polls == len(renderer.frames)
        assert keys.polls >= 50
        assert all(call == 0.01 for call in sleep.calls)

    def test_no_sleep_after_game_over(self, clock):
        state = _make_state(clock)
        keys = ScriptedKeys()
        sleep = ClockSleep(clock)
        run_game(state, keys, RecordingRenderer(), sleep=sleep)
        assert len(sleep.calls) == keys.polls - 1

    def test_quit_ends_round(self, clock):
        state = _make_state(clock)
        keys = ScriptedKeys([None, InputKey.QUIT])
        renderer = RecordingRenderer()
        run_game(state, keys, renderer, sleep=ClockSleep(clock))
        assert not state.is_game_over()
        assert len(renderer.frames) == 1

    def test_keys_steer_snake(self, clock):
        state = _make_state(clock)
        keys = ScriptedKeys([InputKey.UP])
        run_game(state, keys, RecordingRenderer(), sleep=ClockSleep(clock))
        assert state.snake.head == Position(5, 0)

    def test_poll_interval_override(self, clock):
        state = _make_state(clock)
        sleep = ClockSleep(clock)
        run_game(state, ScriptedKeys(), RecordingRenderer(), poll_interval_ms=50, sleep=sleep)
        assert sleep.calls[0] == 0.05

    def test_returns_score(self, clock):
        state = _make_state(clock)
        state.berry = Berry(Position(4, 5))
        score = run_game(state, ScriptedKeys(), RecordingRenderer(), sleep=ClockSleep(clock))
        assert score >= 1


class TestPlay:
    def test_single_round_without_replay(self, clock):
        state = _make_state(clock)
        renderer = RecordingRenderer()
        scores = play(
            state, ScriptedKeys(), renderer, lambda: False, sleep=ClockSleep(clock),
        )
        assert scores == [0]
        assert renderer.game_overs == [0]

    def test_replay_reinitializes(self, clock):
        state = _make_state(clock)
        answers = iter([True, False])
        renderer = RecordingRenderer()
        scores = play(
            state, ScriptedKeys(), renderer, lambda: next(answers), sleep=ClockSleep(clock),
        )
        assert len(scores) == 2
        assert len(renderer.game_overs) == 2
        assert state.is_game_over()
