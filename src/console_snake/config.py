"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from console_snake.grid import Direction

logger = logging.getLogger(__name__)

INITIAL_DIRECTION_CHOICES = ("random",) + tuple(d.name.lower() for d in Direction)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a game session.

    Supports JSON serialization so a session can be reproduced.
    """

    # Field
    grid_width: int = 32
    grid_height: int = 16

    # Snake
    movement_speed_ms: int = 500
    initial_body_length: int = 2
    initial_direction: str = "random"

    # Driving loop
    poll_interval_ms: int = 10

    # Randomness
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 3 or self.grid_height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        if self.movement_speed_ms <= 0:
            raise ValueError("movement_speed_ms must be positive.")
        if self.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive.")
        if self.initial_body_length < 0:
            raise ValueError("initial_body_length must be at least 0.")
        if self.initial_direction not in INITIAL_DIRECTION_CHOICES:
            raise ValueError(
                f"initial_direction must be one of {', '.join(INITIAL_DIRECTION_CHOICES)}.",
            )
        # The starting snake sits at the centre and must not touch the border
        # whichever way it faces.
        max_length = min(
            self.grid_width - 2 - self.grid_width // 2,
            self.grid_height - 2 - self.grid_height // 2,
        )
        if self.initial_body_length > max_length:
            raise ValueError(
                f"initial_body_length {self.initial_body_length} does not fit a "
                f"{self.grid_width}×{self.grid_height} grid (max {max_length}).",
            )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def with_overrides(self, **overrides: object) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object.")
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc
