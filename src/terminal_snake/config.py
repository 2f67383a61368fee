"""Game configuration shared by the session loop and the CLI."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from terminal_snake.engine import SimulationEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, food, growth, and pacing settings for one game.

    ``min_food`` is clamped to ``max_food`` so the respawn rule can always
    be satisfied.
    """

    # Board
    width: int = 40
    height: int = 30

    # Food
    growth_rate: int = 1
    max_food: int = 1
    min_food: int = 1
    spawn_interval: int = 100

    # Pacing
    ticks_per_second: int = 10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a valid setting.
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(
                    f"{f.name} must be an integer, got {value!r}."
                )
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.growth_rate < 1:
            raise ValueError("growth_rate must be at least 1.")
        if self.ticks_per_second < 1:
            raise ValueError("ticks_per_second must be at least 1.")
        if self.max_food < 0 or self.min_food < 0:
            raise ValueError("max_food and min_food must be non-negative.")
        if self.spawn_interval < 0:
            raise ValueError("spawn_interval must be non-negative.")
        if self.min_food > self.max_food:
            object.__setattr__(self, "min_food", self.max_food)

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.ticks_per_second

    def replace(self, **changes: int) -> GameConfig:
        """Return a copy with *changes* applied and re-validated."""
        return replace(self, **changes)

    def create_engine(
        self, rng: np.random.Generator | None = None,
    ) -> SimulationEngine:
        """Build a fresh engine for these settings."""
        from terminal_snake.engine import SimulationEngine

        return SimulationEngine.create(
            self.width,
            self.height,
            self.growth_rate,
            self.max_food,
            self.min_food,
            self.spawn_interval,
            rng=rng,
        )

    def to_dict(self) -> dict:
        return asdict(self)

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
            raise ValueError(f"{path}: expected a JSON object.")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"{path}: unknown config keys {unknown}.")
        return cls(**raw)
