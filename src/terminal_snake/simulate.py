"""Headless simulation runs with random input."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from terminal_snake.config import GameConfig
from terminal_snake.session import GameSession, InputEvent
from terminal_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationSummary:
    """Aggregate results from a batch of headless games."""

    games: int
    total_ticks: int
    mean_length: float
    max_length: int
    wall_time_seconds: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"mean length {self.mean_length:.2f}, max length {self.max_length}"
        )


def random_input(
    rng: np.random.Generator, press_probability: float = 0.3,
):
    """Return an input source that occasionally presses a random arrow key."""

    def source() -> list[InputEvent]:
        if rng.random() >= press_probability:
            return []
        return [_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))]]

    return source


def run_simulation(
    config: GameConfig,
    *,
    games: int = 10,
    max_ticks: int = 1_000,
    seed: int | None = None,
) -> SimulationSummary:
    """Play *games* rounds as fast as possible with random input.

    *seed* only drives the simulated key presses; food placement keeps
    its own unseeded source.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    rng = np.random.default_rng(seed)
    engine = config.create_engine()
    session = GameSession(
        engine,
        config,
        input_source=random_input(rng),
        renderer=lambda snapshot: None,
        sleep=lambda seconds: None,
        max_ticks=max_ticks,
    )

    lengths: list[int] = []
    total_ticks = 0
    start = time.perf_counter()
    for game in range(games):
        result = session.run()
        lengths.append(result.length)
        total_ticks += result.ticks
        logger.debug(
            "Game %d finished: length=%d ticks=%d.",
            game, result.length, result.ticks,
        )
    elapsed = time.perf_counter() - start

    return SimulationSummary(
        games=games,
        total_ticks=total_ticks,
        mean_length=float(np.mean(lengths)),
        max_length=max(lengths),
        wall_time_seconds=elapsed,
    )
