"""Food placement and the respawn policy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from terminal_snake.grid import FOOD
from terminal_snake.snake import Coordinate

if TYPE_CHECKING:
    from terminal_snake.grid import GridState

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food uniformly at random on a free cell.

    Uses an unseeded NumPy RNG unless one is injected.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, grid: GridState) -> bool:
        """Place one food cell. Returns False if the board has no free cell."""
        free = grid.free_cells()
        if free.size == 0:
            logger.debug("No free cells available for food spawning.")
            return False

        # free is in row-major scan order; index 0 is the first free cell.
        target = int(free[self.rng.integers(free.size)])
        y, x = divmod(target, grid.width)
        grid.set(Coordinate(x, y), FOOD)
        return True


class SpawnPolicy:
    """Counter-driven rule deciding when a new food cell is placed."""

    def __init__(
        self,
        max_food: int = 1,
        min_food: int = 1,
        ticks_between_spawn: int = 100,
    ) -> None:
        if max_food < 0 or min_food < 0:
            raise ValueError("Food counts must be non-negative.")
        if ticks_between_spawn < 0:
            raise ValueError("ticks_between_spawn must be non-negative.")
        self.max_food = max_food
        self.min_food = min(min_food, max_food)
        self.ticks_between_spawn = ticks_between_spawn
        self.ticks_since_last_spawn = 0

    def reset(self) -> None:
        self.ticks_since_last_spawn = 0

    def should_spawn(self, food_count: int) -> bool:
        """Return True if a spawn attempt is due for *food_count* food cells."""
        if food_count >= self.max_food:
            return False
        return (
            self.ticks_since_last_spawn > self.ticks_between_spawn
            or food_count < self.min_food
        )

    def after_tick(self, grid: GridState, spawner: FoodSpawner) -> bool:
        """Run the respawn step of a tick.

        The counter only advances while food is below ``max_food``. At most
        one spawn is attempted per tick; any remaining shortfall is made up
        on later ticks. Returns True if food was placed.
        """
        food_count = grid.count_food()
        if food_count >= self.max_food:
            return False
        self.ticks_since_last_spawn += 1
        if not self.should_spawn(food_count):
            return False
        self.ticks_since_last_spawn = 0
        return spawner.spawn(grid)
