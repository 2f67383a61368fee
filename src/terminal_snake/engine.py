"""Tick-based simulation engine composing grid, food, and snake state."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from terminal_snake.food import FoodSpawner, SpawnPolicy
from terminal_snake.grid import FOOD, GridState
from terminal_snake.snake import Coordinate, Direction

logger = logging.getLogger(__name__)

_INITIAL_SATURATION = 3
_WARM_UP_TICKS = 3


class TickOutcome(enum.Enum):
    """Result of a single :meth:`SimulationEngine.tick`."""

    ALIVE = "alive"
    ATE_FOOD = "ate_food"
    GREW = "grew"
    DIED = "died"


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of the board handed to renderers."""

    width: int
    height: int
    cells: np.ndarray
    length: int
    dead: bool
    head: Coordinate

    def cell(self, x: int, y: int) -> int:
        # NumPy would silently wrap negative indices.
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) is outside the {self.width}×{self.height} board."
            )
        return int(self.cells[y, x])


class SimulationEngine:
    """Single-snake simulation over an aging-integer grid.

    The engine owns the grid, spawn policy, and snake bookkeeping. Each
    call to :meth:`tick` advances the game one step in the given direction
    and returns a :class:`TickOutcome`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        growth_rate: int = 1,
        max_food: int = 1,
        min_food: int = 1,
        spawn_interval: int = 100,
        rng: np.random.Generator | None = None,
    ) -> None:
        if growth_rate < 0:
            raise ValueError("growth_rate must be non-negative.")
        self.grid = GridState(width, height)
        self.policy = SpawnPolicy(
            max_food=max_food,
            min_food=min_food,
            ticks_between_spawn=spawn_interval,
        )
        self.spawner = FoodSpawner(rng)
        self.growth_rate = growth_rate
        self._reset_snake()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        growth_rate: int,
        max_food: int,
        min_food: int,
        spawn_interval: int,
        rng: np.random.Generator | None = None,
    ) -> SimulationEngine:
        return cls(
            width,
            height,
            growth_rate=growth_rate,
            max_food=max_food,
            min_food=min_food,
            spawn_interval=spawn_interval,
            rng=rng,
        )

    def clear(self) -> None:
        """Reset the board and snake in place for a new round."""
        self.grid.clear()
        self.policy.reset()
        self._reset_snake()

    def tick(self, direction: Direction) -> TickOutcome:
        """Advance the simulation by one step towards *direction*."""
        if self.dead:
            return TickOutcome.DIED
        self.direction = direction

        new_head = self.head.moved(direction)
        if not self.grid.in_bounds(new_head):
            return self._die("wall")

        value = self.grid.at(new_head)
        if value > 0:
            return self._die("self-collision")

        ate = value == FOOD
        if ate:
            self.saturation_length += self.growth_rate

        grew = self.length < self.saturation_length and not self.grew_last_tick
        if grew:
            self.length += 1
            self.grew_last_tick = True
        else:
            self.grid.decrement_all_positive()
            self.grew_last_tick = False

        self.grid.set(new_head, self.length)
        self.head = new_head

        self.policy.after_tick(self.grid, self.spawner)

        if ate:
            return TickOutcome.ATE_FOOD
        if grew:
            return TickOutcome.GREW
        return TickOutcome.ALIVE

    def warm_up(
        self, direction: Direction = Direction.RIGHT, ticks: int = _WARM_UP_TICKS,
    ) -> None:
        """Run the opening ticks that materialise the first body segment."""
        for _ in range(ticks):
            if self.tick(direction) is TickOutcome.DIED:
                break

    def snapshot(self) -> Snapshot:
        """Return a read-only copy of the current board."""
        cells = self.grid.cells.copy()
        cells.setflags(write=False)
        return Snapshot(
            width=self.grid.width,
            height=self.grid.height,
            cells=cells,
            length=self.length,
            dead=self.dead,
            head=self.head,
        )

    def _reset_snake(self) -> None:
        self.head = Coordinate(self.grid.width // 3, self.grid.height // 2)
        self.direction = Direction.RIGHT
        self.length = 0
        self.saturation_length = _INITIAL_SATURATION
        self.grew_last_tick = True
        self.dead = False

    def _die(self, cause: str) -> TickOutcome:
        self.dead = True
        logger.info("Snake died (%s) with length %d.", cause, self.length)
        return TickOutcome.DIED
