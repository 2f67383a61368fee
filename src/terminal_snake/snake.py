"""Coordinate and direction value types."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Axis(enum.Enum):
    """Movement axis used to reject same-axis direction changes."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, so ``UP`` decreases the row index.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def axis(self) -> Axis:
        """Return the axis this direction moves along."""
        if self in (Direction.UP, Direction.DOWN):
            return Axis.VERTICAL
        return Axis.HORIZONTAL


class Coordinate(NamedTuple):
    """An integer grid position."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Coordinate:
        """Return the neighbouring coordinate one unit towards *direction*."""
        dx, dy = direction.value
        return Coordinate(self.x + dx, self.y + dy)
