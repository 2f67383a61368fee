"""Grid state for the snake simulation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import numpy as np

if TYPE_CHECKING:
    from terminal_snake.snake import Coordinate

# Cell encoding. Positive values are body segments; larger is nearer the head.
EMPTY = 0
FOOD = -1


class GridState:
    """NumPy-backed board storing one signed integer per cell.

    The body is never kept as a list. Every segment carries its age and
    :meth:`decrement_all_positive` retracts the tail by ageing the whole
    board one step. Cells are indexed ``[y, x]`` in row-major order.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self._width = width
        self._height = height
        self.cells = np.zeros((height, width), dtype=np.int32)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = EMPTY

    def in_bounds(self, pos: Coordinate) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def at(self, pos: Coordinate) -> int:
        """Return the encoded cell value at *pos*."""
        self._check(pos)
        return int(self.cells[pos.y, pos.x])

    def set(self, pos: Coordinate, value: int) -> None:
        """Store an encoded cell value at *pos*."""
        self._check(pos)
        self.cells[pos.y, pos.x] = value

    def count_where(self, predicate: Callable[[np.ndarray], np.ndarray]) -> int:
        """Count cells for which the vectorised *predicate* is true."""
        return int(np.count_nonzero(predicate(self.cells)))

    def count_food(self) -> int:
        return self.count_where(lambda cells: cells == FOOD)

    def count_free(self) -> int:
        return self.count_where(lambda cells: cells == EMPTY)

    def decrement_all_positive(self) -> None:
        """Age every body segment by one; segments reaching 0 become empty."""
        self.cells[self.cells > 0] -= 1

    def free_cells(self) -> np.ndarray:
        """Return flat row-major indices of all empty cells."""
        return np.flatnonzero(self.cells == EMPTY)

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self._width,
            "height": self._height,
            "cells": self.cells.tolist(),
        }

    def _check(self, pos: Coordinate) -> None:
        # NumPy would silently wrap negative indices.
        if not self.in_bounds(pos):
            raise IndexError(
                f"({pos.x}, {pos.y}) is outside the "
                f"{self._width}×{self._height} grid."
            )
