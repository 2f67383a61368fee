"""Tests for the GridState module."""

import numpy as np
import pytest

from terminal_snake.grid import EMPTY, FOOD, GridState
from terminal_snake.snake import Coordinate


class TestGridInit:
    def test_custom_dimensions(self):
        grid = GridState(width=10, height=8)
        assert grid.width == 10
        assert grid.height == 8
        assert grid.cells.shape == (8, 10)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            GridState(width=0, height=4)
        with pytest.raises(ValueError, match="at least 1"):
            GridState(width=4, height=0)

    def test_all_cells_start_empty(self):
        grid = GridState(width=5, height=5)
        assert np.all(grid.cells == EMPTY)

    def test_dimensions_are_read_only(self):
        grid = GridState(width=5, height=5)
        with pytest.raises(AttributeError):
            grid.width = 6


class TestGridOperations:
    def test_set_and_at(self):
        grid = GridState(width=5, height=4)
        grid.set(Coordinate(3, 1), 7)
        assert grid.at(Coordinate(3, 1)) == 7
        # Row-major: y selects the row.
        assert grid.cells[1, 3] == 7

    def test_out_of_bounds_access_raises(self):
        grid = GridState(width=5, height=5)
        with pytest.raises(IndexError):
            grid.at(Coordinate(-1, 0))
        with pytest.raises(IndexError):
            grid.set(Coordinate(0, 5), 1)

    def test_in_bounds(self):
        grid = GridState(width=5, height=3)
        assert grid.in_bounds(Coordinate(0, 0))
        assert grid.in_bounds(Coordinate(4, 2))
        assert not grid.in_bounds(Coordinate(-1, 0))
        assert not grid.in_bounds(Coordinate(5, 0))
        assert not grid.in_bounds(Coordinate(0, 3))

    def test_clear(self):
        grid = GridState(width=5, height=5)
        grid.set(Coordinate(0, 0), 3)
        grid.set(Coordinate(1, 1), FOOD)
        grid.clear()
        assert np.all(grid.cells == EMPTY)

    def test_counts(self):
        grid = GridState(width=4, height=4)
        grid.set(Coordinate(0, 0), 1)
        grid.set(Coordinate(1, 0), 2)
        grid.set(Coordinate(2, 2), FOOD)
        assert grid.count_food() == 1
        assert grid.count_free() == 13
        assert grid.count_where(lambda cells: cells > 0) == 2

    def test_decrement_all_positive(self):
        grid = GridState(width=4, height=1)
        grid.cells[0] = [3, 1, FOOD, EMPTY]
        grid.decrement_all_positive()
        assert grid.cells[0].tolist() == [2, 0, FOOD, EMPTY]
        grid.decrement_all_positive()
        grid.decrement_all_positive()
        assert grid.cells[0].tolist() == [0, 0, FOOD, EMPTY]

    def test_free_cells_row_major(self):
        grid = GridState(width=3, height=2)
        grid.set(Coordinate(0, 0), 1)
        grid.set(Coordinate(2, 1), FOOD)
        assert grid.free_cells().tolist() == [1, 2, 3, 4]


class TestGridSerialization:
    def test_to_dict(self):
        grid = GridState(width=3, height=2)
        grid.set(Coordinate(1, 1), FOOD)
        d = grid.to_dict()
        assert d["width"] == 3
        assert d["height"] == 2
        assert d["cells"] == [[0, 0, 0], [0, -1, 0]]
