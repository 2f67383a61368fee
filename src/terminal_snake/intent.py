"""Reconciliation of buffered direction keys into one turn per tick."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from terminal_snake.snake import Direction


class InputIntentQueue:
    """Buffers raw direction presses between ticks.

    :meth:`reconcile` accepts at most one turn per tick. Presses on the
    current travel axis are dropped, so the snake can never reverse into
    itself, and presses queued after the accepted turn wait for later ticks.
    """

    def __init__(self) -> None:
        self._queue: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def pending(self) -> tuple[Direction, ...]:
        return tuple(self._queue)

    def push(self, direction: Direction) -> None:
        self._queue.append(direction)

    def extend(self, directions: Iterable[Direction]) -> None:
        self._queue.extend(directions)

    def clear(self) -> None:
        self._queue.clear()

    def reconcile(self, current: Direction) -> Direction:
        """Pick the direction for this tick given the *current* heading."""
        while self._queue:
            candidate = self._queue.popleft()
            if candidate.axis != current.axis:
                return candidate
        return current
