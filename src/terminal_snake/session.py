"""Fixed-cadence tick loop driving one round of play."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from terminal_snake.engine import TickOutcome
from terminal_snake.intent import InputIntentQueue
from terminal_snake.snake import Direction

if TYPE_CHECKING:
    from terminal_snake.config import GameConfig
    from terminal_snake.engine import SimulationEngine, Snapshot

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Non-directional player actions."""

    EXIT = "exit"
    PAUSE = "pause"


InputEvent = Direction | Command


@dataclass
class SessionResult:
    """Summary of a finished round."""

    length: int
    ticks: int
    exited: bool
    outcome: TickOutcome | None


class GameSession:
    """Runs the engine at ``config.ticks_per_second``.

    Each iteration drains pending input without blocking, reconciles it
    into one direction, ticks, renders, then sleeps until the tick's
    monotonic deadline. The loop ends when the snake dies or the player
    exits. ``Command.PAUSE`` blocks in *on_pause*, which returns True to
    continue the round; without a handler a pause ends it.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        config: GameConfig,
        *,
        input_source: Callable[[], Sequence[InputEvent]],
        renderer: Callable[[Snapshot], None],
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        max_ticks: int | None = None,
        on_pause: Callable[[], bool] | None = None,
    ) -> None:
        self.engine = engine
        self.config = config
        self.input_source = input_source
        self.renderer = renderer
        self.clock = clock
        self.sleep = sleep
        self.max_ticks = max_ticks
        self.on_pause = on_pause
        self.intents = InputIntentQueue()
        self.direction = Direction.RIGHT

    def run(self) -> SessionResult:
        """Play one round from a cleared board."""
        self.engine.clear()
        self.intents.clear()
        self.direction = Direction.RIGHT
        self.engine.warm_up(self.direction)

        ticks = 0
        outcome: TickOutcome | None = None
        exited = False
        interval = self.config.tick_seconds

        while not self.engine.dead:
            if self.max_ticks is not None and ticks >= self.max_ticks:
                break
            deadline = self.clock() + interval

            for event in self.input_source():
                if event is Command.PAUSE and self._resume():
                    continue
                if isinstance(event, Command):
                    exited = True
                    break
                self.intents.push(event)
            if exited:
                break

            self.direction = self.intents.reconcile(self.direction)
            outcome = self.engine.tick(self.direction)
            ticks += 1
            self.renderer(self.engine.snapshot())

            remaining = deadline - self.clock()
            if remaining > 0:
                self.sleep(remaining)

        logger.info(
            "Session ended after %d ticks with length %d (exited=%s).",
            ticks, self.engine.length, exited,
        )
        return SessionResult(
            length=self.engine.length,
            ticks=ticks,
            exited=exited,
            outcome=outcome,
        )

    def _resume(self) -> bool:
        """Hand control to the pause handler; False means leave the round."""
        if self.on_pause is None:
            return False
        return self.on_pause()
