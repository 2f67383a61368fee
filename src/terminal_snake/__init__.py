"""Terminal Snake: grid simulation engine and terminal frontend."""

from terminal_snake.config import GameConfig
from terminal_snake.engine import SimulationEngine, Snapshot, TickOutcome
from terminal_snake.food import FoodSpawner, SpawnPolicy
from terminal_snake.grid import EMPTY, FOOD, GridState
from terminal_snake.intent import InputIntentQueue
from terminal_snake.session import Command, GameSession, SessionResult
from terminal_snake.snake import Axis, Coordinate, Direction

__all__ = [
    "EMPTY",
    "FOOD",
    "Axis",
    "Command",
    "Coordinate",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameSession",
    "GridState",
    "InputIntentQueue",
    "SessionResult",
    "SimulationEngine",
    "Snapshot",
    "SpawnPolicy",
    "TickOutcome",
]
