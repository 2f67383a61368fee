"""Tests for the curses frontend helpers."""

import curses

from terminal_snake.engine import SimulationEngine
from terminal_snake.grid import FOOD
from terminal_snake.session import Command
from terminal_snake.snake import Coordinate, Direction
from terminal_snake.terminal import (
    PAUSE_PROMPT,
    CursesFrontend,
    _after_death,
    translate_keys,
)

_FOOD_ATTR = 100
_BODY_ATTR = 200


class _FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.writes = {}

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def nodelay(self, flag):
        pass

    def erase(self):
        self.writes.clear()

    def addstr(self, row, col, text, attr=0):
        self.writes[(row, col)] = (text, attr)

    def refresh(self):
        pass

    def line(self, row):
        parts = sorted(
            (col, text) for (r, col), (text, _) in self.writes.items() if r == row
        )
        return "".join(text for _, text in parts)


def _frontend(keys=()):
    screen = _FakeScreen(keys)
    return CursesFrontend(screen, food_attr=_FOOD_ATTR, body_attr=_BODY_ATTR), screen


def _snapshot():
    engine = SimulationEngine.create(3, 2, 1, 0, 0, 100)
    engine.grid.set(Coordinate(0, 0), 1)
    engine.grid.set(Coordinate(2, 1), FOOD)
    return engine.snapshot()


class TestKeyTranslation:
    def test_arrow_keys(self):
        keys = [curses.KEY_UP, curses.KEY_LEFT, curses.KEY_DOWN, curses.KEY_RIGHT]
        assert translate_keys(keys) == [
            Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT,
        ]

    def test_escape_pauses_and_q_exits(self):
        assert translate_keys([27, ord("q")]) == [Command.PAUSE, Command.EXIT]

    def test_unbound_dropped(self):
        assert translate_keys([ord("x"), ord("1")]) == []


class TestCursesFrontend:
    def test_poll_drains_pending_keys(self):
        frontend, _ = _frontend([curses.KEY_UP, ord("x"), curses.KEY_LEFT])
        assert frontend.poll() == [Direction.UP, Direction.LEFT]
        assert frontend.poll() == []

    def test_draw_writes_board_and_status(self):
        frontend, screen = _frontend()
        frontend.draw(_snapshot())
        assert screen.line(0) == "#" * 8
        assert screen.line(1) == "#[]    #"
        assert screen.line(2) == "#    ()#"
        assert screen.line(3) == "#" * 8
        assert screen.line(4) == "length 0 (alive)"

    def test_food_and_body_coloured(self):
        frontend, screen = _frontend()
        frontend.draw(_snapshot())
        assert screen.writes[(1, 1)] == ("[]", _BODY_ATTR)
        assert screen.writes[(2, 5)] == ("()", _FOOD_ATTR)
        assert screen.writes[(1, 3)] == ("  ", 0)

    def test_pause_continues_on_other_key(self):
        frontend, _ = _frontend([ord(" ")])
        assert frontend.pause(_snapshot())

    def test_pause_shows_prompt(self):
        frontend, screen = _frontend([ord(" ")])
        frontend.prompt(5, PAUSE_PROMPT)
        assert screen.line(5) == PAUSE_PROMPT

    def test_pause_exits_on_escape_or_q(self):
        for key in (27, ord("q")):
            frontend, _ = _frontend([key])
            assert not frontend.pause(_snapshot())


class TestAfterDeath:
    def test_retry(self):
        frontend, _ = _frontend([ord("r")])
        assert _after_death(frontend, _snapshot())

    def test_view_then_exit(self):
        frontend, screen = _frontend([ord("v"), ord(" "), ord("x")])
        assert not _after_death(frontend, _snapshot())
        assert screen.keys == []

    def test_view_then_retry(self):
        frontend, _ = _frontend([ord("v"), ord(" "), ord("R")])
        assert _after_death(frontend, _snapshot())
