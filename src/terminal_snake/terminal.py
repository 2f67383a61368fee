"""Curses frontend for interactive play."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from terminal_snake.grid import EMPTY, FOOD
from terminal_snake.render import BORDER, glyph_for, status_line
from terminal_snake.session import Command, GameSession, InputEvent, SessionResult
from terminal_snake.snake import Direction

if TYPE_CHECKING:
    from terminal_snake.config import GameConfig
    from terminal_snake.engine import Snapshot

logger = logging.getLogger(__name__)

_ESCAPE = 27
_FOOD_PAIR = 1
_BODY_PAIR = 2

KEY_BINDINGS: dict[int, InputEvent] = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    _ESCAPE: Command.PAUSE,
    ord("q"): Command.EXIT,
}

# Keys that leave the game from the pause prompt.
_QUIT_KEYS = (_ESCAPE, ord("q"), ord("Q"))

PAUSE_PROMPT = "PAUSED: any key continues, Esc or q exits."
DEATH_PROMPT = "You got to a length of {length}. r: retry  v: view  other: exit"


def translate_keys(keys: list[int]) -> list[InputEvent]:
    """Map raw curses key codes to input events, dropping unbound keys."""
    return [KEY_BINDINGS[k] for k in keys if k in KEY_BINDINGS]


class CursesFrontend:
    """Feeds keyboard input to a session and draws each snapshot.

    Food and body glyphs are drawn with *food_attr* and *body_attr*, the
    colour pairs set up by :func:`play` when the terminal has colours.
    """

    def __init__(
        self,
        screen: curses.window,
        food_attr: int = 0,
        body_attr: int = 0,
    ) -> None:
        self.screen = screen
        self.food_attr = food_attr
        self.body_attr = body_attr

    def poll(self) -> list[InputEvent]:
        """Drain every pending key without blocking."""
        keys: list[int] = []
        while (key := self.screen.getch()) != -1:
            keys.append(key)
        return translate_keys(keys)

    def draw(self, snapshot: Snapshot) -> None:
        self.screen.erase()
        try:
            self._draw_board(snapshot)
            self.screen.addstr(snapshot.height + 2, 0, status_line(snapshot))
        except curses.error:
            # Board is larger than the terminal; keep what fitted.
            logger.debug("Board does not fit the terminal.")
        self.screen.refresh()

    def prompt(self, row: int, text: str) -> int:
        """Show *text* on *row* and block for one key press."""
        try:
            self.screen.addstr(row, 0, text)
        except curses.error:
            logger.debug("Terminal too small for prompt %r.", text)
        self.screen.refresh()
        return self.wait_for_key()

    def pause(self, snapshot: Snapshot) -> bool:
        """Block until a key; return True to continue the round."""
        key = self.prompt(snapshot.height + 3, PAUSE_PROMPT)
        self.draw(snapshot)
        return key not in _QUIT_KEYS

    def wait_for_key(self) -> int:
        self.screen.nodelay(False)
        try:
            return self.screen.getch()
        finally:
            self.screen.nodelay(True)

    def _draw_board(self, snapshot: Snapshot) -> None:
        bar = BORDER * (snapshot.width * 2 + 2)
        self.screen.addstr(0, 0, bar)
        for y in range(snapshot.height):
            row = y + 1
            self.screen.addstr(row, 0, BORDER)
            for x in range(snapshot.width):
                value = snapshot.cell(x, y)
                self.screen.addstr(
                    row, 1 + 2 * x, glyph_for(value), self._attr_for(value),
                )
            self.screen.addstr(row, snapshot.width * 2 + 1, BORDER)
        self.screen.addstr(snapshot.height + 1, 0, bar)

    def _attr_for(self, value: int) -> int:
        if value == FOOD:
            return self.food_attr
        if value == EMPTY:
            return 0
        return self.body_attr


def play(config: GameConfig) -> SessionResult:
    """Run interactive rounds until the player declines a retry."""
    return curses.wrapper(_play, config)


def _play(screen: curses.window, config: GameConfig) -> SessionResult:
    curses.curs_set(0)
    screen.nodelay(True)
    screen.keypad(True)
    # Esc must arrive immediately rather than as a possible escape sequence.
    curses.set_escdelay(25)

    food_attr = body_attr = 0
    if curses.has_colors():
        curses.start_color()
        curses.init_pair(_FOOD_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
        curses.init_pair(_BODY_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
        food_attr = curses.color_pair(_FOOD_PAIR)
        body_attr = curses.color_pair(_BODY_PAIR)

    frontend = CursesFrontend(screen, food_attr=food_attr, body_attr=body_attr)
    engine = config.create_engine()
    session = GameSession(
        engine,
        config,
        input_source=frontend.poll,
        renderer=frontend.draw,
        on_pause=lambda: frontend.pause(engine.snapshot()),
    )

    while True:
        result = session.run()
        if result.exited:
            return result
        if not _after_death(frontend, engine.snapshot()):
            return result


def _after_death(frontend: CursesFrontend, snapshot: Snapshot) -> bool:
    """Offer retry, view, or exit. Returns True to play another round."""
    row = snapshot.height + 3
    while True:
        frontend.draw(snapshot)
        key = frontend.prompt(row, DEATH_PROMPT.format(length=snapshot.length))
        if key in (ord("r"), ord("R")):
            return True
        if key not in (ord("v"), ord("V")):
            return False
        # View the frozen board without the prompt until any key.
        frontend.draw(snapshot)
        frontend.wait_for_key()
