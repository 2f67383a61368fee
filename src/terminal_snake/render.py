"""Text rendering of board snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from terminal_snake.grid import EMPTY, FOOD

if TYPE_CHECKING:
    from terminal_snake.engine import Snapshot

# Each cell is two characters wide so the board looks square in a terminal.
FOOD_GLYPH = "()"
BODY_GLYPH = "[]"
EMPTY_GLYPH = "  "
BORDER = "#"


def glyph_for(value: int) -> str:
    """Return the two-character glyph for an encoded cell value."""
    if value == FOOD:
        return FOOD_GLYPH
    if value == EMPTY:
        return EMPTY_GLYPH
    return BODY_GLYPH


def render_lines(snapshot: Snapshot) -> list[str]:
    """Render *snapshot* as bordered lines of text."""
    bar = BORDER * (snapshot.width * 2 + 2)
    lines = [bar]
    for row in snapshot.cells:
        inner = "".join(glyph_for(int(v)) for v in row)
        lines.append(f"{BORDER}{inner}{BORDER}")
    lines.append(bar)
    return lines


def render_text(snapshot: Snapshot) -> str:
    return "\n".join(render_lines(snapshot))


def status_line(snapshot: Snapshot) -> str:
    state = "dead" if snapshot.dead else "alive"
    return f"length {snapshot.length} ({state})"
