from __future__ import annotations

from typing import List

from .board import Cell, Mark
from .notation import ROW_LETTERS
from .state import GameState

_CELL_TEXT = {Mark.X: " X ", Mark.O: " O ", None: " ~ "}


def render_cell(cell: Cell) -> str:
    return _CELL_TEXT[cell]


def render_board(state: GameState) -> str:
    """Generates the text grid: column indices on top, row letters on the left."""
    size = state.board.size
    lines: List[str] = ["   " + "--".join(str(c) for c in range(size))]
    for r, row in enumerate(state.board.rows()):
        lines.append(ROW_LETTERS[r] + " " + "".join(render_cell(cell) for cell in row))
    return "\n".join(lines)


def render_status(state: GameState) -> str:
    if state.outcome is not None:
        return f"The game is over : {state.outcome.message}"
    return f"Current player : {state.turn}"
