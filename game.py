from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under tictactoe_core/*.

from tictactoe_core.board import BOARD_SIZE, Board, Cell, Coord, Mark
from tictactoe_core.state import GameState, Outcome
from tictactoe_core.errors import (
    MoveError,
    CellOccupied,
    BoardFull,
    GameAlreadyOver,
    ParseError,
    BadFormat,
    OutOfBounds,
)
from tictactoe_core.moves import (
    apply_move,
    check_outcome,
    full_scan_outcome,
    legal_moves,
    lines_through,
    winning_line,
)
from tictactoe_core.notation import ROW_LETTERS, format_coordinate, parse_coordinate
from tictactoe_core.render import render_board, render_cell, render_status

__all__ = [
    'BOARD_SIZE', 'Board', 'Cell', 'Coord', 'Mark',
    'GameState', 'Outcome',
    'MoveError', 'CellOccupied', 'BoardFull', 'GameAlreadyOver',
    'ParseError', 'BadFormat', 'OutOfBounds',
    'apply_move', 'check_outcome', 'full_scan_outcome', 'legal_moves', 'lines_through', 'winning_line',
    'ROW_LETTERS', 'format_coordinate', 'parse_coordinate',
    'render_board', 'render_cell', 'render_status',
]
