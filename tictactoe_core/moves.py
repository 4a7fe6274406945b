from __future__ import annotations

from typing import List, Optional

from .board import Board, Coord, Mark
from .errors import BoardFull, CellOccupied, GameAlreadyOver
from .state import GameState, Outcome


def _line_is(board: Board, line: List[Coord], mark: Mark) -> bool:
    return all(board.at(coord) is mark for coord in line)


def lines_through(board: Board, coord: Coord) -> List[List[Coord]]:
    """Lines a move at coord can complete, in evaluation order: row, column, diagonals."""
    lines = [board.row_coords(coord.row), board.col_coords(coord.col)]
    if coord.row == coord.col:
        lines.append(board.main_diagonal())
    if coord.row + coord.col == board.size - 1:
        lines.append(board.anti_diagonal())
    return lines


def winning_line(board: Board, coord: Coord) -> Optional[List[Coord]]:
    """Returns the completed line through coord, if the mark there completed one."""
    mark = board.at(coord)
    if mark is None:
        return None
    for line in lines_through(board, coord):
        if _line_is(board, line, mark):
            return line
    return None


def check_outcome(board: Board, coord: Coord, mark: Mark) -> Optional[Outcome]:
    """
    Evaluates the game after mark was placed at coord.
    A winning line must contain the last move, so only lines through coord are
    inspected. The fullness check runs once, after every line check failed.
    """
    for line in lines_through(board, coord):
        if _line_is(board, line, mark):
            return Outcome.for_mark(mark)
    if board.is_full():
        return Outcome.TIE
    return None


def full_scan_outcome(board: Board) -> Optional[Outcome]:
    """Scans every line of the board. Slow path, used to cross-check check_outcome."""
    lines = [board.row_coords(i) for i in range(board.size)]
    lines += [board.col_coords(i) for i in range(board.size)]
    lines += [board.main_diagonal(), board.anti_diagonal()]
    for line in lines:
        first = board.at(line[0])
        if first is not None and _line_is(board, line, first):
            return Outcome.for_mark(first)
    if board.is_full():
        return Outcome.TIE
    return None


def apply_move(state: GameState, coord: Coord) -> None:
    """
    Places the current player's mark at coord and advances the game.
    Raises a MoveError subclass and leaves the state untouched when the move is refused.
    """
    if state.outcome is not None:
        raise GameAlreadyOver()
    if state.board.at(coord) is not None:
        raise CellOccupied(coord.row, coord.col)
    if state.board.is_full():
        # Unreachable while ties are detected on the filling move.
        raise BoardFull()

    mark = state.turn
    state.board.place(coord, mark)
    state.outcome = check_outcome(state.board, coord, mark)
    state.turn = mark.other()


def legal_moves(state: GameState) -> List[Coord]:
    """Empty cells the current player may take, row-major. Empty once the game is over."""
    if state.outcome is not None:
        return []
    return state.board.empty_coords()
