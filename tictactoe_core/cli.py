from __future__ import annotations

import argparse
import os
from typing import Callable, List, Optional

from .errors import MoveError, ParseError
from .moves import apply_move, legal_moves
from .notation import format_coordinate, parse_coordinate
from .render import render_board, render_status
from .state import GameState

PROMPT = "Where do you want to play ? (e.g. 1A, 0b)"


def debug_enabled() -> bool:
    return os.getenv('TICTACTOE_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def play(
    state: GameState,
    read_line: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    show_moves: bool = False,
    debug: bool = False,
) -> int:
    """Runs the turn loop until the game ends, the player quits or input runs out."""
    read_line = read_line or input
    write = write or print
    while state.outcome is None:
        write("\n" + render_board(state))
        write(render_status(state))
        if show_moves:
            write('Free cells: ' + ', '.join(format_coordinate(c) for c in legal_moves(state)))
        write(PROMPT)
        try:
            text = read_line().strip()
        except EOFError:
            write('Input closed, leaving the game.')
            return 1
        if text.lower() in ('quit', 'exit'):
            return 0
        try:
            coord = parse_coordinate(text)
        except ParseError as e:
            write(str(e))
            continue
        mover = state.turn
        try:
            apply_move(state, coord)
        except MoveError as e:
            write(str(e))
            continue
        if debug:
            write(f"[engine] {mover} -> {format_coordinate(coord)} ({coord.row}, {coord.col}) outcome={state.outcome}")

    write("\n" + render_board(state))
    write(render_status(state))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='tictactoe', description='Two-player tic-tac-toe on the console')
    parser.add_argument('--show-moves', action='store_true', help='List the free cells before each prompt')
    parser.add_argument('--debug', action='store_true', help='Print engine trace lines (or set TICTACTOE_DEBUG=1)')
    args = parser.parse_args(argv)

    state = GameState.new()
    return play(state, show_moves=args.show_moves, debug=args.debug or debug_enabled())


if __name__ == '__main__':
    raise SystemExit(main())
