from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    BOARD_SIZE,
    Board,
    Coord,
    GameState,
    Mark,
    MoveError,
    Outcome,
    ParseError,
    BadFormat,
    apply_move,
    format_coordinate,
    full_scan_outcome,
    legal_moves,
    parse_coordinate,
    render_board,
    winning_line,
)

app = Flask(__name__)

HELP_TEXT = """Tic-tac-toe hotseat API
POST /api/new              -> fresh state
POST /api/legal  {state}   -> free cells
POST /api/move   {state, move: "1b" | [row, col]}
POST /api/render {state}   -> text board
"""


def _debug(msg: str) -> None:
    if os.getenv('TICTACTOE_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on'):
        print(f"[api] {msg}")


def _cell_to_json(cell: Optional[Mark]) -> Optional[str]:
    return None if cell is None else cell.value


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": [[_cell_to_json(cell) for cell in row] for row in s.board.rows()],
        "turn": s.turn.value,
        "outcome": None if s.outcome is None else s.outcome.value,
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    rows = obj["board"]
    if not isinstance(rows, list) or len(rows) != BOARD_SIZE:
        raise ValueError(f"board must have {BOARD_SIZE} rows")
    grid: List[Optional[Mark]] = []
    for row in rows:
        if not isinstance(row, list) or len(row) != BOARD_SIZE:
            raise ValueError(f"each row must have {BOARD_SIZE} cells")
        grid.extend(None if cell is None else Mark(cell) for cell in row)
    board = Board(grid=grid)

    # Turn and outcome follow from the board; supplied values must agree.
    x_count = grid.count(Mark.X)
    o_count = grid.count(Mark.O)
    if x_count == o_count:
        turn = Mark.X
    elif x_count == o_count + 1:
        turn = Mark.O
    else:
        raise ValueError(f"impossible mark counts: {x_count} X, {o_count} O")
    outcome = full_scan_outcome(board)
    if outcome is not None and outcome.winner is not None and outcome.winner is turn:
        raise ValueError(f"a move was played after {outcome.winner} won")
    if obj.get("turn") is not None and Mark(obj["turn"]) is not turn:
        raise ValueError(f"turn {obj['turn']} does not match the board, {turn} is to move")
    if "outcome" in obj:
        claimed = None if obj["outcome"] is None else Outcome(obj["outcome"])
        if claimed is not outcome:
            raise ValueError(f"outcome {obj['outcome']} does not match the board")
    return GameState(board=board, turn=turn, outcome=outcome)


def _json_to_coord(move: Any) -> Coord:
    if isinstance(move, str):
        return parse_coordinate(move)
    if isinstance(move, list) and len(move) == 2 and all(isinstance(v, int) and not isinstance(v, bool) for v in move):
        return Coord(move[0], move[1])
    raise BadFormat(str(move))


def _legal_json(s: GameState) -> List[List[int]]:
    return [[c.row, c.col] for c in legal_moves(s)]


def _error(msg: str, kind: str, status: int = 400) -> Any:
    return jsonify({"ok": False, "error": msg, "kind": kind}), status


def _body_state() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return {}, None, _error("state required", "BadRequest")
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return body, None, _error("state required", "BadRequest")
    try:
        return body, json_to_state(s_in), None
    except (KeyError, TypeError, ValueError) as e:
        return body, None, _error(f"bad state: {e}", "BadRequest")


@app.get("/")
def index() -> Any:
    return HELP_TEXT, 200, {"Content-Type": "text/plain; charset=utf-8"}


@app.post("/api/new")
def api_new() -> Any:
    state = GameState.new()
    return jsonify({
        "ok": True,
        "state": state_to_json(state),
        "legalMoves": _legal_json(state),
        "board": render_board(state),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    _, state, err = _body_state()
    if err is not None:
        return err
    return jsonify({"ok": True, "legalMoves": _legal_json(state)})


@app.post("/api/move")
def api_move() -> Any:
    body, state, err = _body_state()
    if err is not None:
        return err
    try:
        coord = _json_to_coord(body.get("move"))
    except ParseError as e:
        return _error(str(e), type(e).__name__)
    mover = state.turn
    try:
        apply_move(state, coord)
    except MoveError as e:
        return _error(str(e), type(e).__name__)
    _debug(f"{mover} -> {format_coordinate(coord)} outcome={state.outcome}")

    line = winning_line(state.board, coord) if state.outcome in (Outcome.X_WINS, Outcome.O_WINS) else None
    return jsonify({
        "ok": True,
        "move": [coord.row, coord.col],
        "state": state_to_json(state),
        "legalMoves": _legal_json(state),
        "board": render_board(state),
        "outcome": None if state.outcome is None else state.outcome.message,
        "winningLine": None if line is None else [[c.row, c.col] for c in line],
    })


@app.post("/api/render")
def api_render() -> Any:
    _, state, err = _body_state()
    if err is not None:
        return err
    return jsonify({"ok": True, "board": render_board(state)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
