import sys
from typing import Dict, List
sys.path.append('.')
import game  # type: ignore


def walk(state: game.GameState, totals: Dict[str, int], mismatches: List[str]) -> None:
    for coord in game.legal_moves(state):
        child = state.copy()
        game.apply_move(child, coord)
        expected = game.full_scan_outcome(child.board)
        if child.outcome != expected:
            mismatches.append(
                f"{game.render_board(child)}\nincremental={child.outcome} full_scan={expected}"
            )
        if child.outcome is None:
            walk(child, totals, mismatches)
        else:
            totals[child.outcome.name] = totals.get(child.outcome.name, 0) + 1


def main():
    totals: Dict[str, int] = {}
    mismatches: List[str] = []
    walk(game.GameState.new(), totals, mismatches)
    total = sum(totals.values())
    print(f"games={total} x_wins={totals.get('X_WINS', 0)} o_wins={totals.get('O_WINS', 0)} ties={totals.get('TIE', 0)}")
    for m in mismatches[:5]:
        print(m)
    print(f"mismatches={len(mismatches)}")
    return 1 if mismatches else 0


if __name__ == '__main__':
    raise SystemExit(main())
