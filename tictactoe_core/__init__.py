"""
Tic-tac-toe core Python package.

This package contains the game-state engine and the text collaborators
that drive it. The root-level game.py re-exports the public names.
Modules:
- board.py: Mark, Board, Coord
- state.py: Outcome, GameState
- errors.py: move and parse errors
- moves.py: apply_move, check_outcome, legal_moves
- notation.py: "1B"-style coordinate parsing
- render.py: text rendering of the board
- cli.py: console front end
"""
