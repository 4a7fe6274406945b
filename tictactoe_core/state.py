from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board, Mark


class Outcome(Enum):
    """Terminal result of a game."""
    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    TIE = "TIE"

    @classmethod
    def for_mark(cls, mark: Mark) -> "Outcome":
        return cls.X_WINS if mark is Mark.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Mark]:
        if self is Outcome.X_WINS:
            return Mark.X
        if self is Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def message(self) -> str:
        if self is Outcome.X_WINS:
            return "X won this game!"
        if self is Outcome.O_WINS:
            return "O is the winner!"
        return "no winner!"


@dataclass
class GameState:
    """Represents one game: the board, the mark to move and the outcome once decided."""
    board: Board = field(default_factory=Board)
    turn: Mark = Mark.X
    outcome: Optional[Outcome] = None

    @classmethod
    def new(cls) -> "GameState":
        return cls(board=Board(), turn=Mark.X, outcome=None)

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def status(self) -> str:
        if self.outcome is None:
            return "in_progress"
        return "tied" if self.outcome is Outcome.TIE else "won"

    def copy(self) -> "GameState":
        return GameState(board=self.board.copy(), turn=self.turn, outcome=self.outcome)
