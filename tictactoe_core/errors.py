from __future__ import annotations


class MoveError(RuntimeError):
    """Base class for moves the engine refuses."""


class CellOccupied(MoveError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"The place {row}, {col} is filled")
        self.row = row
        self.col = col


class BoardFull(MoveError):
    def __init__(self) -> None:
        super().__init__("Board is full")


class GameAlreadyOver(MoveError):
    def __init__(self) -> None:
        super().__init__("Game is already done")


class ParseError(ValueError):
    """Base class for input that cannot be turned into a coordinate."""


class BadFormat(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Not a valid move: {token!r} (e.g. 1A, 0b)")
        self.token = token


class OutOfBounds(ParseError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Position ({row}, {col}) is off the board")
        self.row = row
        self.col = col
