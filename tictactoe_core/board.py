from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, List, Optional, Tuple

from .errors import OutOfBounds

BOARD_SIZE = 3


class Mark(Enum):
    """A player's symbol. X always moves first."""
    X = "X"
    O = "O"

    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


Cell = Optional[Mark]


@dataclass(frozen=True)
class Coord:
    """A (row, col) position that is always on the board."""
    row: int
    col: int

    def __post_init__(self) -> None:
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (self.row, self.col)):
            raise TypeError(f"Coord needs integer indices, got ({self.row!r}, {self.col!r})")
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise OutOfBounds(self.row, self.col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass
class Board:
    """The square grid of cells, stored row-major."""
    size: ClassVar[int] = BOARD_SIZE
    grid: List[Cell] = field(default_factory=lambda: [None] * (BOARD_SIZE * BOARD_SIZE))

    def __post_init__(self) -> None:
        if len(self.grid) != self.size * self.size:
            raise ValueError(f"board needs {self.size * self.size} cells, got {len(self.grid)}")

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.size + c

    def at(self, coord: Coord) -> Cell:
        return self.grid[self.index(coord.row, coord.col)]

    def place(self, coord: Coord, mark: Mark) -> None:
        """Writes a mark into a cell. Callers check that the cell is empty."""
        self.grid[self.index(coord.row, coord.col)] = mark

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.size):
            for c in range(self.size):
                yield Coord(r, c)

    def empty_coords(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.at(coord) is None]

    def occupied_count(self) -> int:
        return sum(1 for cell in self.grid if cell is not None)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.grid)

    def rows(self) -> List[List[Cell]]:
        return [self.grid[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    # Lines through the board, as coordinates.
    def row_coords(self, r: int) -> List[Coord]:
        return [Coord(r, c) for c in range(self.size)]

    def col_coords(self, c: int) -> List[Coord]:
        return [Coord(r, c) for r in range(self.size)]

    def main_diagonal(self) -> List[Coord]:
        # |x|o|o|
        # |o|x|o|
        # |o|o|x|
        return [Coord(i, i) for i in range(self.size)]

    def anti_diagonal(self) -> List[Coord]:
        # |o|o|x|
        # |o|x|o|
        # |x|o|o|
        return [Coord(i, self.size - 1 - i) for i in range(self.size)]

    def copy(self) -> "Board":
        return Board(grid=list(self.grid))
