from __future__ import annotations

import string

from .board import BOARD_SIZE, Coord
from .errors import BadFormat, OutOfBounds

ROW_LETTERS = string.ascii_uppercase[:BOARD_SIZE]


def _is_letter(ch: str) -> bool:
    return ch in string.ascii_letters


def _is_digit(ch: str) -> bool:
    return ch in string.digits


def parse_coordinate(token: str) -> Coord:
    """
    Parses a two-character move such as "1A", "a1" or "0b".
    The letter names the row, the digit names the column; order and case do not matter.
    """
    text = token.strip()
    if len(text) != 2:
        raise BadFormat(token)
    first, second = text[0], text[1]
    if _is_letter(first) and _is_digit(second):
        letter, digit = first, second
    elif _is_digit(first) and _is_letter(second):
        digit, letter = first, second
    else:
        raise BadFormat(token)

    row = ord(letter.upper()) - ord("A")
    col = int(digit)
    if row >= BOARD_SIZE or col >= BOARD_SIZE:
        raise OutOfBounds(row, col)
    return Coord(row, col)


def format_coordinate(coord: Coord) -> str:
    """Canonical notation: column digit, then row letter."""
    return f"{coord.col}{ROW_LETTERS[coord.row]}"
