from __future__ import annotations

import re

from .errors import NotationError
from .move import Direction, Move, Position

BOARD_SIZE = 8
FILES = "ABCDEFGH"

_COMMAND_RE = re.compile(r"\s*([a-z]\d) *(?:to)? *([a-z]\d)\s*", re.IGNORECASE | re.ASCII)


def to_notation(position: Position) -> str:
    return f"{chr(ord('A') + position.col)}{BOARD_SIZE - position.row}"


def from_notation(token: str) -> Position:
    """Map a file+rank token such as ``c4`` to a board position.

    Letters past ``H`` and ranks outside 1-8 map to off-board positions; the
    engine reports those as out of bounds.
    """
    if len(token) != 2 or not token.isascii() or not token[0].isalpha() or not token[1].isdigit():
        raise NotationError(f"'{token}' is not a square.")
    col = ord(token[0].upper()) - ord("A")
    row = BOARD_SIZE - int(token[1])
    return Position(col, row)


def parse_command(text: str) -> tuple[Position, Position]:
    match = _COMMAND_RE.fullmatch(text)
    if match is None:
        raise NotationError("Command could not be parsed.")
    return from_notation(match.group(1)), from_notation(match.group(2))


def to_move(origin: Position, destination: Position) -> Move:
    diff = destination - origin
    if abs(diff.col) != abs(diff.row) or diff.col == 0:
        raise NotationError("Invalid position.")
    steps = abs(diff.col)
    direction = Direction.from_delta(Position(diff.col // steps, diff.row // steps))
    if direction is None:
        raise NotationError("Command could not be parsed.")
    return Move(origin, direction, steps)


def parse_move(text: str) -> Move:
    return to_move(*parse_command(text))


def format_log_entry(move: Move) -> str:
    return f"{to_notation(move.origin)}{to_notation(move.destination)}"
