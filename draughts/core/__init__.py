"""Core English draughts engine package."""

from .board import Board, MoveOutcome
from .errors import GameOverError, MoveErrorKind, MoveRejectedError, NotationError, Verdict
from .game import Game, MoveRecord
from .move import Direction, Move, Position
from .notation import format_log_entry, parse_command, parse_move, to_move, to_notation
from .pieces import Color, Piece

__all__ = [
    "Board",
    "MoveOutcome",
    "Game",
    "MoveRecord",
    "Move",
    "Position",
    "Direction",
    "Color",
    "Piece",
    "Verdict",
    "MoveErrorKind",
    "MoveRejectedError",
    "NotationError",
    "GameOverError",
    "parse_command",
    "parse_move",
    "to_move",
    "to_notation",
    "format_log_entry",
]
