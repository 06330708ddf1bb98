from __future__ import annotations

from typing import Any

from ..core.board import Board
from ..core.game import Game, MoveRecord
from ..core.move import Move, Position
from ..core.notation import to_notation
from ..core.pieces import Color
from .schemas import GameSnapshot


def serialize_square(position: Position) -> dict[str, Any]:
    return {"col": position.col, "row": position.row, "notation": to_notation(position)}


def serialize_move(move: Move) -> dict[str, Any]:
    jumped = move.jumped
    return {
        "origin": serialize_square(move.origin),
        "destination": serialize_square(move.destination),
        "direction": move.direction.name.lower(),
        "steps": move.steps,
        "jumped": serialize_square(jumped) if jumped is not None else None,
    }


def serialize_record(record: MoveRecord) -> dict[str, Any]:
    return {
        "player": record.player.value,
        "move": serialize_move(record.move),
        "promoted": record.outcome.promoted,
        "continues": record.outcome.continues,
    }


def serialize_counts(board: Board, color: Color) -> dict[str, int]:
    men, kings = board.countPieces(color)
    return {"men": men, "kings": kings, "captured": board.getCaptured(color)}


def serialize_game(game: Game) -> dict[str, Any]:
    board = game.board
    moves = game.getValidMoves()
    return {
        "turn": board.turn.value,
        "winner": board.victor.value if board.victor else None,
        "rows": ["".join(piece.value for piece in row) for row in board.grid],
        "pieceCounts": {
            "white": serialize_counts(board, Color.WHITE),
            "black": serialize_counts(board, Color.BLACK),
        },
        "forcedJumps": sorted(to_notation(pos) for pos in board.forced_jumps),
        "mandatoryCapture": any(move.is_jump for move in moves),
        "validMoves": [serialize_move(move) for move in moves],
        "moveCount": len(game.move_history),
        "lastMove": serialize_record(game.last_move) if game.last_move else None,
        "log": [record.log_entry for record in game.move_history],
    }


def snapshot_game(game: Game) -> GameSnapshot:
    return GameSnapshot.model_validate(serialize_game(game))
