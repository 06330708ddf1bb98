from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board, MoveOutcome
from .errors import GameOverError, MoveRejectedError
from .move import Move
from .notation import format_log_entry, parse_move
from .pieces import Color, Piece

LOGGER = logging.getLogger("draughts.core.game")


@dataclass
class MoveRecord:
    player: Color
    move: Move
    outcome: MoveOutcome

    @property
    def piece_after(self) -> Piece:
        return self.outcome.piece

    @property
    def log_entry(self) -> str:
        return format_log_entry(self.move)


class Game:
    """A board plus the history of moves played on it."""

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board()
        self.move_history: list[MoveRecord] = []

    def reset(self) -> None:
        self.board = Board()
        self.move_history.clear()

    @property
    def current_player(self) -> Color:
        return self.board.turn

    @property
    def winner(self) -> Optional[Color]:
        return self.board.victor

    def isGameOver(self) -> bool:
        return self.board.victor is not None

    def getWinner(self) -> Optional[Color]:
        return self.board.victor

    def getValidMoves(self) -> list[Move]:
        if self.isGameOver():
            return []
        return self.board.getValidMoves(self.current_player)

    def makeMove(self, move: Move) -> MoveRecord:
        player = self.current_player
        try:
            outcome = self.board.applyMove(move)
        except (MoveRejectedError, GameOverError) as exc:
            LOGGER.info("Rejected %s for %s: %s", move, player.label, exc)
            raise
        record = MoveRecord(player=player, move=move, outcome=outcome)
        self.move_history.append(record)
        LOGGER.debug("%s played %s", player.label, move)
        return record

    def playCommand(self, text: str) -> MoveRecord:
        """Parse ``text`` ("B3 to C4") and play it for the player to move."""
        if self.isGameOver():
            raise GameOverError(f"The game is over, {self.winner.label} won.")
        try:
            move = parse_move(text)
        except MoveRejectedError as exc:
            LOGGER.info("Could not parse %r: %s", text, exc)
            raise
        return self.makeMove(move)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self.move_history[-1] if self.move_history else None
