from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .errors import ACCEPTED, GameOverError, MoveErrorKind, Verdict
from .move import Direction, Move, Position
from .notation import BOARD_SIZE, to_notation
from .pieces import Color, Piece

LOGGER = logging.getLogger("draughts.core.board")

DirectionLike = Union[Direction, int]
BoardState = tuple[str, Optional[str], tuple[str, ...], int, int, tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    move: Move
    piece: Piece
    captured_at: Optional[Position] = None
    captured: Optional[Piece] = None
    promoted: bool = False
    continues: bool = False
    victor: Optional[Color] = None


class Board:
    """English draughts position plus the bookkeeping needed to move on it.

    Coordinates are ``Position(col, row)``; row 0 is the top rank ("8").
    White starts on rows 0-2 and moves down, black starts on rows 5-7, moves
    up and plays first.
    """

    SIZE = BOARD_SIZE

    def __init__(self) -> None:
        self.grid: list[list[Piece]] = [
            [Piece.EMPTY for _ in range(self.SIZE)] for _ in range(self.SIZE)
        ]
        self.turn = Color.BLACK
        self.victor: Optional[Color] = None
        self.captured: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 0}
        self.forced_jumps: set[Position] = set()
        self.jumping_from: Optional[Position] = None
        self._set_start_pieces()

    @classmethod
    def empty(cls, *, turn: Color = Color.BLACK) -> "Board":
        board = cls.__new__(cls)
        board.grid = [[Piece.EMPTY for _ in range(cls.SIZE)] for _ in range(cls.SIZE)]
        board.turn = turn
        board.victor = None
        board.captured = {Color.WHITE: 0, Color.BLACK: 0}
        board.forced_jumps = set()
        board.jumping_from = None
        return board

    @classmethod
    def from_rows(cls, rows: Iterable[str], *, turn: Color = Color.BLACK) -> "Board":
        """Build a board from eight text rows, top rank first.

        Each row holds eight piece symbols (``W``, ``B``, ``K``, ``X``) with
        ``.`` or a space for an empty square.
        """
        rows = list(rows)
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}.")
        board = cls.empty(turn=turn)
        for row, text in enumerate(rows):
            if len(text) != cls.SIZE:
                raise ValueError(f"Row {row} must have {cls.SIZE} squares: {text!r}")
            for col, symbol in enumerate(text):
                board.grid[row][col] = Piece.from_symbol(symbol)
        return board

    def copy(self) -> "Board":
        clone = Board.empty(turn=self.turn)
        clone.grid = [list(row) for row in self.grid]
        clone.victor = self.victor
        clone.captured = dict(self.captured)
        clone.forced_jumps = set(self.forced_jumps)
        clone.jumping_from = self.jumping_from
        return clone

    def to_state(self) -> BoardState:
        return (
            self.turn.value,
            self.victor.value if self.victor else None,
            tuple("".join(piece.value for piece in row) for row in self.grid),
            self.captured[Color.WHITE],
            self.captured[Color.BLACK],
            tuple(sorted(to_notation(pos) for pos in self.forced_jumps)),
        )

    # queries ------------------------------------------------------------

    def __getitem__(self, position: Position) -> Piece:
        self._require_on_board(position)
        return self.grid[position.row][position.col]

    def __setitem__(self, position: Position, piece: Piece) -> None:
        self._require_on_board(position)
        self.grid[position.row][position.col] = piece

    def getPiece(self, position: Position) -> Optional[Piece]:
        if self._is_within_bounds(position):
            return self[position]
        return None

    def getPlayerForTile(self, position: Position) -> Optional[Color]:
        piece = self.getPiece(position)
        return piece.color if piece is not None else None

    def getCurrentTurn(self) -> Color:
        return self.turn

    def getVictor(self) -> Optional[Color]:
        return self.victor

    def getCaptured(self, color: Color) -> int:
        """Number of ``color`` pieces taken off the board so far."""
        return self.captured[color]

    def positions(self) -> Iterator[Position]:
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                yield Position(col, row)

    def getPositions(self, color: Color) -> list[Position]:
        return [pos for pos in self.positions() if self[pos].color is color]

    def countPieces(self, color: Color) -> tuple[int, int]:
        men = kings = 0
        for pos in self.getPositions(color):
            if self[pos].is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    # validation ---------------------------------------------------------

    def validateMove(
        self,
        origin: Position,
        direction: DirectionLike,
        steps: int,
        enforce_jumps: bool = True,
        player: Optional[Color] = None,
    ) -> Verdict:
        player = self.turn if player is None else player
        required = self._required_jumps(player) if enforce_jumps else None
        return self._check(origin, direction, steps, player, required)

    def _check(
        self,
        origin: Position,
        direction: DirectionLike,
        steps: int,
        player: Color,
        required: Optional[set[Position]],
    ) -> Verdict:
        if not self._is_within_bounds(origin):
            return Verdict.reject(MoveErrorKind.OUT_OF_BOUNDS, "Start position is out of bounds.")

        piece = self[origin]
        if piece.color is not player:
            return Verdict.reject(MoveErrorKind.WRONG_OWNER, "Cannot move this piece.")

        if steps not in (1, 2) or not Direction.is_valid(direction):
            return Verdict.reject(MoveErrorKind.MALFORMED_MOVE, "Movement is invalid.")
        direction = Direction(direction)

        destination = origin + direction.delta * steps
        if not self._is_within_bounds(destination):
            return Verdict.reject(MoveErrorKind.OUT_OF_BOUNDS, "End position is out of bounds.")
        if not self[destination].is_empty:
            return Verdict.reject(MoveErrorKind.BLOCKED_DESTINATION, "End position is occupied.")

        jumped = origin + direction.delta
        if steps == 2 and self[jumped].color is not player.opponent:
            return Verdict.reject(MoveErrorKind.ILLEGAL_JUMP_TARGET, "Cannot make this jump.")

        if required:
            continuing = player is self.turn and self.jumping_from is not None
            if (
                steps != 2
                or jumped not in required
                or (continuing and origin != self.jumping_from)
            ):
                squares = ", ".join(sorted(to_notation(pos) for pos in required))
                return Verdict.reject(
                    MoveErrorKind.MANDATORY_JUMP, f"Must jump over (one of) {squares}."
                )

        if not piece.is_king and direction not in player.forward:
            return Verdict.reject(
                MoveErrorKind.DIRECTION_NOT_ALLOWED,
                f"Movement is invalid for {player.label.lower()}.",
            )

        return ACCEPTED

    def getJumps(self, position: Position, player: Optional[Color] = None) -> set[Position]:
        """Squares the piece at ``position`` could capture right now."""
        if player is None:
            player = self.getPlayerForTile(position)
            if player is None:
                return set()
        jumps: set[Position] = set()
        for direction in Direction:
            if self._check(position, direction, 2, player, None):
                jumps.add(position + direction.delta)
        return jumps

    def _required_jumps(self, player: Color) -> set[Position]:
        if self.forced_jumps and player is self.turn:
            return set(self.forced_jumps)
        jumps: set[Position] = set()
        for pos in self.getPositions(player):
            jumps |= self.getJumps(pos, player)
        return jumps

    def getValidMoves(self, player: Optional[Color] = None) -> list[Move]:
        player = self.turn if player is None else player
        required = self._required_jumps(player)
        moves: list[Move] = []
        for pos in self.positions():
            if self[pos].color is not player:
                continue
            for direction in Direction:
                for steps in (1, 2):
                    if self._check(pos, direction, steps, player, required):
                        moves.append(Move(pos, direction, steps))
        return moves

    def hasValidMoves(self, player: Optional[Color] = None) -> bool:
        return bool(self.getValidMoves(player))

    # mutation -----------------------------------------------------------

    def movePiece(self, origin: Position, direction: DirectionLike, steps: int) -> MoveOutcome:
        if self.victor is not None:
            raise GameOverError(f"The game is over, {self.victor.label} won.")
        self.validateMove(origin, direction, steps).raise_for_error()

        mover = self.turn
        move = Move(origin, Direction(direction), steps)
        destination = move.destination

        piece = self[origin]
        self[destination] = piece
        self[origin] = Piece.EMPTY

        captured_at = move.jumped
        captured: Optional[Piece] = None
        if captured_at is not None:
            captured = self[captured_at]
            self[captured_at] = Piece.EMPTY
            self.captured[captured.color] += 1

        promoted = False
        if (destination.row == 0 and mover is Color.BLACK) or (
            destination.row == self.SIZE - 1 and mover is Color.WHITE
        ):
            promoted = not piece.is_king
            piece = piece.promote()
            self[destination] = piece
            if promoted:
                LOGGER.debug("%s crowned on %s", mover.label, to_notation(destination))

        if move.is_jump:
            jumps = self.getJumps(destination, mover)
            if jumps:
                self.forced_jumps = jumps
                self.jumping_from = destination
                LOGGER.debug("%s must keep jumping from %s", mover.label, to_notation(destination))
                return MoveOutcome(move, piece, captured_at, captured, promoted, continues=True)

        self.forced_jumps = set()
        self.jumping_from = None
        self.turn = mover.opponent
        if not self.hasValidMoves(self.turn):
            self.victor = mover
            LOGGER.info("%s has no moves left, %s wins", self.turn.label, mover.label)

        return MoveOutcome(move, piece, captured_at, captured, promoted, victor=self.victor)

    def applyMove(self, move: Move) -> MoveOutcome:
        return self.movePiece(move.origin, move.direction, move.steps)

    # helpers ------------------------------------------------------------

    def _set_start_pieces(self) -> None:
        for row in range(3):
            for col in range(row % 2, self.SIZE, 2):
                self.grid[row][col] = Piece.WHITE_MAN

        for row in range(self.SIZE - 3, self.SIZE):
            for col in range(row % 2, self.SIZE, 2):
                self.grid[row][col] = Piece.BLACK_MAN

    def _is_within_bounds(self, position: Position) -> bool:
        return 0 <= position.col < self.SIZE and 0 <= position.row < self.SIZE

    def _require_on_board(self, position: Position) -> None:
        # Negative indexes would otherwise wrap to the far edge.
        if not self._is_within_bounds(position):
            raise IndexError(f"{position} is off the board.")

