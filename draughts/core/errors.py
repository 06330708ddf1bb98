"""Rejection kinds and the exceptions raised when a move cannot be played."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MoveErrorKind(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    WRONG_OWNER = "wrong_owner"
    MALFORMED_MOVE = "malformed_move"
    BLOCKED_DESTINATION = "blocked_destination"
    ILLEGAL_JUMP_TARGET = "illegal_jump_target"
    MANDATORY_JUMP = "mandatory_jump"
    DIRECTION_NOT_ALLOWED = "direction_not_allowed"
    PARSE_FAILURE = "parse_failure"
    GAME_OVER = "game_over"


class MoveRejectedError(ValueError):
    """A single move attempt was refused; the board is unchanged."""

    def __init__(self, kind: MoveErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class NotationError(MoveRejectedError):
    def __init__(self, detail: str) -> None:
        super().__init__(MoveErrorKind.PARSE_FAILURE, detail)


class GameOverError(RuntimeError):
    kind = MoveErrorKind.GAME_OVER


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of validating a candidate move."""

    kind: Optional[MoveErrorKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        if self.kind is not None:
            raise MoveRejectedError(self.kind, self.detail)

    @classmethod
    def reject(cls, kind: MoveErrorKind, detail: str) -> "Verdict":
        return cls(kind=kind, detail=detail)


ACCEPTED = Verdict()
