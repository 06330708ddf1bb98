from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True, slots=True, order=True)
class Position:
    col: int
    row: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.col + other.col, self.row + other.row)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.col - other.col, self.row - other.row)

    def __mul__(self, factor: int) -> "Position":
        return Position(self.col * factor, self.row * factor)

    def __repr__(self) -> str:
        return f"Position({self.col},{self.row})"


class Direction(IntEnum):
    UP_LEFT = 0
    UP_RIGHT = 1
    DOWN_LEFT = 2
    DOWN_RIGHT = 3

    @property
    def delta(self) -> Position:
        return _DELTAS[self]

    @classmethod
    def is_valid(cls, value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < len(cls)

    @classmethod
    def from_delta(cls, delta: Position) -> Optional["Direction"]:
        for direction in cls:
            if _DELTAS[direction] == delta:
                return direction
        return None


_DELTAS = (
    Position(-1, -1),
    Position(1, -1),
    Position(-1, 1),
    Position(1, 1),
)


@dataclass(frozen=True, slots=True)
class Move:
    origin: Position
    direction: Direction
    steps: int = 1

    @property
    def destination(self) -> Position:
        return self.origin + self.direction.delta * self.steps

    @property
    def jumped(self) -> Optional[Position]:
        """Square of the piece taken by this move, if it is a jump."""
        if self.steps != 2:
            return None
        return self.origin + self.direction.delta

    @property
    def is_jump(self) -> bool:
        return self.steps == 2

    def __str__(self) -> str:
        from .notation import to_notation

        return f"{to_notation(self.origin)} to {to_notation(self.destination)}"
