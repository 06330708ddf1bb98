from __future__ import annotations

from enum import Enum
from typing import Optional

from .move import Direction


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def label(self) -> str:
        # White pieces are drawn red on the board.
        return "Black" if self is Color.BLACK else "Red"

    @property
    def forward(self) -> tuple[Direction, Direction]:
        if self is Color.WHITE:
            return (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)
        return (Direction.UP_LEFT, Direction.UP_RIGHT)


class Piece(Enum):
    EMPTY = " "
    WHITE_MAN = "W"
    BLACK_MAN = "B"
    WHITE_KING = "K"
    BLACK_KING = "X"

    @property
    def color(self) -> Optional[Color]:
        if self in (Piece.WHITE_MAN, Piece.WHITE_KING):
            return Color.WHITE
        if self in (Piece.BLACK_MAN, Piece.BLACK_KING):
            return Color.BLACK
        return None

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    def promote(self) -> "Piece":
        if self is Piece.WHITE_MAN:
            return Piece.WHITE_KING
        if self is Piece.BLACK_MAN:
            return Piece.BLACK_KING
        return self

    @classmethod
    def man(cls, color: Color) -> "Piece":
        return cls.WHITE_MAN if color is Color.WHITE else cls.BLACK_MAN

    @classmethod
    def king(cls, color: Color) -> "Piece":
        return cls.WHITE_KING if color is Color.WHITE else cls.BLACK_KING

    @classmethod
    def from_symbol(cls, symbol: str) -> "Piece":
        if symbol in (".", "-"):
            return cls.EMPTY
        try:
            return cls(symbol.upper())
        except ValueError as exc:
            raise ValueError(f"Unknown piece symbol '{symbol}'.") from exc

    def __repr__(self) -> str:
        return f"Piece.{self.name}"
