from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..core.board import Board
from ..core.game import Game
from ..core.notation import BOARD_SIZE
from ..core.pieces import Color, Piece

DARK_SQUARE = "#a9a9a9"
LIGHT_SQUARE = "#8b4513"

PIECE_GLYPHS = {
    Piece.WHITE_MAN: (" O ", "red"),
    Piece.BLACK_MAN: (" O ", "black"),
    Piece.WHITE_KING: (" K ", "red"),
    Piece.BLACK_KING: (" K ", "black"),
}


def square_background(row: int, col: int) -> str:
    return LIGHT_SQUARE if (row + col) % 2 == 1 else DARK_SQUARE


def render_captured(board: Board) -> Text:
    text = Text()
    text.append(" O ", style=Style(color="red", bgcolor=DARK_SQUARE))
    text.append(f": {board.getCaptured(Color.WHITE)}\n")
    text.append(" O ", style=Style(color="black", bgcolor=LIGHT_SQUARE))
    text.append(f": {board.getCaptured(Color.BLACK)}\n")
    return text


def render_board(board: Board) -> Text:
    text = Text()
    header = "".join(f"{chr(ord('A') + col):<3}" for col in range(BOARD_SIZE))
    text.append(f"   {header.rstrip()}\n")
    for row in range(BOARD_SIZE):
        text.append(f"{BOARD_SIZE - row} ")
        for col in range(BOARD_SIZE):
            piece = board.grid[row][col]
            background = square_background(row, col)
            if piece.is_empty:
                text.append("   ", style=Style(bgcolor=background))
                continue
            glyph, color = PIECE_GLYPHS[piece]
            text.append(glyph, style=Style(color=color, bgcolor=background, bold=True))
        text.append("\n")
    return text


class ConsoleRenderer:
    """Draws the board on a rich console and reads commands from it."""

    def __init__(self, console: Optional[Console] = None, *, clear_screen: bool = True) -> None:
        self.console = console if console is not None else Console()
        self.clear_screen = clear_screen

    def draw(self, game: Game, status: str = "") -> None:
        if self.clear_screen:
            self.console.clear()
        self.console.print(status, markup=False, highlight=False)
        self.console.print()
        self.console.print(render_captured(game.board))
        self.console.print(render_board(game.board), end="")

    def show(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def read(self, prompt: str) -> Optional[str]:
        try:
            return self.console.input(prompt)
        except EOFError:
            return None
