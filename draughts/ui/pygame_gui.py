from __future__ import annotations

import logging
from typing import Optional

import pygame
from pygame import gfxdraw

from ..core.errors import GameOverError, MoveRejectedError
from ..core.game import Game
from ..core.move import Position
from ..core.notation import BOARD_SIZE, to_move, to_notation
from ..core.pieces import Color

LOGGER = logging.getLogger("draughts.ui.pygame_gui")


class DraughtsGUI:
    """Point-and-click window: pick a piece, then the square to move it to."""

    def __init__(self, game: Game, square_size: int = 80, info_height: int = 150) -> None:
        self.game = game
        self.square_size = square_size
        self.board_pixels = self.square_size * BOARD_SIZE
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Draughts")

        self.font = pygame.font.SysFont("arial", 22)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.selected: Optional[Position] = None
        self.destinations: set[Position] = set()
        self.status = ""

        self.colors = {
            "light": (169, 169, 169),
            "dark": (139, 69, 19),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "forced": (220, 60, 60),
            "white_piece": (200, 30, 30),
            "black_piece": (25, 25, 25),
            "outline": (10, 10, 10),
            "background": (30, 34, 45),
            "text": (230, 230, 230),
            "coordinate": (210, 210, 210),
            "king": (255, 215, 0),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                        self._clear_selection()
                        self.status = "New game."
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(30)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None or self.game.isGameOver():
            return

        if self.selected is not None and cell in self.destinations:
            self._play(self.selected, cell)
            return

        if self.game.board[cell].color is not self.game.current_player:
            self._clear_selection()
            return

        self.selected = cell
        self.destinations = {
            move.destination for move in self.game.getValidMoves() if move.origin == cell
        }
        if not self.destinations:
            self.status = f"{to_notation(cell)} has no legal move."

    def _play(self, origin: Position, destination: Position) -> None:
        try:
            record = self.game.makeMove(to_move(origin, destination))
        except (MoveRejectedError, GameOverError) as exc:
            LOGGER.debug("Window move rejected: %s", exc)
            self.status = f"Invalid move: {exc}"
            self._clear_selection()
            return

        self.status = f"{record.player.label}: {record.move}"
        self._clear_selection()
        if record.outcome.continues:
            # Keep the capturing piece selected for the next hop.
            self.selected = destination
            self.destinations = {
                move.destination
                for move in self.game.getValidMoves()
                if move.origin == destination
            }

    def _clear_selection(self) -> None:
        self.selected = None
        self.destinations = set()

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Optional[Position]:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return Position(x // self.square_size, y // self.square_size)

    # drawing ------------------------------------------------------------

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_markers()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = self.colors["dark"] if (row + col) % 2 == 1 else self.colors["light"]
                pygame.draw.rect(self.screen, color, self._rect_for_cell(Position(col, row)))

        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        pygame.draw.rect(self.screen, self.colors["outline"], board_rect, 2)
        self._draw_coordinates(board_rect)

    def _draw_coordinates(self, board_rect: pygame.Rect) -> None:
        for idx in range(BOARD_SIZE):
            letter = self.small_font.render(chr(ord("A") + idx), True, self.colors["coordinate"])
            number = self.small_font.render(str(BOARD_SIZE - idx), True, self.colors["coordinate"])

            cx = board_rect.left + idx * self.square_size + self.square_size // 2
            self.screen.blit(letter, letter.get_rect(center=(cx, board_rect.top - 18)))
            self.screen.blit(letter, letter.get_rect(center=(cx, board_rect.bottom + 18)))

            cy = board_rect.top + idx * self.square_size + self.square_size // 2
            self.screen.blit(number, number.get_rect(center=(board_rect.left - 18, cy)))
            self.screen.blit(number, number.get_rect(center=(board_rect.right + 18, cy)))

    def _draw_markers(self) -> None:
        for square in self.game.board.forced_jumps:
            pygame.draw.rect(self.screen, self.colors["forced"], self._rect_for_cell(square), 3)

        if self.selected is not None:
            pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(self.selected), 4)

        for dest in self.destinations:
            cx, cy = self._center_for_cell(dest)
            gfxdraw.filled_circle(self.screen, cx, cy, 12, (*self.colors["highlight"], 160))
            gfxdraw.aacircle(self.screen, cx, cy, 12, self.colors["outline"])

    def _draw_pieces(self) -> None:
        radius = (self.square_size - 14) // 2
        for pos in self.game.board.positions():
            piece = self.game.board[pos]
            if piece.is_empty:
                continue
            center = self._center_for_cell(pos)
            base = self.colors["white_piece"] if piece.color is Color.WHITE else self.colors["black_piece"]
            pygame.draw.circle(self.screen, base, center, radius)
            pygame.draw.circle(self.screen, self.colors["outline"], center, radius, 2)
            if piece.is_king:
                crown = self.king_font.render("K", True, self.colors["king"])
                self.screen.blit(crown, crown.get_rect(center=center))

    def _draw_info_panel(self) -> None:
        board = self.game.board
        top = self.margin * 2 + self.board_pixels
        winner = self.game.winner
        lines = [
            f"Captured  red: {board.getCaptured(Color.WHITE)}   black: {board.getCaptured(Color.BLACK)}",
            f"{winner.label} wins!" if winner else f"{self.game.current_player.label} to move",
            self.status,
            "R: Reset  |  Esc/Q: Quit",
        ]
        for offset, line in enumerate(lines):
            font = self.font if offset == 1 else self.small_font
            surface = font.render(line, True, self.colors["text"])
            self.screen.blit(surface, (self.margin, top + offset * 28))

    def _rect_for_cell(self, pos: Position) -> pygame.Rect:
        return pygame.Rect(
            self.margin + pos.col * self.square_size,
            self.margin + pos.row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, pos: Position) -> tuple[int, int]:
        return (
            self.margin + pos.col * self.square_size + self.square_size // 2,
            self.margin + pos.row * self.square_size + self.square_size // 2,
        )


def run_gui(game: Optional[Game] = None) -> None:
    pygame.init()
    try:
        DraughtsGUI(game if game is not None else Game()).run()
    finally:
        pygame.quit()
