from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from ..core.errors import GameOverError, MoveRejectedError
from ..core.game import Game
from ..core.notation import parse_command, to_notation
from .replay import LineReader, MoveLog

LOGGER = logging.getLogger("draughts.driver.session")

LIST_MOVES_COMMAND = "moves"


class Renderer(Protocol):
    def draw(self, game: Game, status: str = "") -> None: ...

    def show(self, message: str) -> None: ...


@dataclass(frozen=True)
class DriverOptions:
    script: Optional[Path] = None
    replay: Optional[Path] = None
    snapshot: Optional[Path] = None
    delay: float = 0.75
    gui: bool = False


class GameSession:
    """Read loop around a single Game: draw, read a command, play it, repeat."""

    def __init__(
        self,
        renderer: Renderer,
        reader: LineReader,
        *,
        game: Optional[Game] = None,
        scripted: bool = False,
        move_log: Optional[MoveLog] = None,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.renderer = renderer
        self.reader = reader
        self.game = game if game is not None else Game()
        self.scripted = scripted
        self.move_log = move_log
        self.delay = delay
        self._sleep = sleep
        self.status = ""

    # public API ---------------------------------------------------------

    def run(self) -> int:
        while True:
            self.renderer.draw(self.game, self.status)
            self.status = ""
            if self.game.isGameOver():
                break

            prompt = "" if self.scripted else self._prompt()
            line = self.reader(prompt)
            if line is None:
                self.renderer.show("Input stream is invalid.")
                LOGGER.warning("Input ended before the game was decided")
                return 1

            self.status = self.step(line)

        self.renderer.show(f"\n{self.game.winner.label} wins!")
        return 0

    def step(self, line: str) -> str:
        """Play one command and return the status line to show next."""
        if line.strip().lower() == LIST_MOVES_COMMAND:
            return self._describe_moves()

        try:
            origin, destination = parse_command(line)
            status = f"({to_notation(origin)} to {to_notation(destination)}) "
            record = self.game.playCommand(line)
        except (MoveRejectedError, GameOverError) as exc:
            return f"Invalid command: {exc}"

        if self.move_log is not None:
            self.move_log.write(record.move)
        if record.outcome.continues:
            status += f"{record.player.label} must jump again."
        if self.scripted and self.delay > 0:
            self._sleep(self.delay)
        return status

    # helpers ------------------------------------------------------------

    def _prompt(self) -> str:
        return f"\nSelect for {self.game.current_player.label.lower()} (ex. B3 to C4): "

    def _describe_moves(self) -> str:
        moves = self.game.getValidMoves()
        listed = ", ".join(str(move) for move in moves)
        return f"Moves for {self.game.current_player.label.lower()}: {listed}"
