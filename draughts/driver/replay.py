"""Replay scripts in, move logs out.

Both use the command notation, one move per line, so a log written while
playing can be fed straight back as a script.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TextIO

from ..core.move import Move
from ..core.notation import format_log_entry

LOGGER = logging.getLogger("draughts.driver.replay")

LineReader = Callable[[str], Optional[str]]


class MoveLog:
    """Append-only writer for played moves."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.entries = 0

    @classmethod
    def open(cls, path: Path) -> "MoveLog":
        return cls(path.open("w", encoding="utf-8"))

    def write(self, move: Move) -> None:
        self._stream.write(format_log_entry(move) + "\n")
        self._stream.flush()
        self.entries += 1

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "MoveLog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def read_script(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8") as handle:
        lines = [line.rstrip("\r\n") for line in handle]
    LOGGER.debug("Loaded %d commands from %s", len(lines), path)
    return lines


def script_reader(lines: Iterable[str]) -> LineReader:
    """Serve ``lines`` one per call, then ``None`` once exhausted."""
    iterator: Iterator[str] = iter(lines)

    def read(_prompt: str) -> Optional[str]:
        return next(iterator, None)

    return read
