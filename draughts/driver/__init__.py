"""Read loop, replay files and snapshot export around the engine."""

from .replay import MoveLog, read_script, script_reader
from .session import DriverOptions, GameSession

__all__ = ["DriverOptions", "GameSession", "MoveLog", "read_script", "script_reader"]
