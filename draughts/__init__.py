"""English draughts rules engine with a terminal driver."""

__version__ = "1.0.0"
