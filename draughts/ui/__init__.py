"""Renderers for the draughts driver."""

from .console import ConsoleRenderer, render_board, render_captured

__all__ = ["ConsoleRenderer", "render_board", "render_captured"]
