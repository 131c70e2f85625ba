"""Presentation layer - Console rendering and CLI commands."""
from .cli import ProfileCommand, GameCommand, HistoryCommand, COMMANDS

__all__ = [
    "ProfileCommand",
    "GameCommand",
    "HistoryCommand",
    "COMMANDS",
]
