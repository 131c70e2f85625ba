"""Presentation CLI exports."""
from .report_command import ReportCommand
from .profile_command import ProfileCommand
from .game_command import GameCommand
from .history_command import HistoryCommand

COMMANDS = {
    ProfileCommand.name: ProfileCommand,
    GameCommand.name: GameCommand,
    HistoryCommand.name: HistoryCommand,
}

__all__ = [
    "ReportCommand",
    "ProfileCommand",
    "GameCommand",
    "HistoryCommand",
    "COMMANDS",
]
