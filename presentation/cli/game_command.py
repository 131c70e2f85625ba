from __future__ import annotations

from application.lookup import lookup_live_match
from domain.entities import LiveMatch
from presentation.console import render_live_match
from .report_command import ReportCommand


class GameCommand(ReportCommand):
    """`game <username>`: rosters of the current game."""

    name = "game"

    def fetch(self, username: str) -> LiveMatch:
        return lookup_live_match(username, self.config)

    def render(self, report: LiveMatch) -> str:
        return render_live_match(report)
