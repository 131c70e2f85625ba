from __future__ import annotations

from application.lookup import lookup_history
from domain.entities import MatchHistory
from presentation.console import render_history
from .report_command import ReportCommand


class HistoryCommand(ReportCommand):
    """`history <username>`: recent matches with outcomes."""

    name = "history"

    def fetch(self, username: str) -> MatchHistory:
        return lookup_history(username, self.config)

    def render(self, report: MatchHistory) -> str:
        return render_history(report)
