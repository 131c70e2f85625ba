from __future__ import annotations

from application.lookup import lookup_profile
from domain.entities import UserAccount
from presentation.console import render_profile
from .report_command import ReportCommand


class ProfileCommand(ReportCommand):
    """`lookup <username>`: account statistics."""

    name = "lookup"

    def fetch(self, username: str) -> UserAccount:
        return lookup_profile(username, self.config)

    def render(self, report: UserAccount) -> str:
        return render_profile(report)
