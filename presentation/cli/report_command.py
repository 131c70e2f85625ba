from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from config import ClientConfig
from core.logging.logger import get_logger, StructuredLogger
from domain.exceptions import RiotAPIError
from presentation.console import render_error


class ReportCommand(ABC):
    """Fetch one report and print it; typed API errors become a message and exit code 1."""

    name: str = "report"

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._log: StructuredLogger = get_logger(__name__, service=f"{self.name}-cli")

    @abstractmethod
    def fetch(self, username: str) -> Any:
        """Run the lookup; raises ``RiotAPIError``."""
        pass

    @abstractmethod
    def render(self, report: Any) -> str:
        pass

    def run(self, username: str) -> int:
        self._log.info(lambda: f"{self.name}-start {username}")
        try:
            report = self.fetch(username)
        except RiotAPIError as exc:
            self._log.warning(lambda: f"{self.name}-failed {type(exc).__name__}: {exc.message}")
            print(render_error(exc.message))
            return 1
        print(self.render(report))
        self._log.success(lambda: f"{self.name}-done {username}")
        return 0
