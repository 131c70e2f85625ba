"""Match history aggregator: recent matches with the player's own outcome."""
import logging
from typing import Any

from domain.entities import Account, MatchSummary, UserMatchRecord, outcome_for_account
from domain.enums import Outcome
from domain.exceptions import RiotAPIError
from domain.interfaces import IMatchRepository
from infrastructure.api import Cooldown
from .fan_out import gather_all
from .role_classifier import role_for_entry

logger = logging.getLogger(__name__)


class MatchHistoryAggregator:
    """
    Builds one ``UserMatchRecord`` per entry of the history window.

    Match details are fetched concurrently after a single cooldown. A detail
    that cannot be fetched or correlated yields an UNAVAILABLE row; the
    number and order of rows always match the history window.
    """

    def __init__(self, match_repo: IMatchRepository, cooldown: Cooldown):
        self.match_repo = match_repo
        self.cooldown   = cooldown

    async def aggregate(self, account: Account) -> list[UserMatchRecord]:
        summaries = await self.match_repo.get_match_history(account.account_id)
        if not summaries:
            return []

        await self.cooldown.wait()

        details = await gather_all(
            (self.match_repo.get_match_detail(s.match_id) for s in summaries),
            fail_fast=False,
        )
        records = [
            self._build_record(account, summary, detail)
            for summary, detail in zip(summaries, details)
        ]

        unavailable = sum(1 for r in records if r.outcome is Outcome.UNAVAILABLE)
        if unavailable:
            logger.warning(f"{unavailable}/{len(records)} matches without an outcome")
        return records

    @staticmethod
    def _build_record(account: Account, summary: MatchSummary, detail: Any) -> UserMatchRecord:
        if isinstance(detail, RiotAPIError):
            logger.warning(f"Match {summary.match_id} unavailable: {detail.message}")
            won = None
        elif isinstance(detail, BaseException):
            raise detail
        else:
            won = outcome_for_account(detail, account.account_id)
            if won is None:
                logger.warning(
                    f"Match {summary.match_id}: cannot place account {account.account_id} on a team"
                )

        return UserMatchRecord(
            role=role_for_entry(summary.lane, summary.role),
            queue_id=summary.queue_id,
            champion_id=summary.champion_id,
            outcome=Outcome.from_flag(won),
        )
