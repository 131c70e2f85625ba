"""Use case: rosters of a player's in-progress match."""
from __future__ import annotations

from core.logging.context import context
from domain.entities import LiveMatch
from application.services import LiveMatchAggregator, RankResolver, gather_all
from .base import LookupUseCase


class LookupLiveMatchUseCase(LookupUseCase):

    async def execute(self, username: str) -> LiveMatch:
        with context(command="game", username=username):
            account = await self._resolve_account(username)
            aggregator = LiveMatchAggregator(
                self.match_repo,
                RankResolver(self.summoner_repo),
                fail_fast=self.config.live_match_fail_fast,
            )
            live, champions = await gather_all(
                (aggregator.aggregate(account), self._load_champions()),
                fail_fast=True,
            )
            live.champions = champions
            return live
