"""Use case: recent match history with per-match outcome."""
from __future__ import annotations

from typing import Optional

from config import ClientConfig
from core.logging.context import context
from domain.entities import MatchHistory
from domain.interfaces import IChampionRepository, IMatchRepository, ISummonerRepository
from infrastructure.api import Cooldown
from application.services import MatchHistoryAggregator, gather_all
from .base import LookupUseCase


class LookupHistoryUseCase(LookupUseCase):

    def __init__(
        self,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
        config: ClientConfig,
        champion_repo: Optional[IChampionRepository] = None,
        cooldown: Optional[Cooldown] = None,
    ):
        super().__init__(summoner_repo, match_repo, config, champion_repo)
        self.cooldown = cooldown or Cooldown(config.history_cooldown)

    async def execute(self, username: str) -> MatchHistory:
        with context(command="history", username=username):
            account = await self._resolve_account(username)
            records, champions = await gather_all(
                (
                    MatchHistoryAggregator(self.match_repo, self.cooldown).aggregate(account),
                    self._load_champions(),
                ),
                fail_fast=True,
            )
            return MatchHistory(username=username, records=records, champions=champions)
