"""Shared wiring for the lookup use cases."""
from __future__ import annotations

import logging
from typing import Optional

from config import ClientConfig
from domain.entities import Account, ChampionCatalog
from domain.exceptions import RiotAPIError
from domain.interfaces import IChampionRepository, IMatchRepository, ISummonerRepository
from infrastructure import (
    ChampionRepository,
    DataDragonClient,
    MatchRepository,
    RiotAPIClient,
    SummonerRepository,
)

logger = logging.getLogger(__name__)


class LookupUseCase:
    """Base for the three lookups: holds the repositories and the client config."""

    def __init__(
        self,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
        config: ClientConfig,
        champion_repo: Optional[IChampionRepository] = None,
    ):
        self.summoner_repo = summoner_repo
        self.match_repo    = match_repo
        self.config        = config
        self.champion_repo = champion_repo

    @classmethod
    def from_client(cls, api_client: RiotAPIClient, ddragon_client: Optional[DataDragonClient] = None):
        return cls(
            SummonerRepository(api_client),
            MatchRepository(api_client),
            api_client.config,
            champion_repo=ChampionRepository(ddragon_client) if ddragon_client else None,
        )

    async def _resolve_account(self, username: str) -> Account:
        account = await self.summoner_repo.get_account_by_name(username)
        logger.debug(f"Resolved {username!r} to summoner {account.summoner_id}")
        return account

    async def _load_champions(self) -> ChampionCatalog:
        """Champion names for the report; an empty catalog when they cannot be loaded."""
        if self.champion_repo is None:
            return ChampionCatalog()
        try:
            return await self.champion_repo.get_champion_catalog()
        except RiotAPIError as exc:
            logger.warning(f"Champion names unavailable: {exc.message}")
            return ChampionCatalog()
