"""Summoner repository implementation."""
import logging
from typing import List

from domain.entities import Account, Rank
from domain.enums import Tier
from domain.exceptions import MalformedResponse
from domain.interfaces import ISummonerRepository
from infrastructure.api import RiotAPIClient
from .fields import require_str

logger = logging.getLogger(__name__)


class SummonerRepository(ISummonerRepository):
    """Repository for summoner and league data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_account_by_name(self, name: str) -> Account:
        """
        Resolve a summoner name to an account.

        Args:
            name: Summoner name as typed by the user

        Returns:
            Account entity

        Raises:
            AccountNotFound: no summoner with that name on the platform
            MalformedResponse: a required field is missing or ill-typed
        """
        data = await self.api_client.get_summoner_by_name(name)
        try:
            return self._parse_account(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing summoner {name}: {e}")
            raise MalformedResponse() from e

    async def get_league_entries(self, summoner_id: str) -> List[Rank]:
        """
        All league entries of a summoner, one per queue.

        Args:
            summoner_id: Summoner ID (encrypted)
        """
        entries = await self.api_client.get_league_entries_by_summoner(summoner_id)
        try:
            return [self._parse_rank(entry) for entry in entries]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing league entries for {summoner_id}: {e}")
            raise MalformedResponse() from e

    @staticmethod
    def _parse_account(data: dict) -> Account:
        return Account(
            summoner_id=require_str(data, 'id'),
            account_id=require_str(data, 'accountId'),
            puuid=require_str(data, 'puuid'),
            name=require_str(data, 'name'),
            level=int(data['summonerLevel']),
        )

    @staticmethod
    def _parse_rank(entry: dict) -> Rank:
        return Rank(
            tier=Tier.from_string(entry['tier']),
            division=require_str(entry, 'rank'),
            queue_type=require_str(entry, 'queueType'),
            wins=int(entry['wins']),
            losses=int(entry['losses']),
            hot_streak=bool(entry['hotStreak']),
            league_points=int(entry['leaguePoints']),
        )
