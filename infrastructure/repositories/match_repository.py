"""Match repository implementation."""
import logging
from typing import List

from domain.entities import (
    ActiveGame,
    ActiveGameParticipant,
    MatchDetail,
    MatchSummary,
    ParticipantIdentity,
    ParticipantSlot,
    TeamResult,
)
from domain.exceptions import MalformedResponse
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient
from .fields import require_str

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for live and historical match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_active_game(self, summoner_id: str) -> ActiveGame:
        """In-progress match of a summoner."""
        data = await self.api_client.get_active_game_by_summoner(summoner_id)
        try:
            return self._parse_active_game(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing active game for {summoner_id}: {e}")
            raise MalformedResponse() from e

    async def get_match_history(self, account_id: str) -> List[MatchSummary]:
        """Recent matches of an account, newest first, within the configured window."""
        data = await self.api_client.get_matchlist_by_account(account_id)
        try:
            return [self._parse_match_summary(m) for m in data['matches']]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing match history for {account_id}: {e}")
            raise MalformedResponse() from e

    async def get_match_detail(self, match_id: str) -> MatchDetail:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier

        Returns:
            MatchDetail entity
        """
        data = await self.api_client.get_match_by_id(match_id)
        try:
            return self._parse_match_detail(match_id, data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing match {match_id}: {e}")
            raise MalformedResponse() from e

    def _parse_active_game(self, data: dict) -> ActiveGame:
        participants = [
            ActiveGameParticipant(
                summoner_name=require_str(p, 'summonerName'),
                summoner_id=require_str(p, 'summonerId'),
                team_id=int(p['teamId']),
                champion_id=int(p['championId']),
            )
            for p in data['participants']
        ]
        return ActiveGame(
            game_mode=require_str(data, 'gameMode'),
            game_type=require_str(data, 'gameType'),
            participants=participants,
        )

    def _parse_match_summary(self, m_data: dict) -> MatchSummary:
        match_id = m_data.get('gameId', m_data.get('matchId'))
        if match_id is None:
            raise KeyError('gameId')
        return MatchSummary(
            match_id=str(match_id),
            queue_id=int(m_data['queue']),
            champion_id=int(m_data['champion']),
            lane=require_str(m_data, 'lane'),
            role=require_str(m_data, 'role'),
        )

    def _parse_match_detail(self, match_id: str, data: dict) -> MatchDetail:
        teams = [
            TeamResult(team_id=int(t['teamId']), win=require_str(t, 'win'))
            for t in data['teams']
        ]
        participants = [
            ParticipantSlot(participant_id=int(p['participantId']), team_id=int(p['teamId']))
            for p in data['participants']
        ]
        identities = [
            ParticipantIdentity(
                participant_id=int(i['participantId']),
                account_id=require_str(i['player'], 'accountId'),
                summoner_name=str(i['player'].get('summonerName', '')),
            )
            for i in data['participantIdentities']
        ]
        return MatchDetail(
            match_id=match_id,
            teams=teams,
            participants=participants,
            identities=identities,
        )
