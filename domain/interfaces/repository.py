"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List
from ..entities import Account, ActiveGame, ChampionCatalog, MatchDetail, MatchSummary, Rank


class ISummonerRepository(ABC):
    """Interface for summoner and league data."""

    @abstractmethod
    async def get_account_by_name(self, name: str) -> Account:
        """Resolve a summoner name; raises AccountNotFound."""
        pass

    @abstractmethod
    async def get_league_entries(self, summoner_id: str) -> List[Rank]:
        """All per-queue rank entries of a summoner."""
        pass


class IMatchRepository(ABC):
    """Interface for live and historical match data."""

    @abstractmethod
    async def get_active_game(self, summoner_id: str) -> ActiveGame:
        """In-progress match; raises NotCurrentlyInMatch."""
        pass

    @abstractmethod
    async def get_match_history(self, account_id: str) -> List[MatchSummary]:
        """Recent-match window; raises NoMatchHistory."""
        pass

    @abstractmethod
    async def get_match_detail(self, match_id: str) -> MatchDetail:
        """Full record of one match; raises MatchNotFound."""
        pass


class IChampionRepository(ABC):
    """Interface for static champion data."""

    @abstractmethod
    async def get_champion_catalog(self) -> ChampionCatalog:
        """Champion names for the current game version of the configured region."""
        pass
