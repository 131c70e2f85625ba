"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    Account, ChampionCatalog, Rank, Participant, RankLookup, LiveMatch, MatchSummary,
    MatchDetail, UserMatchRecord, MatchHistory, UserAccount,
)
from .enums import Region, QueueType, Tier, Role, Side, Outcome, WinRateBand
from .exceptions import RiotAPIError
from .interfaces import IChampionRepository, IMatchRepository, ISummonerRepository

__all__ = [
    # Entities
    'Account',
    'ChampionCatalog',
    'Rank',
    'Participant',
    'RankLookup',
    'LiveMatch',
    'MatchSummary',
    'MatchDetail',
    'UserMatchRecord',
    'MatchHistory',
    'UserAccount',
    # Enums
    'Region',
    'QueueType',
    'Tier',
    'Role',
    'Side',
    'Outcome',
    'WinRateBand',
    # Errors
    'RiotAPIError',
    # Interfaces
    'IChampionRepository',
    'IMatchRepository',
    'ISummonerRepository',
]
