"""Infrastructure repositories module."""
from .champion_repository import ChampionRepository
from .match_repository import MatchRepository
from .summoner_repository import SummonerRepository

__all__ = [
    'ChampionRepository',
    'MatchRepository',
    'SummonerRepository',
]
