"""Domain interfaces."""
from .repository import IChampionRepository, IMatchRepository, ISummonerRepository

__all__ = [
    'IChampionRepository',
    'IMatchRepository',
    'ISummonerRepository',
]
