"""Infrastructure layer - API clients, request pacing and repositories."""
from .api import RiotAPIClient, DataDragonClient, RateLimiter, EndpointRateLimiter, Cooldown
from .repositories import ChampionRepository, MatchRepository, SummonerRepository

__all__ = [
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'Cooldown',
    'ChampionRepository',
    'MatchRepository',
    'SummonerRepository',
]
