"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .ddragon_client import DataDragonClient
from .rate_limiter import RateLimiter, EndpointRateLimiter, Cooldown

__all__ = [
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'Cooldown',
]
