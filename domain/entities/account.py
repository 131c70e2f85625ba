"""Account entity representing a resolved player identity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Represents a League of Legends summoner account.

    ``summoner_id`` keys the league and spectator endpoints while
    ``account_id`` keys the matchlist endpoint; the two are not interchangeable.
    """

    summoner_id: str
    account_id: str
    puuid: str
    name: str
    level: int
