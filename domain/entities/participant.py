"""Participant entity representing one member of a live match roster."""
from dataclasses import dataclass
from typing import Optional

from ..enums import Side
from ..exceptions import RiotAPIError
from .rank import Rank


@dataclass(frozen=True)
class RankLookup:
    """Result slot of one concurrent rank lookup: either a Rank or the error."""

    rank: Optional[Rank] = None
    error: Optional[RiotAPIError] = None

    @classmethod
    def resolved(cls, rank: Rank) -> 'RankLookup':
        return cls(rank=rank)

    @classmethod
    def unresolved(cls, error: RiotAPIError) -> 'RankLookup':
        return cls(error=error)

    @property
    def is_resolved(self) -> bool:
        return self.rank is not None


@dataclass(frozen=True)
class Participant:
    """A player in an in-progress match."""

    summoner_name: str
    side: Side
    champion_id: int
    rank: RankLookup
