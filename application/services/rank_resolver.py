"""Rank resolver: collapses a player's league entries to one solo-queue Rank."""
import logging
from typing import Iterable

from domain.entities import Rank
from domain.enums import RANKED_SOLO_QUEUE
from domain.interfaces import ISummonerRepository

logger = logging.getLogger(__name__)


def select_solo_rank(entries: Iterable[Rank]) -> Rank:
    """The ranked solo entry, or the unranked sentinel when there is none."""
    for entry in entries:
        if entry.queue_type == RANKED_SOLO_QUEUE:
            return entry
    return Rank.unranked()


class RankResolver:
    """Fetches league entries and keeps only the ranked solo queue."""

    def __init__(self, summoner_repo: ISummonerRepository):
        self.summoner_repo = summoner_repo

    async def resolve_rank(self, summoner_id: str) -> Rank:
        entries = await self.summoner_repo.get_league_entries(summoner_id)
        rank = select_solo_rank(entries)
        if rank.is_unranked:
            logger.debug(f"No {RANKED_SOLO_QUEUE} entry for {summoner_id}")
        return rank
