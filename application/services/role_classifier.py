"""Role classifier: most played role over a player's recent matches."""
import logging
from collections import Counter
from typing import Iterable

from domain.entities import MatchSummary
from domain.enums import Role, BOTTOM_LANE, DUO_CARRY
from domain.exceptions import NoMatchHistory
from domain.interfaces import IMatchRepository

logger = logging.getLogger(__name__)


def role_for_entry(lane: str, sub_role: str) -> Role:
    """Role of a single match: BOTTOM splits on the sub-role, other lanes map directly."""
    if (lane or "").upper() == BOTTOM_LANE:
        return Role.ADC if sub_role == DUO_CARRY else Role.SUPPORT
    return Role.from_lane(lane)


def classify_role(summaries: Iterable[MatchSummary]) -> Role:
    """
    Most frequent lane across ``summaries``.

    Ties between lanes go to the lane that appears first in the sample.
    A BOTTOM winner becomes ADC only if DUO_CARRY games strictly outnumber
    the rest, otherwise SUPPORT. An empty sample is UNKNOWN.
    """
    lane_counts: Counter = Counter()
    carry = support = 0
    for summary in summaries:
        lane = (summary.lane or "").upper()
        lane_counts[lane] += 1
        if lane == BOTTOM_LANE:
            if summary.role == DUO_CARRY:
                carry += 1
            else:
                support += 1

    if not lane_counts:
        return Role.UNKNOWN

    top_lane = max(lane_counts, key=lane_counts.__getitem__)
    if top_lane == BOTTOM_LANE:
        return Role.ADC if carry > support else Role.SUPPORT
    return Role.from_lane(top_lane)


class RoleClassifier:
    """Derives a player's top role from the match history window."""

    def __init__(self, match_repo: IMatchRepository):
        self.match_repo = match_repo

    async def classify_top_role(self, account_id: str) -> Role:
        try:
            summaries = await self.match_repo.get_match_history(account_id)
        except NoMatchHistory:
            logger.info(f"No match history for {account_id}; role unknown")
            return Role.UNKNOWN
        role = classify_role(summaries)
        logger.debug(f"Top role for {account_id}: {role.value} over {len(summaries)} matches")
        return role
