"""MatchSummary entity: one entry of a player's recent-match list."""
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSummary:
    """Summary row from the matchlist endpoint."""

    match_id: str
    queue_id: int
    champion_id: int
    lane: str
    role: str  # raw sub-role (DUO_CARRY, DUO_SUPPORT, SOLO, ...)
