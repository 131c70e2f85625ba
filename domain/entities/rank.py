"""Rank entity representing a player's standing in one queue."""
from dataclasses import dataclass
from typing import Iterable, Optional

from ..enums import Tier, WinRateBand

UNRANKED_LABEL = "N/A"
DIVISIONS = ("IV", "III", "II", "I")


@dataclass(frozen=True)
class Rank:
    """Competitive standing in a single queue."""

    tier: Tier
    division: str
    queue_type: str
    wins: int
    losses: int
    hot_streak: bool
    league_points: int

    @classmethod
    def unranked(cls) -> 'Rank':
        """Sentinel for players without an entry in the requested queue."""
        return cls(
            tier=Tier.UNRANKED,
            division=UNRANKED_LABEL,
            queue_type=UNRANKED_LABEL,
            wins=-1,
            losses=-1,
            hot_streak=False,
            league_points=-1,
        )

    @property
    def is_unranked(self) -> bool:
        return self.tier is Tier.UNRANKED

    def win_rate(self) -> float:
        """Win percentage, or -1.0 when there is nothing to compute."""
        if self.wins == -1:
            return -1.0
        games = self.wins + self.losses
        if games <= 0:
            return -1.0
        return self.wins / games * 100.0

    @property
    def win_rate_band(self) -> WinRateBand:
        return WinRateBand.from_percentage(self.win_rate())

    @property
    def short_label(self) -> str:
        """Compact label such as ``G_II`` or ``CHAL``."""
        if self.is_unranked or self.tier.is_apex:
            return self.tier.short_name
        return f"{self.tier.short_name}_{self.division}"

    @property
    def ladder_score(self) -> Optional[int]:
        """Position on the ladder, four divisions per tier; None if unranked."""
        if self.is_unranked:
            return None
        tier_index = Tier.ranked_tiers().index(self.tier)
        if self.tier.is_apex:
            return tier_index * len(DIVISIONS) + len(DIVISIONS) - 1
        try:
            division_index = DIVISIONS.index(self.division)
        except ValueError:
            division_index = 0
        return tier_index * len(DIVISIONS) + division_index

    @staticmethod
    def label_for_score(score: int) -> str:
        """Inverse of ``ladder_score`` rendered as a short label."""
        tiers = Tier.ranked_tiers()
        tier_index, division_index = divmod(score, len(DIVISIONS))
        tier = tiers[max(0, min(tier_index, len(tiers) - 1))]
        if tier.is_apex:
            return tier.short_name
        return f"{tier.short_name}_{DIVISIONS[division_index]}"


def average_rank_label(ranks: Iterable[Rank]) -> str:
    """Average ladder position of the ranked players, "N/A" when none are ranked."""
    scores = [r.ladder_score for r in ranks if r.ladder_score is not None]
    if not scores:
        return UNRANKED_LABEL
    return Rank.label_for_score(sum(scores) // len(scores))
