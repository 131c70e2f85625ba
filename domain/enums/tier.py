"""Rank tier enumeration."""
from enum import Enum


class Tier(Enum):
    """League of Legends rank tiers, lowest first."""

    UNRANKED = "N/A"
    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Apex tiers have a single division."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def short_name(self) -> str:
        apex = {
            Tier.MASTER: "MAST",
            Tier.GRANDMASTER: "GRAND",
            Tier.CHALLENGER: "CHAL",
        }
        if self is Tier.UNRANKED:
            return self.value
        return apex.get(self, self.value[0])

    @classmethod
    def ranked_tiers(cls) -> list['Tier']:
        """All tiers except the unranked placeholder, lowest first."""
        return [t for t in cls if t is not Tier.UNRANKED]

    @classmethod
    def from_string(cls, tier_str: str) -> 'Tier':
        """Create Tier from string; raises ValueError for unknown values."""
        value = (tier_str or "").upper()
        for tier in cls:
            if tier.value == value:
                return tier
        raise ValueError(f"Unknown tier: {tier_str!r}")
