"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host used by every v4 endpoint (e.g., euw1)
    - friendly: short human-friendly label for the CLI (e.g., euw)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # Oceania / other
    OC1 = "oc1"    # Oceania
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def base_url(self) -> str:
        return f"https://{self.platform_route}.api.riotgames.com"

    @property
    def friendly(self) -> str:
        """Get a human-friendly short label for console output."""
        mapping = {
            "eun1": "eune",
            "la1": "lan",
            "la2": "las",
            "oc1": "oce",
        }
        if self.value in mapping:
            return mapping[self.value]
        code = self.value
        if code and code[-1].isdigit():
            return code[:-1]
        return code

    @classmethod
    def all_regions(cls) -> list['Region']:
        """Get all available regions."""
        return list(cls)

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accept either the platform id ("euw1") or the friendly label ("euw")."""
        key = (value or "").strip().lower()
        for region in cls:
            if key in (region.value, region.friendly):
                return region
        raise ValueError(f"Unknown region: {value!r}")
