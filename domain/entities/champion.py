"""Champion catalog: champion id to display name for one game version."""
from dataclasses import dataclass, field
from typing import Dict

UNKNOWN_CHAMPION = "Unknown Champ"


@dataclass(frozen=True)
class ChampionCatalog:
    """Names keyed by the numeric champion id used in match data.

    An empty catalog is valid; every lookup then falls back to
    ``UNKNOWN_CHAMPION``.
    """

    version: str = ""
    names: Dict[int, str] = field(default_factory=dict)

    def name_for(self, champion_id: int) -> str:
        return self.names.get(champion_id, UNKNOWN_CHAMPION)
