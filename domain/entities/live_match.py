"""Live match entities: raw spectator data and the aggregated rosters."""
from dataclasses import dataclass, field

from ..enums import Side
from .champion import ChampionCatalog
from .participant import Participant
from .rank import average_rank_label


@dataclass(frozen=True)
class ActiveGameParticipant:
    """One entry of the spectator response, before rank enrichment."""

    summoner_name: str
    summoner_id: str
    team_id: int
    champion_id: int


@dataclass(frozen=True)
class ActiveGame:
    """Spectator view of an in-progress match."""

    game_mode: str
    game_type: str
    participants: list[ActiveGameParticipant] = field(default_factory=list)


@dataclass
class LiveMatch:
    """Two rosters of an in-progress match, each entry carrying its rank lookup."""

    game_mode: str
    game_type: str
    blue: list[Participant] = field(default_factory=list)
    red: list[Participant] = field(default_factory=list)
    champions: ChampionCatalog = field(default_factory=ChampionCatalog)

    def roster(self, side: Side) -> list[Participant]:
        return self.blue if side is Side.BLUE else self.red

    @property
    def participants(self) -> list[Participant]:
        return self.blue + self.red

    @property
    def is_complete(self) -> bool:
        """True when every participant's rank was resolved."""
        return all(p.rank.is_resolved for p in self.participants)

    def average_rank(self, side: Side) -> str:
        return average_rank_label(
            p.rank.rank for p in self.roster(side) if p.rank.is_resolved
        )
