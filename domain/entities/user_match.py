"""User-facing report entities."""
from dataclasses import dataclass, field

from ..enums import Outcome, Role, QueueType
from .account import Account
from .champion import ChampionCatalog
from .rank import Rank


@dataclass(frozen=True)
class UserMatchRecord:
    """One row of the match history report."""

    role: Role
    queue_id: int
    champion_id: int
    outcome: Outcome

    @property
    def queue_name(self) -> str:
        return QueueType.name_for(self.queue_id)


@dataclass
class MatchHistory:
    """Recent matches of one player."""

    username: str
    records: list[UserMatchRecord] = field(default_factory=list)
    champions: ChampionCatalog = field(default_factory=ChampionCatalog)

    @property
    def wins(self) -> int:
        return sum(1 for r in self.records if r.outcome is Outcome.WIN)

    @property
    def losses(self) -> int:
        return sum(1 for r in self.records if r.outcome is Outcome.LOSS)

    def win_rate(self) -> float:
        """Win percentage over decided matches, -1.0 when none are decided."""
        decided = self.wins + self.losses
        if decided == 0:
            return -1.0
        return self.wins / decided * 100.0


@dataclass(frozen=True)
class UserAccount:
    """Profile report: identity, solo-queue rank and most played role."""

    account: Account
    rank: Rank
    top_role: Role

    @property
    def has_known_role(self) -> bool:
        return self.top_role.is_known
