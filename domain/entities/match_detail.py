"""MatchDetail entity and the correlation of a player to a team outcome."""
from dataclasses import dataclass, field
from typing import Optional

WIN_FLAG = "Win"
FIRST_TEAM_ID = 100


@dataclass(frozen=True)
class TeamResult:
    team_id: int
    win: str  # "Win" / "Fail"


@dataclass(frozen=True)
class ParticipantSlot:
    participant_id: int
    team_id: int


@dataclass(frozen=True)
class ParticipantIdentity:
    participant_id: int
    account_id: str
    summoner_name: str = ""


@dataclass(frozen=True)
class MatchDetail:
    """Full record of a completed match, reduced to what outcome lookup needs."""

    match_id: str
    teams: list[TeamResult] = field(default_factory=list)
    participants: list[ParticipantSlot] = field(default_factory=list)
    identities: list[ParticipantIdentity] = field(default_factory=list)

    def team_by_participant(self) -> dict[int, int]:
        """participant id -> team id."""
        return {p.participant_id: p.team_id for p in self.participants}

    def participant_id_for(self, account_id: str) -> Optional[int]:
        for identity in self.identities:
            if identity.account_id == account_id:
                return identity.participant_id
        return None


def outcome_for_account(detail: MatchDetail, account_id: str) -> Optional[bool]:
    """
    Whether ``account_id`` won ``detail``.

    Team 100 won iff the first listed team recorded "Win"; every other team
    id gets the negation. Returns None when the identity, the roster entry or
    the team list is missing.
    """
    if not detail.teams:
        return None
    first_team_won = detail.teams[0].win == WIN_FLAG

    participant_id = detail.participant_id_for(account_id)
    if participant_id is None:
        return None
    team_id = detail.team_by_participant().get(participant_id)
    if team_id is None:
        return None
    return first_team_won if team_id == FIRST_TEAM_ID else not first_team_won
