"""Domain entities."""
from .account import Account
from .champion import ChampionCatalog, UNKNOWN_CHAMPION
from .rank import Rank, average_rank_label
from .participant import Participant, RankLookup
from .live_match import ActiveGame, ActiveGameParticipant, LiveMatch
from .match_summary import MatchSummary
from .match_detail import (
    MatchDetail, TeamResult, ParticipantSlot, ParticipantIdentity, outcome_for_account
)
from .user_match import UserMatchRecord, MatchHistory, UserAccount

__all__ = [
    'Account',
    'ChampionCatalog',
    'UNKNOWN_CHAMPION',
    'Rank',
    'average_rank_label',
    'Participant',
    'RankLookup',
    'ActiveGame',
    'ActiveGameParticipant',
    'LiveMatch',
    'MatchSummary',
    'MatchDetail',
    'TeamResult',
    'ParticipantSlot',
    'ParticipantIdentity',
    'outcome_for_account',
    'UserMatchRecord',
    'MatchHistory',
    'UserAccount',
]
