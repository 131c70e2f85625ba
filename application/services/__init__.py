"""Application services root exports."""
from .fan_out import gather_all
from .rank_resolver import RankResolver, select_solo_rank
from .role_classifier import RoleClassifier, classify_role, role_for_entry
from .live_match_aggregator import LiveMatchAggregator
from .match_history_aggregator import MatchHistoryAggregator

__all__ = [
    "gather_all",
    "RankResolver",
    "select_solo_rank",
    "RoleClassifier",
    "classify_role",
    "role_for_entry",
    "LiveMatchAggregator",
    "MatchHistoryAggregator",
]
