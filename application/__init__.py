"""Application layer - Services, use cases and blocking lookups."""
from .services import LiveMatchAggregator, MatchHistoryAggregator, RankResolver, RoleClassifier
from .use_cases import LookupProfileUseCase, LookupLiveMatchUseCase, LookupHistoryUseCase
from .lookup import lookup_profile, lookup_live_match, lookup_history

__all__ = [
    'LiveMatchAggregator',
    'MatchHistoryAggregator',
    'RankResolver',
    'RoleClassifier',
    'LookupProfileUseCase',
    'LookupLiveMatchUseCase',
    'LookupHistoryUseCase',
    'lookup_profile',
    'lookup_live_match',
    'lookup_history',
]
