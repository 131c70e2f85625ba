"""Lookup use cases."""
from .base import LookupUseCase
from .lookup_profile import LookupProfileUseCase
from .lookup_live_match import LookupLiveMatchUseCase
from .lookup_history import LookupHistoryUseCase

__all__ = [
    'LookupUseCase',
    'LookupProfileUseCase',
    'LookupLiveMatchUseCase',
    'LookupHistoryUseCase',
]
