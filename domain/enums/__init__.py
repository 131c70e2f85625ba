"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType, RANKED_SOLO_QUEUE
from .tier import Tier
from .role import Role, BOTTOM_LANE, DUO_CARRY
from .side import Side
from .outcome import Outcome
from .win_rate_band import WinRateBand

__all__ = [
    'Region',
    'QueueType',
    'RANKED_SOLO_QUEUE',
    'Tier',
    'Role',
    'BOTTOM_LANE',
    'DUO_CARRY',
    'Side',
    'Outcome',
    'WinRateBand',
]
