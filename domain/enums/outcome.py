"""Match outcome enumeration."""
from enum import Enum
from typing import Optional


class Outcome(Enum):
    """Outcome of one match from the point of view of the looked-up player."""

    WIN = "Win"
    LOSS = "Loss"
    UNAVAILABLE = "Unavailable"

    @classmethod
    def from_flag(cls, won: Optional[bool]) -> 'Outcome':
        if won is None:
            return cls.UNAVAILABLE
        return cls.WIN if won else cls.LOSS
