"""Win-rate classification."""
from enum import Enum

ABOVE_AVERAGE_THRESHOLD = 55.0
BELOW_AVERAGE_THRESHOLD = 48.0


class WinRateBand(Enum):
    """How a win percentage compares with the ladder average."""

    NOT_AVAILABLE = "n/a"
    ABOVE_AVERAGE = "above-average"
    NEUTRAL = "neutral"
    BELOW_AVERAGE = "below-average"

    @classmethod
    def from_percentage(cls, percentage: float) -> 'WinRateBand':
        """Classify a win percentage; -1 is the "no games" sentinel.

        Both thresholds are inclusive for NEUTRAL.
        """
        if percentage == -1.0:
            return cls.NOT_AVAILABLE
        if percentage > ABOVE_AVERAGE_THRESHOLD:
            return cls.ABOVE_AVERAGE
        if percentage < BELOW_AVERAGE_THRESHOLD:
            return cls.BELOW_AVERAGE
        return cls.NEUTRAL
