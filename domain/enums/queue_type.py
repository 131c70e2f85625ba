"""Queue type enumeration."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """Summoner's Rift queues covered by the match history window.

    Provides:
    - queue_id: numeric queue id used by the matchlist filter
    - queue_name: human-readable name
    """

    NORMAL_DRAFT = 400
    RANKED_DYNAMIC = 410
    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    BLIND_PICK = 430
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Get queue ID for API calls."""
        return self.value

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        names = {
            400: "Normal Draft",
            410: "Ranked Dynamic",
            420: "Ranked Solo",
            430: "Blind Pick",
            440: "Ranked Flex",
        }
        return names[self.value]

    @classmethod
    def history_queues(cls) -> list['QueueType']:
        """Queues requested when fetching a player's recent matches."""
        return list(cls)

    @classmethod
    def from_id(cls, queue_id: int) -> Optional['QueueType']:
        try:
            return cls(queue_id)
        except ValueError:
            return None

    @classmethod
    def name_for(cls, queue_id: int) -> str:
        """Display name for any queue id, "Unknown" for queues outside the enum."""
        queue = cls.from_id(queue_id)
        return queue.queue_name if queue else "Unknown"


# League entries identify the solo queue by name rather than by id
RANKED_SOLO_QUEUE = "RANKED_SOLO_5x5"
